from __future__ import annotations

import pytest

from typlate.config import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv('TYPLATE_TRACE_EVENTS', raising=False)
    monkeypatch.delenv('TYPLATE_LOG_LEVEL', raising=False)
    reset_settings()
    yield
    reset_settings()
