"""Structured event logging.

Events are JSON objects written to the ``typlate`` logger, so applications
decide where they end up. Nothing is emitted unless ``trace_events`` is on.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from typlate.config import get_settings

logger = logging.getLogger('typlate')


def tracing_enabled() -> bool:
    return get_settings().trace_events


def log_event(event: str, *, level: int = logging.DEBUG, **fields: Any) -> None:
    if not tracing_enabled():
        return
    payload: dict[str, Any] = {'event': event, **fields}
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))
