# ============================================================
# Parsed template segments
# ============================================================
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Literal:
    """Text emitted verbatim, with escapes already resolved."""

    text: str


@dataclass(frozen=True)
class Placeholder:
    """Reference to a params field, resolved at format time.

    ``position`` is the index of the opening brace in the source text and is
    only used for diagnostics.
    """

    name: str
    position: int = field(default=0, compare=False)


Segment = Union[Literal, Placeholder]
