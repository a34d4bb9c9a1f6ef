"""Render parsed segments."""

from __future__ import annotations

from typing import Any, Iterable

from typlate.domain.params import FieldRegistry
from typlate.domain.segments import Literal, Segment


def format_segments(segments: Iterable[Segment], instance: Any, registry: FieldRegistry) -> str:
    """Substitute placeholders with the display strings of ``instance``.

    Args:
        segments: Validated segments.
        instance: Params instance the segments were validated for.
        registry: Field registry of the params type.

    Returns:
        The formatted text.
    """
    out: list[str] = []
    for segment in segments:
        if isinstance(segment, Literal):
            out.append(segment.text)
        else:
            out.append(registry.value_of(instance, segment.name))
    return ''.join(out)


def render_text(segments: Iterable[Segment]) -> str:
    """Write segments back as template text, re-escaping literal braces."""
    out: list[str] = []
    for segment in segments:
        if isinstance(segment, Literal):
            out.append(segment.text.replace('{', '{{').replace('}', '}}'))
        else:
            out.append('{' + segment.name + '}')
    return ''.join(out)
