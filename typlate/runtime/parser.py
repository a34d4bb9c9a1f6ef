"""Template text parser.

Turns raw template text into an ordered tuple of segments:

- ``{{`` and ``}}`` are escapes for literal braces
- ``{name}`` is a placeholder; the name is taken verbatim, the first ``}``
  closes it and a ``{`` inside it is part of the name
- a lone ``}`` is an error, and so is a ``{`` that is never closed
"""

from __future__ import annotations

from typlate.core.errors import UnmatchedCloseBrace, UnmatchedOpenBrace
from typlate.domain.segments import Literal, Placeholder, Segment


def parse_segments(raw: str) -> tuple[Segment, ...]:
    """Parse template text into segments.

    Args:
        raw: Template text containing ``{field}`` placeholders.

    Returns:
        Literal and placeholder segments in source order. Adjacent literal
        text is merged and empty literals are never produced.

    Raises:
        UnmatchedOpenBrace: If a ``{`` is not closed before the end of input.
        UnmatchedCloseBrace: If a ``}`` appears outside a placeholder.
    """
    segments: list[Segment] = []
    text: list[str] = []
    i = 0
    end = len(raw)

    while i < end:
        char = raw[i]
        if char == '{':
            if raw.startswith('{', i + 1):
                text.append('{')
                i += 2
                continue
            close = raw.find('}', i + 1)
            if close < 0:
                raise UnmatchedOpenBrace(i)
            if text:
                segments.append(Literal(''.join(text)))
                text.clear()
            segments.append(Placeholder(raw[i + 1:close], position=i))
            i = close + 1
        elif char == '}':
            if not raw.startswith('}', i + 1):
                raise UnmatchedCloseBrace(i)
            text.append('}')
            i += 2
        else:
            text.append(char)
            i += 1

    if text:
        segments.append(Literal(''.join(text)))
    return tuple(segments)
