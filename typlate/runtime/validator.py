"""Cross-check placeholders against the fields of a params type."""

from __future__ import annotations

from typing import AbstractSet, Iterable

from typlate.core.errors import UnknownField
from typlate.domain.segments import Placeholder, Segment


def validate(segments: Iterable[Segment], known_fields: AbstractSet[str]) -> None:
    """Check that every placeholder names a known field.

    Fails fast on the first offending placeholder in source order. Pure: no
    state is touched, so calling it again gives the same outcome.

    Raises:
        UnknownField: For the first placeholder whose name is not in
            ``known_fields``.
    """
    for segment in segments:
        if isinstance(segment, Placeholder) and segment.name not in known_fields:
            raise UnknownField(segment.name, segment.position)
