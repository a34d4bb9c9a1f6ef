from __future__ import annotations

import pytest

from typlate.core.errors import UnknownField
from typlate.runtime.parser import parse_segments
from typlate.runtime.validator import validate

FIELDS = frozenset({'name', 'age'})


def test_known_fields_pass() -> None:
    validate(parse_segments('{name} is {age}'), FIELDS)


def test_unknown_field_reports_name_and_position() -> None:
    with pytest.raises(UnknownField) as exc_info:
        validate(parse_segments('Hi {email}'), FIELDS)

    assert exc_info.value.name == 'email'
    assert exc_info.value.position == 3


def test_first_offending_placeholder_is_reported() -> None:
    with pytest.raises(UnknownField) as exc_info:
        validate(parse_segments('{name} {phone} {email}'), FIELDS)

    assert exc_info.value.name == 'phone'


def test_empty_placeholder_is_unknown() -> None:
    with pytest.raises(UnknownField) as exc_info:
        validate(parse_segments('{}'), FIELDS)

    assert exc_info.value.name == ''


def test_validation_is_idempotent() -> None:
    segments = parse_segments('{name} {age}')

    assert validate(segments, FIELDS) is None
    assert validate(segments, FIELDS) is None
    assert segments == parse_segments('{name} {age}')


def test_repeated_failure_is_identical() -> None:
    segments = parse_segments('{nope}')
    errors = []
    for _ in range(2):
        with pytest.raises(UnknownField) as exc_info:
            validate(segments, FIELDS)
        errors.append((exc_info.value.name, exc_info.value.position))

    assert errors[0] == errors[1]
