from __future__ import annotations

import pytest

from typlate.core.errors import UnmatchedCloseBrace, UnmatchedOpenBrace
from typlate.domain.segments import Literal, Placeholder
from typlate.runtime.parser import parse_segments


def test_parse_literals_and_placeholders() -> None:
    segments = parse_segments('Hello {name}, you are {age}!')

    assert segments == (
        Literal('Hello '),
        Placeholder('name'),
        Literal(', you are '),
        Placeholder('age'),
        Literal('!'),
    )


def test_placeholder_positions_point_at_open_brace() -> None:
    segments = parse_segments('ab{x}c{y}')

    positions = [s.position for s in segments if isinstance(s, Placeholder)]
    assert positions == [2, 6]


def test_escapes_merge_into_one_literal() -> None:
    assert parse_segments('{{x}} and }}{{') == (Literal('{x} and }{'),)


def test_escape_next_to_placeholder() -> None:
    assert parse_segments('{{{qux}}}') == (Literal('{'), Placeholder('qux'), Literal('}'))


def test_empty_input_has_no_segments() -> None:
    assert parse_segments('') == ()


def test_empty_placeholder_is_syntactically_valid() -> None:
    assert parse_segments('{}') == (Placeholder(''),)


def test_placeholder_name_is_verbatim() -> None:
    assert parse_segments('{ name }') == (Placeholder(' name '),)


def test_open_brace_inside_name_is_part_of_name() -> None:
    assert parse_segments('{a{b}') == (Placeholder('a{b'),)


def test_first_close_brace_ends_placeholder() -> None:
    with pytest.raises(UnmatchedCloseBrace) as exc_info:
        parse_segments('{a}}')

    assert exc_info.value.position == 3


def test_unmatched_open_brace() -> None:
    with pytest.raises(UnmatchedOpenBrace) as exc_info:
        parse_segments('Hello {name')

    assert exc_info.value.position == 6
    assert 'position 6' in str(exc_info.value)


def test_unmatched_close_brace() -> None:
    with pytest.raises(UnmatchedCloseBrace) as exc_info:
        parse_segments('Hello name}')

    assert exc_info.value.position == 10


def test_trailing_single_open_brace() -> None:
    with pytest.raises(UnmatchedOpenBrace):
        parse_segments('abc{')


def test_syntax_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        parse_segments('}')
