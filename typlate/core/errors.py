# ---------------------------------
# TYPED EXCEPTIONS
# ---------------------------------
from __future__ import annotations

from typing import Any


class TyplateError(Exception):
    """Base class for every error raised by typlate."""


class TemplateSyntaxError(TyplateError, ValueError):
    """Raised when template text is not well formed."""

    def __init__(self, message: str, position: int) -> None:
        self.position = position
        super().__init__(f'{message} at position {position}')


class UnmatchedOpenBrace(TemplateSyntaxError):
    def __init__(self, position: int) -> None:
        super().__init__('Unclosed bracket in template', position)


class UnmatchedCloseBrace(TemplateSyntaxError):
    def __init__(self, position: int) -> None:
        super().__init__('Unmatched closing bracket', position)


class UnknownField(TyplateError, ValueError):
    """Raised when a placeholder names a field the params type does not declare."""

    def __init__(self, name: str, position: int) -> None:
        self.name = name
        self.position = position
        super().__init__(f'Unknown field name: {name!r} at position {position}')


class ParamsMismatch(TyplateError, TypeError):
    """Raised when a template is formatted with an instance of the wrong params type."""

    def __init__(self, expected: type, actual: type) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f'Template expects {expected.__qualname__} params, got {actual.__qualname__}'
        )


class UnsupportedParamsType(TyplateError, TypeError):
    """Raised when no field registry can be derived for a type."""

    def __init__(self, params: Any) -> None:
        self.params = params
        name = getattr(params, '__qualname__', repr(params))
        super().__init__(
            f'Cannot derive template fields for {name}: use a dataclass, a pydantic model, '
            f'a NamedTuple, __template_fields__ or register_params()'
        )
