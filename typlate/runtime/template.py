"""Type-checked template handle.

A ``Template`` is parsed and validated once against the fields of its params
type, then formatted any number of times:

    >>> @dataclass
    ... class Person:
    ...     name: str
    ...     age: int
    >>> t = Template('Hello {name}, you are {age}!', Person)
    >>> t.format(Person('Alice', 30))
    'Hello Alice, you are 30!'

``Template[Person]`` is also a pydantic field type that reads and writes the
template as a plain string.
"""

from __future__ import annotations

import logging
from functools import partial, total_ordering
from typing import Any, Generic, TypeVar, get_args, get_origin

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from typlate.core.errors import ParamsMismatch, TyplateError
from typlate.domain.params import FieldRegistry, registry_for
from typlate.domain.segments import Literal, Placeholder, Segment
from typlate.observability.tracing import log_event
from .formatter import format_segments, render_text
from .parser import parse_segments
from .validator import validate

P = TypeVar('P')


@total_ordering
class Template(Generic[P]):
    """Immutable template bound to one params type."""

    __slots__ = ('_raw', '_params', '_registry', '_segments')

    def __init__(self, raw: str, params: type[P]) -> None:
        """Parse and validate template text.

        Args:
            raw: Template text with ``{field}`` placeholders.
            params: The params type placeholders are checked against.

        Raises:
            UnmatchedOpenBrace: If a ``{`` is never closed.
            UnmatchedCloseBrace: If a lone ``}`` appears.
            UnknownField: If a placeholder names an undeclared field.
            UnsupportedParamsType: If ``params`` exposes no fields.
        """
        if not isinstance(raw, str):
            raise TypeError(f'Template text must be str, not {type(raw).__name__}')
        registry = registry_for(params)
        try:
            segments = parse_segments(raw)
            validate(segments, frozenset(registry.field_names()))
        except TyplateError as exc:
            log_event(
                'template.rejected',
                level=logging.WARNING,
                params=params.__qualname__,
                error=type(exc).__name__,
                message=str(exc),
                position=getattr(exc, 'position', None),
            )
            raise

        object.__setattr__(self, '_raw', raw)
        object.__setattr__(self, '_params', params)
        object.__setattr__(self, '_registry', registry)
        object.__setattr__(self, '_segments', segments)
        log_event(
            'template.parsed',
            params=params.__qualname__,
            segments=len(segments),
            placeholders=list(self.placeholders),
        )

    @classmethod
    def parse(cls, raw: str, params: type[P]) -> Template[P]:
        return cls(raw, params)

    @property
    def raw(self) -> str:
        """The source text exactly as given."""
        return self._raw

    @property
    def params(self) -> type[P]:
        return self._params

    @property
    def registry(self) -> FieldRegistry:
        return self._registry

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    @property
    def placeholders(self) -> tuple[str, ...]:
        """Placeholder names in source order, repeats included."""
        return tuple(s.name for s in self._segments if isinstance(s, Placeholder))

    def validate(self) -> None:
        """Re-check the placeholders against the params fields. Has no side effects."""
        validate(self._segments, frozenset(self._registry.field_names()))

    def format(self, params: P) -> str:
        """Format the template with the provided parameter values.

        Args:
            params: An instance of the params type the template is bound to.

        Returns:
            The template text with every placeholder substituted.

        Raises:
            ParamsMismatch: If ``params`` is not an instance of the bound type.
        """
        if not isinstance(params, self._params):
            raise ParamsMismatch(self._params, type(params))
        return format_segments(self._segments, params, self._registry)

    def to_text(self) -> str:
        """Canonical template text; parsing it gives an equal template."""
        return render_text(self._segments)

    def _sort_key(self) -> tuple[tuple[int, str], ...]:
        return tuple(
            (0, s.text) if isinstance(s, Literal) else (1, s.name) for s in self._segments
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Template):
            return NotImplemented
        return self._params is other._params and self._segments == other._segments

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Template) or self._params is not other._params:
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash((self._params, self._segments))

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f'{type(self).__name__}[{self._params.__qualname__}]({self.to_text()!r})'

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._raw, self._params))

    @classmethod
    def _coerce(cls, params: type[P], value: str | Template[Any]) -> Template[P]:
        if isinstance(value, Template):
            if value.params is params:
                return value
            value = value.raw
        return cls(value, params)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        if get_origin(source_type) is None or not get_args(source_type):
            raise TypeError('Template fields need a params type, e.g. Template[MyParams]')
        params = get_args(source_type)[0]
        registry_for(params)
        return core_schema.no_info_after_validator_function(
            partial(cls._coerce, params),
            core_schema.json_or_python_schema(
                json_schema=core_schema.str_schema(),
                python_schema=core_schema.union_schema(
                    [core_schema.is_instance_schema(cls), core_schema.str_schema()]
                ),
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda t: t.to_text(), return_schema=core_schema.str_schema()
            ),
        )
