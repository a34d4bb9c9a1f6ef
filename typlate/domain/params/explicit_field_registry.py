from typing import Any, Callable, Mapping

Accessor = Callable[[Any], Any]


class ExplicitFieldRegistry:
    """FieldRegistry backed by a hand written name -> accessor table."""

    def __init__(self, accessors: Mapping[str, Accessor]) -> None:
        self._accessors = dict(accessors)

    def field_names(self) -> tuple[str, ...]:
        return tuple(self._accessors)

    def value_of(self, instance: Any, name: str) -> str:
        return str(self._accessors[name](instance))

    def __repr__(self) -> str:
        return f'{type(self).__name__}({list(self._accessors)!r})'
