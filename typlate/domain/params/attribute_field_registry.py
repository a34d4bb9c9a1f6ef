from typing import Any, Iterable


class AttributeFieldRegistry:
    """
    FieldRegistry reading plain attributes.

    Each field name is an attribute of the instance and its display string is
    ``str(value)``. Backs dataclasses, pydantic models, NamedTuples and
    classes declaring ``__template_fields__``.
    """

    def __init__(self, names: Iterable[str]) -> None:
        self._names = tuple(dict.fromkeys(names))

    def field_names(self) -> tuple[str, ...]:
        return self._names

    def value_of(self, instance: Any, name: str) -> str:
        return str(getattr(instance, name))

    def __repr__(self) -> str:
        return f'{type(self).__name__}({list(self._names)!r})'
