from typing import Any, Protocol


class FieldRegistry(Protocol):
    """Field names of a params type and per-instance string lookup."""

    def field_names(self) -> tuple[str, ...]:
        ...

    def value_of(self, instance: Any, name: str) -> str:
        ...
