"""Resolve the field registry of a params type.

A registry is derived once per type and cached. Explicit registrations
take precedence over anything derived from the class itself.
"""

from __future__ import annotations

import dataclasses
import threading
import weakref
from typing import Callable, Iterable, Mapping, TypeVar, Union

from pydantic import BaseModel

from typlate.core.errors import UnsupportedParamsType
from typlate.observability.tracing import log_event
from .attribute_field_registry import AttributeFieldRegistry
from .explicit_field_registry import Accessor, ExplicitFieldRegistry
from .field_registry import FieldRegistry


T = TypeVar('T', bound=type)

FieldSpec = Union[Mapping[str, Accessor], Iterable[str]]

_lock = threading.Lock()
_explicit: weakref.WeakKeyDictionary[type, FieldRegistry] = weakref.WeakKeyDictionary()
_registries: weakref.WeakKeyDictionary[type, FieldRegistry] = weakref.WeakKeyDictionary()


def _attribute_registry(names: Iterable[str]) -> AttributeFieldRegistry:
    if isinstance(names, str):
        raise TypeError(
            f'Template fields must be a collection of names, not the string {names!r}'
        )
    return AttributeFieldRegistry(names)


def _require_type(params: object) -> None:
    if not isinstance(params, type):
        raise UnsupportedParamsType(params)


def _derive(params: type) -> tuple[FieldRegistry, str]:
    _require_type(params)
    # Registrations are inherited, nearest class first.
    for base in params.__mro__:
        registry = _explicit.get(base)
        if registry is not None:
            return registry, 'explicit'
    declared = getattr(params, '__template_fields__', None)
    if declared is not None:
        return _attribute_registry(declared), '__template_fields__'
    if issubclass(params, BaseModel):
        names = [*params.model_fields, *params.model_computed_fields]
        return AttributeFieldRegistry(names), 'pydantic'
    if dataclasses.is_dataclass(params):
        return AttributeFieldRegistry(f.name for f in dataclasses.fields(params)), 'dataclass'
    if issubclass(params, tuple) and hasattr(params, '_fields'):
        return AttributeFieldRegistry(params._fields), 'namedtuple'
    raise UnsupportedParamsType(params)


def registry_for(params: type) -> FieldRegistry:
    """Return the field registry of ``params``.

    An explicit registration on ``params`` or any of its bases wins over
    fields derived from the class itself.

    Args:
        params: The params type templates are validated against.

    Returns:
        The cached registry for the type.

    Raises:
        UnsupportedParamsType: If ``params`` is not a class, or no registry
            is registered or derivable for it.
    """
    _require_type(params)
    registry = _registries.get(params)
    if registry is not None:
        return registry
    with _lock:
        registry = _registries.get(params)
        if registry is None:
            registry, source = _derive(params)
            _registries[params] = registry
            log_event(
                'registry.resolved',
                params=params.__qualname__,
                source=source,
                fields=list(registry.field_names()),
            )
    return registry


def register_params(params: type, fields: FieldSpec) -> FieldRegistry:
    """Register the template fields of ``params`` explicitly.

    Subclasses of ``params`` inherit the registration unless they are
    registered themselves.

    Args:
        params: The params type.
        fields: Either a mapping of field name to accessor callable, or an
            iterable of attribute names.

    Returns:
        The registry now bound to ``params``.

    Raises:
        UnsupportedParamsType: If ``params`` is not a class.
        TypeError: If ``fields`` is a single string.
    """
    _require_type(params)
    if isinstance(fields, Mapping):
        registry: FieldRegistry = ExplicitFieldRegistry(fields)
    else:
        registry = _attribute_registry(fields)
    with _lock:
        _explicit[params] = registry
        # Subclasses may have cached a registry derived before this one existed.
        _registries.clear()
    log_event(
        'registry.resolved',
        params=params.__qualname__,
        source='explicit',
        fields=list(registry.field_names()),
    )
    return registry


def template_params(fields: FieldSpec) -> Callable[[T], T]:
    """Class decorator form of :func:`register_params`.

    Examples:
        >>> @template_params({'full_name': lambda u: f'{u.first} {u.last}'})
        ... class User:
        ...     def __init__(self, first, last):
        ...         self.first, self.last = first, last
    """

    def decorator(cls: T) -> T:
        register_params(cls, fields)
        return cls

    return decorator


def clear_registries() -> None:
    with _lock:
        _explicit.clear()
        _registries.clear()
