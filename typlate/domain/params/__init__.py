"""This module maps params types to the fields templates may reference."""
from .field_registry import FieldRegistry
from .attribute_field_registry import AttributeFieldRegistry
from .explicit_field_registry import Accessor, ExplicitFieldRegistry
from .resolver import clear_registries, register_params, registry_for, template_params
