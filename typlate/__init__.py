"""Type-checked string templates.

Placeholders are checked against the fields of a params type when the
template is parsed, so formatting never meets an unknown name.
"""
from typlate.core.errors import (
    ParamsMismatch,
    TemplateSyntaxError,
    TyplateError,
    UnknownField,
    UnmatchedCloseBrace,
    UnmatchedOpenBrace,
    UnsupportedParamsType,
)
from typlate.domain.params import FieldRegistry, register_params, registry_for, template_params
from typlate.domain.segments import Literal, Placeholder, Segment
from typlate.runtime import Template, format_segments, parse_segments, render_text, validate

__version__ = '0.1.0'

__all__ = [
    'FieldRegistry',
    'Literal',
    'ParamsMismatch',
    'Placeholder',
    'Segment',
    'Template',
    'TemplateSyntaxError',
    'TyplateError',
    'UnknownField',
    'UnmatchedCloseBrace',
    'UnmatchedOpenBrace',
    'UnsupportedParamsType',
    'format_segments',
    'parse_segments',
    'register_params',
    'registry_for',
    'render_text',
    'template_params',
    'validate',
]
