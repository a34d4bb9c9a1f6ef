"""Parser, validator, formatter and the template handle built on them."""
from .parser import parse_segments
from .validator import validate
from .formatter import format_segments, render_text
from .template import Template
