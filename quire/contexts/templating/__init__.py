"""
Templating Context

Responsibilities:
- Parses resume body text into a structured Document
- Defines template variants and user style configuration
- Resolves per-template style defaults from presets

Owns: Resume text grammar, Document model, StyleConfig and template presets
Never: Produces visual output or talks to external services
"""

from quire.contexts.templating.content_parser import parse
from quire.contexts.templating.document_structure import Document, Line, Section
from quire.contexts.templating.exceptions import ContentParsingError, StyleConfigError
from quire.contexts.templating.presets import (
    default_style,
    load_template_presets,
    resolve_color,
    resolve_font,
    template_font,
)
from quire.contexts.templating.style import HeaderStyle, StyleConfig, Template, coerce_enum

__all__ = [
    # Parsing
    "parse",
    "Document",
    "Section",
    "Line",
    # Style and templates
    "Template",
    "HeaderStyle",
    "StyleConfig",
    "coerce_enum",
    "default_style",
    "template_font",
    "load_template_presets",
    "resolve_color",
    "resolve_font",
    # Errors
    "ContentParsingError",
    "StyleConfigError",
]
