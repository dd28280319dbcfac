"""Template engine strategies.

Implements named-variable extraction and substitution for ``{{name}}``
templates, plus the built-in template catalog.
"""

from docfill.strategies.template_engine.catalog import BUILTIN_TEMPLATES, TemplateCatalog
from docfill.strategies.template_engine.models import VariableTemplate
from docfill.strategies.template_engine.substitution import (
    extract_variables,
    promote_to_variable,
    substitute,
)

__all__ = [
    "BUILTIN_TEMPLATES",
    "TemplateCatalog",
    "VariableTemplate",
    "extract_variables",
    "promote_to_variable",
    "substitute",
]
