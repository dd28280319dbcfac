"""Core configuration, errors and factory components."""

from docfill.core.config import Settings, get_settings
from docfill.core.exceptions import (
    ConversionError,
    DocfillError,
    InvalidPositionError,
    NotFoundError,
    ParseError,
    UnsupportedContentError,
)

__all__ = [
    "Settings",
    "get_settings",
    "ConversionError",
    "DocfillError",
    "InvalidPositionError",
    "NotFoundError",
    "ParseError",
    "UnsupportedContentError",
]
