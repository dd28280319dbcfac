"""Concrete source converter implementations."""

from docfill.strategies.converters.word import DocxConverter
from docfill.strategies.converters.markup import HtmlConverter
from docfill.strategies.converters.text import PlainTextConverter

__all__ = [
    "DocxConverter",
    "HtmlConverter",
    "PlainTextConverter",
]
