"""Concrete exporter implementations."""

from docfill.strategies.exporters.record import JsonExporter
from docfill.strategies.exporters.markup import HtmlExporter, to_markup_file
from docfill.strategies.exporters.text import TextExporter, to_text
from docfill.strategies.exporters.word import DocxExporter, to_word_like

__all__ = [
    "DocxExporter",
    "HtmlExporter",
    "JsonExporter",
    "TextExporter",
    "to_markup_file",
    "to_text",
    "to_word_like",
]
