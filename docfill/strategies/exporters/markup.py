"""Markup exporter: the current markup, byte for byte."""

import logging

from docfill.core.exceptions import ConversionError
from docfill.interfaces.document import Document
from docfill.interfaces.exporter import BaseExporter

logger = logging.getLogger(__name__)


def to_markup_file(document: Document, encoding: str = "utf-8") -> bytes:
    """Encode the document's markup without touching any tag.

    Raises:
        ConversionError: If the markup cannot be encoded.
    """
    try:
        return document.content.encode(encoding)
    except (UnicodeEncodeError, LookupError) as e:
        logger.error(f"Markup export failed for {document.id}: {e}")
        raise ConversionError(f"Failed to export document to HTML format: {e}") from e


class HtmlExporter(BaseExporter):
    """Exports documents as markup files."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def render(self, document: Document) -> bytes:
        return to_markup_file(document, self._encoding)

    @property
    def extension(self) -> str:
        return "html"

    @property
    def media_type(self) -> str:
        return "text/html"
