"""Plain text exporter."""

import logging

from docfill.core.exceptions import ConversionError
from docfill.interfaces.document import Document
from docfill.interfaces.exporter import BaseExporter
from docfill.strategies.exporters.blocks import split_blocks

logger = logging.getLogger(__name__)


def to_text(document: Document) -> str:
    """Render a document as bare text.

    Filled blanks show their text and empty blanks an underscore run of
    their recorded width. Fill text is kept verbatim.
    """
    return "\n".join(block.text for block in split_blocks(document.content))


class TextExporter(BaseExporter):
    """Exports documents as encoded plain text."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def render(self, document: Document) -> bytes:
        text = to_text(document)
        try:
            return text.encode(self._encoding)
        except (UnicodeEncodeError, LookupError) as e:
            logger.error(f"Text export failed for {document.id}: {e}")
            raise ConversionError(f"Failed to export document to text format: {e}") from e

    @property
    def extension(self) -> str:
        return "txt"

    @property
    def media_type(self) -> str:
        return "text/plain"
