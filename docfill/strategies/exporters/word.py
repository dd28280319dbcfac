"""Word document exporter.

Builds a .docx with python-docx, one Word paragraph per source paragraph.
"""

import io
import logging

from docfill.core.exceptions import ConversionError
from docfill.interfaces.document import Document
from docfill.interfaces.exporter import BaseExporter
from docfill.strategies.exporters.blocks import split_blocks

logger = logging.getLogger(__name__)


def to_word_like(document: Document) -> bytes:
    """Render a document as .docx bytes.

    Each paragraph of the markup (or each line, when it has no paragraph
    elements) becomes one Word paragraph, empty ones included. Headings map
    to Word heading styles and list items to the bullet list style.

    Raises:
        ConversionError: If python-docx cannot serialize the text.
    """
    try:
        from docx import Document as DocxDocument
    except ImportError:
        logger.error("python-docx not installed. Run: pip install python-docx")
        raise

    blocks = split_blocks(document.content)

    try:
        doc = DocxDocument()
        for block in blocks:
            if block.heading_level is not None:
                doc.add_heading(block.text, level=block.heading_level)
            elif block.list_item:
                doc.add_paragraph(block.text, style="List Bullet")
            else:
                doc.add_paragraph(block.text)

        buffer = io.BytesIO()
        doc.save(buffer)
    except Exception as e:
        logger.error(f"Word export failed for {document.id}: {e}", exc_info=True)
        raise ConversionError(f"Failed to export document to Word format: {e}") from e

    logger.info(f"Word export built for {document.id}: {len(blocks)} paragraphs")
    return buffer.getvalue()


class DocxExporter(BaseExporter):
    """Exports documents as Word files."""

    def render(self, document: Document) -> bytes:
        return to_word_like(document)

    @property
    def extension(self) -> str:
        return "docx"

    @property
    def media_type(self) -> str:
        return "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
