"""Word document converter.

Reads .docx files with python-docx and renders body paragraphs and table
cells as markup, in document order.
"""

import html
import io
import logging
import re

from docfill.core.exceptions import ParseError
from docfill.interfaces.converter import BaseConverter, SourceKind

logger = logging.getLogger(__name__)

_HEADING_STYLE = re.compile(r"^Heading (\d)$")


class DocxConverter(BaseConverter):
    """Converts Word documents to paragraph markup.

    Heading styles become ``<h1>``-``<h6>``; every other paragraph becomes
    ``<p>``. Empty paragraphs are kept as ``<p></p>`` so vertical spacing
    survives the round trip.
    """

    async def convert(self, data: bytes) -> str:
        """Convert .docx bytes to markup.

        Raises:
            ParseError: If python-docx cannot open the document.
        """
        try:
            from docx import Document
            from docx.table import Table
        except ImportError:
            logger.error("python-docx not installed. Run: pip install python-docx")
            raise

        try:
            doc = Document(io.BytesIO(data))
        except Exception as e:
            logger.error(f"Word document could not be opened: {e}")
            raise ParseError(f"Failed to parse Word document: {e}") from e

        blocks: list[str] = []
        for item in doc.iter_inner_content():
            if isinstance(item, Table):
                for row in item.rows:
                    for cell in row.cells:
                        blocks.extend(self._render_paragraph(p) for p in cell.paragraphs)
            else:
                blocks.append(self._render_paragraph(item))

        logger.info(f"Word document converted: {len(blocks)} blocks")
        return "".join(blocks)

    def _render_paragraph(self, paragraph) -> str:
        text = html.escape(paragraph.text, quote=False).replace("\n", "<br>")
        style_name = paragraph.style.name if paragraph.style is not None else ""

        if style_name == "Title":
            return f"<h1>{text}</h1>"
        heading = _HEADING_STYLE.match(style_name)
        if heading and 1 <= int(heading.group(1)) <= 6:
            level = heading.group(1)
            return f"<h{level}>{text}</h{level}>"
        return f"<p>{text}</p>"

    @property
    def kind(self) -> SourceKind:
        return SourceKind.WORD
