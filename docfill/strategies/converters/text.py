"""Plain text converter.

A lightweight converter for pasted or uploaded text that doesn't need
any external library.
"""

import html
import logging

from docfill.core.exceptions import ParseError
from docfill.interfaces.converter import BaseConverter, SourceKind

logger = logging.getLogger(__name__)


class PlainTextConverter(BaseConverter):
    """Wraps plain text into paragraph markup.

    Blank lines separate paragraphs; single newlines become ``<br>``.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the converter.

        Args:
            encoding: The character encoding of incoming bytes.
        """
        self._encoding = encoding

    async def convert(self, data: bytes) -> str:
        try:
            text = data.decode(self._encoding)
        except UnicodeDecodeError as e:
            logger.error(f"Encoding error reading text upload: {e}")
            raise ParseError(f"Text is not valid {self._encoding}: {e}") from e

        return self.text_to_markup(text)

    @staticmethod
    def text_to_markup(text: str) -> str:
        """Convert text to ``<p>`` paragraphs, escaping markup characters."""
        text = html.escape(text.replace("\r\n", "\n"), quote=False)
        paragraphs = text.split("\n\n")
        return "".join(f"<p>{p.replace(chr(10), '<br>')}</p>" for p in paragraphs)

    @property
    def kind(self) -> SourceKind:
        return SourceKind.TEXT
