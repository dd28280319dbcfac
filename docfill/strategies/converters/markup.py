"""Markup converter: markup uploads are already in the target format."""

import logging

from docfill.core.exceptions import ParseError
from docfill.interfaces.converter import BaseConverter, SourceKind

logger = logging.getLogger(__name__)


class HtmlConverter(BaseConverter):
    """Decodes markup uploads verbatim."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    async def convert(self, data: bytes) -> str:
        try:
            return data.decode(self._encoding)
        except UnicodeDecodeError as e:
            logger.error(f"Encoding error reading markup upload: {e}")
            raise ParseError(f"Markup is not valid {self._encoding}: {e}") from e

    @property
    def kind(self) -> SourceKind:
        return SourceKind.MARKUP
