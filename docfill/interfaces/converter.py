"""Abstract base class for source converters.

A converter turns uploaded bytes into markup before blank-space detection
runs. The Strategy Pattern allows different source kinds to be handled
interchangeably.
"""

import enum
import os
from abc import ABC, abstractmethod

from docfill.core.exceptions import UnsupportedContentError


class SourceKind(str, enum.Enum):
    """Kinds of uploaded content the pipeline accepts."""

    WORD = "word"
    TEXT = "text"
    MARKUP = "markup"


_MEDIA_TYPES: dict[str, SourceKind] = {
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": SourceKind.WORD,
    "text/plain": SourceKind.TEXT,
    "text/html": SourceKind.MARKUP,
}

_EXTENSIONS: dict[str, SourceKind] = {
    ".docx": SourceKind.WORD,
    ".txt": SourceKind.TEXT,
    ".html": SourceKind.MARKUP,
    ".htm": SourceKind.MARKUP,
}


def infer_source_kind(filename: str, media_type: str | None = None) -> SourceKind:
    """Infer the source kind from a declared media type or the file extension.

    The media type wins when it is recognized; the extension is the fallback.

    Raises:
        UnsupportedContentError: If neither identifies a supported kind.
    """
    if media_type:
        kind = _MEDIA_TYPES.get(media_type.split(";")[0].strip().lower())
        if kind is not None:
            return kind

    _, ext = os.path.splitext(filename)
    kind = _EXTENSIONS.get(ext.lower())
    if kind is None:
        raise UnsupportedContentError(
            f"Unsupported file type: {filename!r} ({media_type or 'no media type'}). "
            "Upload a .docx, .txt or .html file."
        )
    return kind


class BaseConverter(ABC):
    """Abstract base class for source-to-markup conversion strategies.

    Example:
        ```python
        class HtmlConverter(BaseConverter):
            async def convert(self, data: bytes) -> str:
                return data.decode("utf-8")
        ```
    """

    @abstractmethod
    async def convert(self, data: bytes) -> str:
        """Convert raw source bytes to markup.

        Args:
            data: The uploaded file content.

        Returns:
            Markup ready for blank-space detection.

        Raises:
            ParseError: If the bytes cannot be converted.
        """
        ...

    @property
    @abstractmethod
    def kind(self) -> SourceKind:
        """Return the source kind this converter handles."""
        ...
