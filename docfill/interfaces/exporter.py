"""Abstract base class for document exporters."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from docfill.interfaces.document import Document


@dataclass(frozen=True)
class ExportArtifact:
    """A named byte stream ready for download.

    Attributes:
        filename: ``<document-name>.<extension>``, not sanitized.
        media_type: MIME type of ``data``.
        data: The serialized document.
    """

    filename: str
    media_type: str
    data: bytes


class BaseExporter(ABC):
    """Abstract base class for export strategies.

    Concrete exporters implement ``render``; ``export`` wraps the bytes in
    an artifact named after the document.
    """

    @abstractmethod
    def render(self, document: Document) -> bytes:
        """Serialize the document.

        Raises:
            ConversionError: If the resolved document cannot be serialized.
        """
        ...

    @property
    @abstractmethod
    def extension(self) -> str:
        """Return the file extension, without the dot."""
        ...

    @property
    @abstractmethod
    def media_type(self) -> str:
        """Return the MIME type of rendered output."""
        ...

    def export(self, document: Document) -> ExportArtifact:
        return ExportArtifact(
            filename=f"{document.name}.{self.extension}",
            media_type=self.media_type,
            data=self.render(document),
        )
