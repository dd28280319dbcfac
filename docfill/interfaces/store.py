"""Abstract base class for document stores.

Stores are plain key-value persistence for Document records. They never
interpret markup; the cached blank-space list they persist is always the
one computed from ``content`` at save time.
"""

from abc import ABC, abstractmethod

from docfill.interfaces.document import Document, DocumentType


class BaseDocumentStore(ABC):
    """Abstract base class for document persistence strategies."""

    @abstractmethod
    async def get(self, document_id: str) -> Document | None:
        """Load a document by id, or None if it does not exist."""
        ...

    @abstractmethod
    async def save(self, document: Document) -> Document:
        """Insert or replace a document and return it."""
        ...

    @abstractmethod
    async def delete(self, document_id: str) -> bool:
        """Delete a document. Returns False if it did not exist."""
        ...

    @abstractmethod
    async def list_documents(self, document_type: DocumentType | None = None) -> list[Document]:
        """List documents, newest first, optionally filtered by type."""
        ...
