"""In-memory document store for development and tests."""

import logging

from docfill.interfaces.document import Document, DocumentType
from docfill.interfaces.store import BaseDocumentStore

logger = logging.getLogger(__name__)


class InMemoryDocumentStore(BaseDocumentStore):
    """Keeps documents in a dict. Contents are lost when the process exits."""

    def __init__(self) -> None:
        self._documents: dict[str, Document] = {}

    async def get(self, document_id: str) -> Document | None:
        document = self._documents.get(document_id)
        return document.model_copy() if document is not None else None

    async def save(self, document: Document) -> Document:
        self._documents[document.id] = document.model_copy()
        logger.debug(f"Saved document {document.id} in memory")
        return document

    async def delete(self, document_id: str) -> bool:
        return self._documents.pop(document_id, None) is not None

    async def list_documents(self, document_type: DocumentType | None = None) -> list[Document]:
        documents = [
            d.model_copy()
            for d in self._documents.values()
            if document_type is None or d.type == document_type
        ]
        return sorted(documents, key=lambda d: d.modified_at, reverse=True)
