"""SQL document store backed by SQLModel and async SQLAlchemy."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import select

from docfill.db.models import DocumentRecord
from docfill.interfaces.document import Document, DocumentType
from docfill.interfaces.store import BaseDocumentStore

logger = logging.getLogger(__name__)


class SQLDocumentStore(BaseDocumentStore):
    """Persists documents in the ``documents`` table.

    Each call runs in its own session and commits before returning.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        """Initialize the store.

        Args:
            session_maker: Factory for async sessions bound to the database.
        """
        self._session_maker = session_maker

    async def get(self, document_id: str) -> Document | None:
        async with self._session_maker() as session:
            record = await session.get(DocumentRecord, document_id)
            return record.to_document() if record is not None else None

    async def save(self, document: Document) -> Document:
        async with self._session_maker() as session:
            try:
                await session.merge(DocumentRecord.from_document(document))
                await session.commit()
            except SQLAlchemyError as e:
                logger.error(f"Failed to save document {document.id}: {e}", exc_info=True)
                await session.rollback()
                raise

        logger.debug(f"Saved document {document.id}")
        return document

    async def delete(self, document_id: str) -> bool:
        async with self._session_maker() as session:
            try:
                record = await session.get(DocumentRecord, document_id)
                if record is None:
                    return False
                await session.delete(record)
                await session.commit()
            except SQLAlchemyError as e:
                logger.error(f"Failed to delete document {document_id}: {e}", exc_info=True)
                await session.rollback()
                raise

        logger.info(f"Deleted document {document_id}")
        return True

    async def list_documents(self, document_type: DocumentType | None = None) -> list[Document]:
        query = select(DocumentRecord).order_by(DocumentRecord.modified_at.desc())  # type: ignore[union-attr]
        if document_type is not None:
            query = query.where(DocumentRecord.type == document_type)

        async with self._session_maker() as session:
            result = await session.execute(query)
            return [record.to_document() for record in result.scalars().all()]
