"""Document workflows.

The service is the single writer for each document: every mutation runs
under a per-document lock, loads the latest record, applies one pure
transform and saves the result. The blank-space list is recomputed from
the new content, so it never drifts from the markup.
"""

import asyncio
import logging
from collections import defaultdict
from pathlib import PurePath

from docfill.core.exceptions import NotFoundError, UnsupportedContentError
from docfill.core.factory import ComponentFactory
from docfill.interfaces.converter import SourceKind, infer_source_kind
from docfill.interfaces.document import (
    MAX_NAME_LENGTH,
    Document,
    DocumentType,
    new_document_id,
)
from docfill.interfaces.exporter import ExportArtifact
from docfill.interfaces.store import BaseDocumentStore
from docfill.strategies.blank_space import (
    BlankSpace,
    EmptyBlankSpace,
    adjacent_blank_space,
    detect,
    fill,
    find_blank_space,
    insert,
)

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = " (Template)"


def _template_name(source_name: str) -> str:
    """Default clone name, with the source name cut to fit the limit."""
    return source_name[: MAX_NAME_LENGTH - len(TEMPLATE_SUFFIX)] + TEMPLATE_SUFFIX


class DocumentService:
    """Ingestion, editing, blank-space and export workflows over a store."""

    def __init__(
        self,
        store: BaseDocumentStore,
        factory: ComponentFactory,
    ) -> None:
        """Initialize the service.

        Args:
            store: Persistence for Document records.
            factory: Source of converters, exporters and settings.
        """
        self._store = store
        self._factory = factory
        self._settings = factory.settings
        self._locks: defaultdict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

    # =========================================================================
    # Ingestion
    # =========================================================================

    async def ingest(
        self,
        filename: str,
        data: bytes,
        media_type: str | None = None,
    ) -> Document:
        """Create a system document from an uploaded file.

        The document is named after the file without its extension.

        Raises:
            UnsupportedContentError: If the file kind is unknown or too large.
            ParseError: If the file cannot be converted to markup.
        """
        kind = infer_source_kind(filename, media_type)
        name = PurePath(filename).stem or filename
        return await self.create(name, data, kind)

    async def create(
        self,
        name: str,
        data: bytes,
        kind: SourceKind = SourceKind.MARKUP,
        detect_blanks: bool = True,
    ) -> Document:
        """Convert source bytes, detect blank spaces and store the result.

        Args:
            name: Document name.
            data: Raw source content.
            kind: How to interpret ``data``.
            detect_blanks: Whether to run blank-space detection.

        Returns:
            The stored system document.
        """
        if len(data) > self._settings.max_upload_bytes:
            raise UnsupportedContentError(
                f"File is too large ({len(data)} bytes). "
                f"Maximum size is {self._settings.max_upload_bytes} bytes."
            )

        logger.info(f"Ingesting '{name}' as {kind.value} ({len(data)} bytes)")

        markup = await self._factory.get_converter(kind).convert(data)
        if detect_blanks:
            markup = detect(markup)

        document = Document(
            name=name,
            content=markup,
            original_content=markup,
            type=DocumentType.SYSTEM,
        )
        await self._store.save(document)

        logger.info(
            f"Document {document.id} created with "
            f"{len(document.blank_spaces)} blank spaces"
        )
        return document

    # =========================================================================
    # Queries
    # =========================================================================

    async def get(self, document_id: str) -> Document:
        """Load a document.

        Raises:
            NotFoundError: If the id is unknown.
        """
        document = await self._store.get(document_id)
        if document is None:
            raise NotFoundError(f"Document not found: {document_id}", document_id)
        return document

    async def list_documents(self, document_type: DocumentType | None = None) -> list[Document]:
        return await self._store.list_documents(document_type)

    async def locate_blank_space(
        self, document_id: str, blank_id: str
    ) -> tuple[BlankSpace, BlankSpace | None, BlankSpace | None]:
        """Return a blank space with its previous and next neighbours."""
        document = await self.get(document_id)
        blank_space = find_blank_space(document.content, blank_id)
        blank_spaces = document.blank_spaces
        return (
            blank_space,
            adjacent_blank_space(blank_spaces, blank_id, -1),
            adjacent_blank_space(blank_spaces, blank_id, 1),
        )

    # =========================================================================
    # Mutations
    # =========================================================================

    async def update(
        self,
        document_id: str,
        name: str | None = None,
        content: str | None = None,
    ) -> Document:
        """Rename a document and/or replace its markup."""
        async with self._locks[document_id]:
            document = await self.get(document_id)
            changes: dict[str, str] = {}
            if content is not None:
                changes["content"] = content
            if name is not None:
                changes["name"] = name
            document = document.updated(**changes)
            return await self._store.save(document)

    async def fill_blank_space(self, document_id: str, blank_id: str, text: str) -> Document:
        """Fill one blank space and store the new markup.

        Raises:
            NotFoundError: If the document or blank space does not exist.
        """
        async with self._locks[document_id]:
            document = await self.get(document_id)
            document = document.updated(content=fill(document.content, blank_id, text))
            logger.info(f"Filled blank space {blank_id} in {document_id}")
            return await self._store.save(document)

    async def insert_blank_space(
        self, document_id: str, position: int
    ) -> tuple[Document, EmptyBlankSpace]:
        """Insert a new empty blank space at the caret.

        Raises:
            NotFoundError: If the document does not exist.
            InvalidPositionError: If ``position`` is outside the markup.
        """
        async with self._locks[document_id]:
            document = await self.get(document_id)
            result = insert(document.content, position, self._settings.insert_width)
            document = await self._store.save(document.updated(content=result.markup))
            logger.info(f"Inserted blank space {result.blank_space.id} in {document_id}")
            return document, result.blank_space

    async def detect_blank_spaces(self, document_id: str) -> Document:
        """Run pattern detection over the current markup."""
        async with self._locks[document_id]:
            document = await self.get(document_id)
            return await self._store.save(document.updated(content=detect(document.content)))

    async def reset(self, document_id: str) -> Document:
        """Restore the markup captured at ingestion."""
        async with self._locks[document_id]:
            document = await self.get(document_id)
            logger.info(f"Resetting document {document_id} to its original content")
            return await self._store.save(document.updated(content=document.original_content))

    async def clone_as_template(self, document_id: str, name: str | None = None) -> Document:
        """Copy a document into a new reusable template.

        The clone gets a new id, type ``template`` and fresh timestamps; its
        original content is the source's current content.
        """
        source = await self.get(document_id)
        clone = Document(
            id=new_document_id(),
            name=name or _template_name(source.name),
            content=source.content,
            original_content=source.content,
            type=DocumentType.TEMPLATE,
        )
        logger.info(f"Cloned document {document_id} into template {clone.id}")
        return await self._store.save(clone)

    async def delete(self, document_id: str) -> None:
        """Delete a document.

        Raises:
            NotFoundError: If the id is unknown.
        """
        async with self._locks[document_id]:
            if not await self._store.delete(document_id):
                raise NotFoundError(f"Document not found: {document_id}", document_id)
        self._locks.pop(document_id, None)

    # =========================================================================
    # Export
    # =========================================================================

    async def export(self, document_id: str, export_format: str) -> ExportArtifact:
        """Serialize a document as ``<name>.<ext>``.

        Raises:
            NotFoundError: If the id is unknown.
            ValueError: If the format is unknown.
            ConversionError: If serialization fails; the document is untouched.
        """
        document = await self.get(document_id)
        exporter = self._factory.get_exporter(export_format)
        artifact = exporter.export(document)
        logger.info(f"Exported {document_id} as {artifact.filename} ({len(artifact.data)} bytes)")
        return artifact
