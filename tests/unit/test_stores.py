"""Unit tests for document stores."""

import asyncio

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from docfill.db.models import DocumentRecord
from docfill.interfaces.document import Document, DocumentType
from docfill.strategies.blank_space import detect
from docfill.strategies.stores import InMemoryDocumentStore, SQLDocumentStore


def _document(name: str = "Lease", document_type: DocumentType = DocumentType.SYSTEM) -> Document:
    content = detect("<p>Tenant: ______</p>")
    return Document(name=name, content=content, original_content=content, type=document_type)


class TestInMemoryDocumentStore:
    """Test suite for InMemoryDocumentStore."""

    @pytest.fixture
    def store(self):
        return InMemoryDocumentStore()

    def test_save_and_get(self, store):
        async def run_test():
            document = _document()
            await store.save(document)

            loaded = await store.get(document.id)
            assert loaded == document
            assert loaded is not document

        asyncio.run(run_test())

    def test_get_missing(self, store):
        assert asyncio.run(store.get("doc_missing")) is None

    def test_delete(self, store):
        async def run_test():
            document = await store.save(_document())

            assert await store.delete(document.id) is True
            assert await store.delete(document.id) is False
            assert await store.get(document.id) is None

        asyncio.run(run_test())

    def test_list_filters_by_type(self, store):
        async def run_test():
            await store.save(_document("System"))
            await store.save(_document("Template", DocumentType.TEMPLATE))

            templates = await store.list_documents(DocumentType.TEMPLATE)
            assert [d.name for d in templates] == ["Template"]
            assert len(await store.list_documents()) == 2

        asyncio.run(run_test())

    def test_list_newest_first(self, store):
        async def run_test():
            older = await store.save(_document("Older"))
            await store.save(_document("Newer"))
            await store.save(older.updated(name="Touched"))

            names = [d.name for d in await store.list_documents()]
            assert names == ["Touched", "Newer"]

        asyncio.run(run_test())


class TestSQLDocumentStore:
    """Test suite for SQLDocumentStore over an on-disk SQLite database."""

    @pytest.fixture
    def database_url(self, tmp_path):
        return f"sqlite+aiosqlite:///{tmp_path / 'docfill.db'}"

    def _run(self, database_url, scenario):
        async def run_test():
            engine = create_async_engine(database_url)
            try:
                async with engine.begin() as conn:
                    await conn.run_sync(SQLModel.metadata.create_all)
                session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
                await scenario(SQLDocumentStore(session_maker), session_maker)
            finally:
                await engine.dispose()

        asyncio.run(run_test())

    def test_round_trip(self, database_url):
        async def scenario(store, session_maker):
            document = _document()
            await store.save(document)

            loaded = await store.get(document.id)
            assert loaded.id == document.id
            assert loaded.name == "Lease"
            assert loaded.content == document.content
            assert loaded.type == DocumentType.SYSTEM
            assert loaded.blank_spaces == document.blank_spaces

        self._run(database_url, scenario)

    def test_save_replaces(self, database_url):
        async def scenario(store, session_maker):
            document = await store.save(_document())
            await store.save(document.updated(content="<p>Rewritten</p>"))

            loaded = await store.get(document.id)
            assert loaded.content == "<p>Rewritten</p>"
            assert loaded.blank_spaces == []

        self._run(database_url, scenario)

    def test_blank_space_cache_is_written(self, database_url):
        async def scenario(store, session_maker):
            document = await store.save(_document())

            async with session_maker() as session:
                record = await session.get(DocumentRecord, document.id)
            assert len(record.blank_spaces) == 1
            assert record.blank_spaces[0]["kind"] == "empty"

        self._run(database_url, scenario)

    def test_delete_and_list(self, database_url):
        async def scenario(store, session_maker):
            kept = await store.save(_document("Kept", DocumentType.TEMPLATE))
            dropped = await store.save(_document("Dropped"))

            assert await store.delete(dropped.id) is True
            assert await store.delete(dropped.id) is False

            documents = await store.list_documents()
            assert [d.id for d in documents] == [kept.id]
            assert await store.list_documents(DocumentType.SYSTEM) == []

        self._run(database_url, scenario)

    def test_get_missing(self, database_url):
        async def scenario(store, session_maker):
            assert await store.get("doc_missing") is None

        self._run(database_url, scenario)
