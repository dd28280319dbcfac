"""Unit tests for the component factory and database initialization."""

import asyncio

import pytest

from docfill.core.config import Settings
from docfill.core.factory import ComponentFactory
from docfill.db.session import close_db, get_session_maker, init_db
from docfill.interfaces.converter import SourceKind
from docfill.interfaces.document import DocumentType
from docfill.strategies.converters import DocxConverter, HtmlConverter, PlainTextConverter
from docfill.strategies.exporters import DocxExporter, HtmlExporter, JsonExporter, TextExporter
from docfill.strategies.stores import InMemoryDocumentStore, SQLDocumentStore
from docfill.strategies.template_engine import BUILTIN_TEMPLATES


@pytest.fixture
def settings(tmp_path):
    return Settings(
        store_type="memory",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'docfill.db'}",
        log_dir=tmp_path / "logs",
    )


class TestComponentFactory:
    """Test suite for ComponentFactory."""

    @pytest.fixture
    def factory(self, settings):
        return ComponentFactory(settings)

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (SourceKind.WORD, DocxConverter),
            (SourceKind.TEXT, PlainTextConverter),
            (SourceKind.MARKUP, HtmlConverter),
        ],
    )
    def test_converters(self, factory, kind, expected):
        assert isinstance(factory.get_converter(kind), expected)

    @pytest.mark.parametrize(
        ("export_format", "expected"),
        [
            ("txt", TextExporter),
            ("html", HtmlExporter),
            ("docx", DocxExporter),
            ("json", JsonExporter),
        ],
    )
    def test_exporters(self, factory, export_format, expected):
        assert isinstance(factory.get_exporter(export_format), expected)

    def test_unknown_exporter(self, factory):
        with pytest.raises(ValueError, match="Unknown export format"):
            factory.get_exporter("pdf")

    def test_instances_are_cached(self, factory):
        assert factory.get_exporter("txt") is factory.get_exporter("txt")
        assert factory.get_document_store() is factory.get_document_store()
        assert factory.get_template_catalog() is factory.get_template_catalog()

    def test_clear_cache(self, factory):
        store = factory.get_document_store()
        exporter = factory.get_exporter("txt")

        factory.clear_cache()

        assert factory.get_document_store() is not store
        assert factory.get_exporter("txt") is not exporter

    def test_memory_store_from_settings(self, factory):
        assert isinstance(factory.get_document_store(), InMemoryDocumentStore)

    def test_sql_store_override(self, factory):
        try:
            assert isinstance(factory.get_document_store("sql"), SQLDocumentStore)
        finally:
            asyncio.run(close_db())

    def test_unknown_store(self, factory):
        with pytest.raises(ValueError, match="Unknown store type"):
            factory.get_document_store("redis")

    def test_store_type_is_normalized(self, tmp_path):
        assert Settings(store_type="MEMORY", log_dir=tmp_path).store_type == "memory"


class TestInitDb:
    """Test suite for table creation."""

    def test_creates_empty_documents_table(self, settings):
        async def run_test():
            try:
                await init_db(settings)
                await init_db(settings)

                store = SQLDocumentStore(get_session_maker(settings))
                assert await store.list_documents() == []
            finally:
                await close_db()

        asyncio.run(run_test())

    def test_variable_templates_stay_out_of_document_store(self, settings):
        """Test that {{name}} templates are only reachable through the catalog."""
        factory = ComponentFactory(settings)

        async def run_test():
            try:
                await init_db(settings)

                store = SQLDocumentStore(get_session_maker(settings))
                assert await store.list_documents(DocumentType.TEMPLATE) == []
            finally:
                await close_db()

        asyncio.run(run_test())

        catalog_names = [t.name for t in factory.get_template_catalog().list_templates()]
        assert sorted(catalog_names) == sorted(t.name for t in BUILTIN_TEMPLATES)
