"""Component Factory for strategy instantiation.

The Factory Pattern allows the application to instantiate
different strategy implementations at runtime based on
configuration or environment variables.
"""

import logging

from docfill.core.config import Settings, get_settings
from docfill.interfaces.converter import BaseConverter, SourceKind
from docfill.interfaces.exporter import BaseExporter
from docfill.interfaces.store import BaseDocumentStore
from docfill.strategies.converters import DocxConverter, HtmlConverter, PlainTextConverter
from docfill.strategies.exporters import DocxExporter, HtmlExporter, JsonExporter, TextExporter
from docfill.strategies.stores import InMemoryDocumentStore, SQLDocumentStore
from docfill.strategies.template_engine import TemplateCatalog

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("txt", "html", "docx", "json")


class ComponentFactory:
    """Factory for creating component instances based on configuration.

    Example:
        ```python
        settings = get_settings()
        factory = ComponentFactory(settings)

        converter = factory.get_converter(SourceKind.WORD)
        exporter = factory.get_exporter("docx")
        store = factory.get_document_store()
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Application settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._converter_cache: dict[SourceKind, BaseConverter] = {}
        self._exporter_cache: dict[str, BaseExporter] = {}
        self._store_cache: BaseDocumentStore | None = None
        self._catalog_cache: TemplateCatalog | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_converter(self, kind: SourceKind) -> BaseConverter:
        """Get a converter for the given source kind.

        Raises:
            ValueError: If the source kind is unknown.
        """
        if kind not in self._converter_cache:
            logger.info(f"Instantiating converter: {kind}")

            match kind:
                case SourceKind.WORD:
                    converter: BaseConverter = DocxConverter()
                case SourceKind.TEXT:
                    converter = PlainTextConverter()
                case SourceKind.MARKUP:
                    converter = HtmlConverter()
                case _:
                    raise ValueError(
                        f"Unknown source kind: {kind}. "
                        f"Valid options: 'word', 'text', 'markup'"
                    )

            self._converter_cache[kind] = converter

        return self._converter_cache[kind]

    def get_exporter(self, export_format: str) -> BaseExporter:
        """Get an exporter for the given format.

        Args:
            export_format: One of 'txt', 'html', 'docx', 'json'.

        Raises:
            ValueError: If the format is unknown.
        """
        if export_format not in self._exporter_cache:
            logger.info(f"Instantiating exporter: {export_format}")

            match export_format:
                case "txt":
                    exporter: BaseExporter = TextExporter(self._settings.export_encoding)
                case "html":
                    exporter = HtmlExporter(self._settings.export_encoding)
                case "docx":
                    exporter = DocxExporter()
                case "json":
                    exporter = JsonExporter()
                case _:
                    raise ValueError(
                        f"Unknown export format: {export_format}. "
                        f"Valid options: {', '.join(EXPORT_FORMATS)}"
                    )

            self._exporter_cache[export_format] = exporter

        return self._exporter_cache[export_format]

    def get_document_store(self, store_type: str | None = None) -> BaseDocumentStore:
        """Get a document store instance based on the specified type.

        Args:
            store_type: 'sql' or 'memory'. If None, uses settings.

        Raises:
            ValueError: If the store type is unknown.
        """
        if self._store_cache is None or store_type is not None:
            store_type = store_type or self._settings.store_type

            logger.info(f"Instantiating document store: {store_type}")

            match store_type:
                case "sql":
                    from docfill.db.session import get_session_maker

                    self._store_cache = SQLDocumentStore(get_session_maker(self._settings))
                case "memory":
                    self._store_cache = InMemoryDocumentStore()
                case _:
                    raise ValueError(
                        f"Unknown store type: {store_type}. "
                        f"Valid options: 'sql', 'memory'"
                    )

        return self._store_cache

    def get_template_catalog(self) -> TemplateCatalog:
        if self._catalog_cache is None:
            self._catalog_cache = TemplateCatalog()
        return self._catalog_cache

    def clear_cache(self) -> None:
        """Clear all cached component instances.

        This forces new instances to be created on next access.
        Useful for testing or when settings change.
        """
        self._converter_cache.clear()
        self._exporter_cache.clear()
        self._store_cache = None
        self._catalog_cache = None
        logger.debug("Component factory cache cleared")
