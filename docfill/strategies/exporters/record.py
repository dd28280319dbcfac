"""JSON exporter: the full document record, blank spaces included."""

from docfill.interfaces.document import Document
from docfill.interfaces.exporter import BaseExporter


class JsonExporter(BaseExporter):
    """Exports the document record as indented JSON."""

    def render(self, document: Document) -> bytes:
        return document.model_dump_json(indent=2).encode("utf-8")

    @property
    def extension(self) -> str:
        return "json"

    @property
    def media_type(self) -> str:
        return "application/json"
