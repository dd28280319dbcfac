"""Abstract base classes and shared records for pipeline strategies."""

from docfill.interfaces.converter import BaseConverter, SourceKind, infer_source_kind
from docfill.interfaces.document import Document, DocumentType
from docfill.interfaces.exporter import BaseExporter, ExportArtifact
from docfill.interfaces.store import BaseDocumentStore

__all__ = [
    "BaseConverter",
    "BaseDocumentStore",
    "BaseExporter",
    "Document",
    "DocumentType",
    "ExportArtifact",
    "SourceKind",
    "infer_source_kind",
]
