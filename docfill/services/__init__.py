"""Application services."""

from docfill.services.documents import DocumentService

__all__ = ["DocumentService"]
