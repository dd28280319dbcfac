"""FastAPI routers and dependencies."""

from docfill.api.deps import get_document_service, get_template_catalog
from docfill.api.documents import router as documents_router
from docfill.api.templates import router as templates_router

__all__ = [
    "get_document_service",
    "get_template_catalog",
    "documents_router",
    "templates_router",
]
