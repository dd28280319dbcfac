"""FastAPI dependencies for dependency injection.

Components are created once per application in ``create_app`` and kept in
``app.state``; these dependencies hand them to the routes.
"""

from fastapi import Request

from docfill.services.documents import DocumentService
from docfill.strategies.template_engine import TemplateCatalog


def get_document_service(request: Request) -> DocumentService:
    """Return the application's document service."""
    return request.app.state.document_service


def get_template_catalog(request: Request) -> TemplateCatalog:
    """Return the application's variable template catalog."""
    return request.app.state.template_catalog
