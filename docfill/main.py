"""FastAPI application entry point.

Main application setup with middleware, routing, error mapping and
lifecycle management.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from docfill import __version__
from docfill.api.documents import router as documents_router
from docfill.api.schemas import ErrorResponse
from docfill.api.templates import router as templates_router
from docfill.core.config import Settings, get_settings
from docfill.core.exceptions import (
    ConversionError,
    DocfillError,
    InvalidPositionError,
    NotFoundError,
    ParseError,
    UnsupportedContentError,
)
from docfill.core.factory import ComponentFactory
from docfill.core.logging_config import setup_logging
from docfill.db.session import close_db, init_db
from docfill.services.documents import DocumentService

logger = logging.getLogger(__name__)

# Status code and error code per domain error, most specific first
ERROR_RESPONSES: list[tuple[type[DocfillError], int, str]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND, "NOT_FOUND"),
    (InvalidPositionError, status.HTTP_422_UNPROCESSABLE_ENTITY, "INVALID_POSITION"),
    (ParseError, status.HTTP_400_BAD_REQUEST, "PARSE_ERROR"),
    (UnsupportedContentError, status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, "UNSUPPORTED_CONTENT"),
    (ConversionError, status.HTTP_500_INTERNAL_SERVER_ERROR, "CONVERSION_ERROR"),
]


def error_response_for(exc: DocfillError) -> tuple[int, str]:
    """Return the HTTP status and error code for a domain error."""
    for error_type, status_code, error_code in ERROR_RESPONSES:
        if isinstance(exc, error_type):
            return status_code, error_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR"


async def handle_docfill_error(request: Request, exc: DocfillError) -> JSONResponse:
    status_code, error_code = error_response_for(exc)
    if status_code >= 500:
        logger.error(f"{error_code} on {request.method} {request.url.path}: {exc}", exc_info=exc)
    else:
        logger.warning(f"{error_code} on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(detail=str(exc), error_code=error_code).model_dump(),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": "Validation error", "errors": jsonable_encoder(exc.errors())},
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(detail="Internal server error", error_code="INTERNAL_ERROR").model_dump(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup when documents live in SQL; release
    database connections on shutdown."""
    settings: Settings = app.state.settings
    uses_database = settings.store_type == "sql"

    logger.info(f"Starting docfill API (store: {settings.store_type})")

    if uses_database:
        try:
            await init_db(settings)
        except Exception as e:
            logger.error(f"Failed to initialize database: {e}", exc_info=True)
            raise

    yield

    logger.info("Shutting down docfill API...")

    if uses_database:
        try:
            await close_db()
        except Exception as e:
            logger.error(f"Error closing database: {e}", exc_info=True)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the docfill API.

    The document service, its store and the template catalog are created
    here once and shared by all requests through ``app.state``.

    Args:
        settings: Optional settings. If None, loads from environment.

    Returns:
        Configured FastAPI application instance.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    factory = ComponentFactory(settings)

    app = FastAPI(
        title="docfill",
        description="Blank-space detection, filling and export for legal documents",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.document_service = DocumentService(factory.get_document_store(), factory)
    app.state.template_catalog = factory.get_template_catalog()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )

    app.include_router(documents_router)
    app.include_router(templates_router)

    app.add_exception_handler(DocfillError, handle_docfill_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    @app.get("/health", tags=["health"])
    async def health_check():
        return {"status": "healthy", "version": __version__, "store": settings.store_type}

    logger.info(f"docfill API {__version__} created")
    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "docfill.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower(),
    )
