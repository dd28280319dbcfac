"""Document API routes.

Handles ingestion, editing, blank-space navigation and filling, cloning
into templates, and export downloads.
"""

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Query, Response, UploadFile, status

from docfill.api.deps import get_document_service
from docfill.api.schemas import (
    BlankSpaceDetailResponse,
    BlankSpaceListResponse,
    CloneRequest,
    DocumentCreateRequest,
    DocumentListResponse,
    DocumentUpdateRequest,
    ExportFormat,
    FillRequest,
    InsertRequest,
    InsertResponse,
)
from docfill.core.exceptions import DocfillError
from docfill.interfaces.document import Document, DocumentType
from docfill.services.documents import DocumentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


# =============================================================================
# Ingestion
# =============================================================================


@router.post(
    "/upload",
    response_model=Document,
    status_code=status.HTTP_201_CREATED,
)
async def upload_document(
    file: UploadFile,
    service: DocumentService = Depends(get_document_service),
) -> Document:
    """Ingest an uploaded Word, text or markup file.

    The file kind is inferred from the media type, then the extension.
    Blank spaces are detected in the converted markup.

    Raises:
        HTTPException: If the upload has no filename or ingestion fails
            unexpectedly. Domain errors are mapped by the app handlers.
    """
    try:
        logger.info(f"Upload received: {file.filename} ({file.content_type})")

        if not file.filename:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Uploaded file has no filename",
            )

        data = await file.read()
        return await service.ingest(file.filename, data, file.content_type)

    except (HTTPException, DocfillError):
        raise
    except Exception as e:
        logger.error(f"Document upload failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Document upload failed: {str(e)}",
        ) from e


@router.post(
    "",
    response_model=Document,
    status_code=status.HTTP_201_CREATED,
)
async def create_document(
    request: DocumentCreateRequest,
    service: DocumentService = Depends(get_document_service),
) -> Document:
    """Create a document from pasted content."""
    return await service.create(
        request.name,
        request.content.encode("utf-8"),
        request.kind,
        detect_blanks=request.detect_blanks,
    )


# =============================================================================
# Documents
# =============================================================================


@router.get("", response_model=DocumentListResponse)
async def list_documents(
    document_type: DocumentType | None = Query(default=None, alias="type"),
    service: DocumentService = Depends(get_document_service),
) -> DocumentListResponse:
    """List documents, most recently modified first."""
    documents = await service.list_documents(document_type)
    return DocumentListResponse(documents=documents, total=len(documents))


@router.get("/{document_id}", response_model=Document)
async def get_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
) -> Document:
    return await service.get(document_id)


@router.put("/{document_id}", response_model=Document)
async def update_document(
    document_id: str,
    request: DocumentUpdateRequest,
    service: DocumentService = Depends(get_document_service),
) -> Document:
    """Rename a document and/or replace its markup."""
    return await service.update(document_id, name=request.name, content=request.content)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
) -> Response:
    await service.delete(document_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{document_id}/detect", response_model=Document)
async def detect_blank_spaces(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
) -> Document:
    """Run blank-space detection over the current markup."""
    return await service.detect_blank_spaces(document_id)


@router.post("/{document_id}/reset", response_model=Document)
async def reset_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
) -> Document:
    """Restore the markup captured at ingestion."""
    return await service.reset(document_id)


@router.post(
    "/{document_id}/clone",
    response_model=Document,
    status_code=status.HTTP_201_CREATED,
)
async def clone_document(
    document_id: str,
    request: CloneRequest | None = None,
    service: DocumentService = Depends(get_document_service),
) -> Document:
    """Copy a document into a new template."""
    name = request.name if request else None
    return await service.clone_as_template(document_id, name)


# =============================================================================
# Blank Spaces
# =============================================================================


@router.get("/{document_id}/blank-spaces", response_model=BlankSpaceListResponse)
async def list_blank_spaces(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
) -> BlankSpaceListResponse:
    document = await service.get(document_id)
    blank_spaces = document.blank_spaces
    return BlankSpaceListResponse(
        document_id=document.id,
        blank_spaces=blank_spaces,
        total=len(blank_spaces),
    )


@router.get(
    "/{document_id}/blank-spaces/{blank_id}",
    response_model=BlankSpaceDetailResponse,
)
async def get_blank_space(
    document_id: str,
    blank_id: str,
    service: DocumentService = Depends(get_document_service),
) -> BlankSpaceDetailResponse:
    """Return a blank space with the ids of its neighbours."""
    blank_space, previous, following = await service.locate_blank_space(document_id, blank_id)
    return BlankSpaceDetailResponse(
        blank_space=blank_space,
        previous_id=previous.id if previous else None,
        next_id=following.id if following else None,
    )


@router.post(
    "/{document_id}/blank-spaces/{blank_id}/fill",
    response_model=Document,
)
async def fill_blank_space(
    document_id: str,
    blank_id: str,
    request: FillRequest,
    service: DocumentService = Depends(get_document_service),
) -> Document:
    """Fill a blank space. An empty text clears it."""
    return await service.fill_blank_space(document_id, blank_id, request.text)


@router.post(
    "/{document_id}/blank-spaces",
    response_model=InsertResponse,
    status_code=status.HTTP_201_CREATED,
)
async def insert_blank_space(
    document_id: str,
    request: InsertRequest,
    service: DocumentService = Depends(get_document_service),
) -> InsertResponse:
    """Insert an empty blank space at a caret offset into the markup."""
    document, blank_space = await service.insert_blank_space(document_id, request.position)
    return InsertResponse(document=document, blank_space=blank_space)


# =============================================================================
# Export
# =============================================================================


@router.get("/{document_id}/export/{export_format}")
async def export_document(
    document_id: str,
    export_format: ExportFormat,
    service: DocumentService = Depends(get_document_service),
) -> Response:
    """Download the document as ``<name>.<format>``."""
    artifact = await service.export(document_id, export_format.value)
    return Response(
        content=artifact.data,
        media_type=artifact.media_type,
        headers={
            "Content-Disposition": f"attachment; filename*=utf-8''{quote(artifact.filename)}",
        },
    )
