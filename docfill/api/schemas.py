"""API request and response schemas.

Pydantic v2 models for API serialization/deserialization.
"""

import enum

from pydantic import BaseModel, Field

from docfill.interfaces.converter import SourceKind
from docfill.interfaces.document import Document
from docfill.strategies.blank_space import BlankSpace, EmptyBlankSpace
from docfill.strategies.template_engine import VariableTemplate


class ExportFormat(str, enum.Enum):
    """Supported export formats (also the file extension)."""

    TXT = "txt"
    HTML = "html"
    DOCX = "docx"
    JSON = "json"


# =============================================================================
# Document Schemas
# =============================================================================


class DocumentCreateRequest(BaseModel):
    """Request for creating a document from pasted content."""

    name: str = Field(min_length=1, max_length=255, description="Document name")
    content: str = Field(description="Pasted source content")
    kind: SourceKind = Field(default=SourceKind.MARKUP, description="How to read the content")
    detect_blanks: bool = Field(default=True, description="Run blank-space detection")


class DocumentUpdateRequest(BaseModel):
    """Request for renaming a document or replacing its markup."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = Field(default=None, description="New markup")


class CloneRequest(BaseModel):
    """Request for cloning a document into a template."""

    name: str | None = Field(
        default=None,
        min_length=1,
        max_length=255,
        description="Template name; defaults to '<source name> (Template)'",
    )


class DocumentListResponse(BaseModel):
    """Response for listing documents."""

    documents: list[Document]
    total: int


# =============================================================================
# Blank Space Schemas
# =============================================================================


class FillRequest(BaseModel):
    """Request for filling a blank space. An empty text clears it."""

    text: str = Field(description="Fill text")


class InsertRequest(BaseModel):
    """Request for inserting a blank space at a caret offset."""

    position: int = Field(description="Caret offset into the markup")


class InsertResponse(BaseModel):
    """The updated document and the blank space that was inserted."""

    document: Document
    blank_space: EmptyBlankSpace


class BlankSpaceListResponse(BaseModel):
    """Blank spaces of a document, in document order."""

    document_id: str
    blank_spaces: list[BlankSpace]
    total: int


class BlankSpaceDetailResponse(BaseModel):
    """A blank space with its navigation neighbours."""

    blank_space: BlankSpace
    previous_id: str | None = None
    next_id: str | None = None


# =============================================================================
# Variable Template Schemas
# =============================================================================


class TemplateListResponse(BaseModel):
    """Response for listing catalog templates."""

    templates: list[VariableTemplate]
    total: int


class VariablesRequest(BaseModel):
    """Request for extracting variable names."""

    content: str


class VariablesResponse(BaseModel):
    """Distinct variable names in order of first occurrence."""

    variables: list[str]


class SubstituteRequest(BaseModel):
    """Request for substituting variables into arbitrary content."""

    content: str
    bindings: dict[str, str] = Field(default_factory=dict)


class RenderRequest(BaseModel):
    """Request for rendering a catalog template."""

    bindings: dict[str, str] = Field(default_factory=dict)


class RenderResponse(BaseModel):
    """Substituted content plus the variables that are still unbound."""

    content: str
    unbound: list[str]


class PromoteRequest(BaseModel):
    """Request for turning selected text into a variable token."""

    content: str
    selection: str = Field(min_length=1, description="Literal text to replace")
    name: str = Field(min_length=1, description="Variable name")


class PromoteResponse(BaseModel):
    """Updated content and its variables."""

    content: str
    variables: list[str]


# =============================================================================
# Error Schemas
# =============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
    error_code: str | None = None
