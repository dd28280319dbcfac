"""Document records shared by stores, exporters and the service layer."""

import enum
import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, computed_field

from docfill.strategies.blank_space import BlankSpace, extract


MAX_NAME_LENGTH = 255


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_document_id() -> str:
    """Generate a unique document ID."""
    return f"doc_{uuid.uuid4().hex[:12]}"


class DocumentType(str, enum.Enum):
    """Origin of a document.

    SYSTEM documents are ingested sources; TEMPLATE documents are
    user-authored clones meant for reuse.
    """

    SYSTEM = "system"
    TEMPLATE = "template"


class Document(BaseModel):
    """A named unit of markup content.

    ``content`` is the live source of truth. ``blank_spaces`` is computed
    from it on every access, so it can never drift from the markup.
    """

    id: str = Field(default_factory=new_document_id)
    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    content: str = Field(description="Current markup")
    original_content: str = Field(description="Markup captured at ingestion")
    type: DocumentType = Field(default=DocumentType.SYSTEM)
    created_at: datetime = Field(default_factory=_utcnow)
    modified_at: datetime = Field(default_factory=_utcnow)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def blank_spaces(self) -> list[BlankSpace]:
        return extract(self.content)

    def updated(self, **changes: Any) -> "Document":
        """Return a copy with ``changes`` applied and ``modified_at`` bumped."""
        return self.model_copy(update={**changes, "modified_at": _utcnow()})
