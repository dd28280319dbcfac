"""Database models using SQLModel.

A single table holds every Document record. ``blank_spaces`` is a cache
written from the computed projection on each save; it is never read back
as state.
"""

import datetime
from typing import Any

from sqlalchemy import JSON, Column, DateTime, Text
from sqlmodel import Field, SQLModel

from docfill.interfaces.document import Document, DocumentType


class DocumentRecord(SQLModel, table=True):
    """Persisted form of a Document."""

    __tablename__ = "documents"

    id: str = Field(primary_key=True, max_length=64)
    name: str = Field(max_length=255)
    type: DocumentType = Field(default=DocumentType.SYSTEM, index=True)
    content: str = Field(sa_column=Column(Text, nullable=False))
    original_content: str = Field(sa_column=Column(Text, nullable=False))
    blank_spaces: list[dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )
    created_at: datetime.datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
    modified_at: datetime.datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
    )

    @classmethod
    def from_document(cls, document: Document) -> "DocumentRecord":
        return cls(
            id=document.id,
            name=document.name,
            type=document.type,
            content=document.content,
            original_content=document.original_content,
            blank_spaces=[b.model_dump(mode="json") for b in document.blank_spaces],
            created_at=document.created_at,
            modified_at=document.modified_at,
        )

    def to_document(self) -> Document:
        return Document(
            id=self.id,
            name=self.name,
            type=self.type,
            content=self.content,
            original_content=self.original_content,
            created_at=self.created_at,
            modified_at=self.modified_at,
        )
