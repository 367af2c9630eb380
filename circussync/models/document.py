# circussync/models/document.py
from typing import Literal

from sqlmodel import SQLModel, Field

from circussync.models.base import Record

RelatedEntityType = Literal["client", "performer", "event", "agent"]


class RelatedEntity(SQLModel):
    type: RelatedEntityType
    id: str


class DocumentBase(SQLModel):
    """
    A file attached to exactly one other record.

    The file itself lives in object storage; `url` points at it.
    """

    name: str = Field(min_length=1, max_length=255)
    url: str = ""
    file_type: str | None = None
    uploaded_by: str | None = Field(default=None, description="User id of the uploader")
    notes: str = ""
    related_to: RelatedEntity


class Document(DocumentBase, Record):
    """Document record as stored."""
