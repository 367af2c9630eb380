# circussync/schemas/document.py
from pydantic import ConfigDict
from sqlmodel import SQLModel, Field

from circussync.models.document import DocumentBase, RelatedEntity


class DocumentCreate(DocumentBase):
    model_config = ConfigDict(extra="forbid")


class DocumentUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=255)
    url: str | None = None
    file_type: str | None = None
    notes: str | None = None
    related_to: RelatedEntity | None = None
