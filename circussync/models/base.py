# circussync/models/base.py
from datetime import datetime

from pydantic import ConfigDict
from sqlmodel import SQLModel, Field


class Record(SQLModel):
    """
    Fields every persisted entity carries.

    - id:         assigned by the database, never taken from caller input
    - created_at: stamped once on insert
    - updated_at: refreshed on every write

    Unknown stored columns are ignored rather than rejected so older
    records keep loading after a schema change.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = Field(description="Server-assigned identifier")
    created_at: datetime | None = Field(default=None, description="Creation timestamp (UTC)")
    updated_at: datetime | None = Field(default=None, description="Last write timestamp (UTC)")


SERVER_FIELDS: frozenset[str] = frozenset({"id", "created_at", "updated_at"})
