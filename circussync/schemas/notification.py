# circussync/schemas/notification.py
from pydantic import ConfigDict
from sqlmodel import SQLModel, Field


class NotificationCreate(SQLModel):
    """
    Payload for creating a notification.

    There is no `read` field: new notifications always start unread.
    """

    model_config = ConfigDict(extra="forbid")

    user_id: str
    message: str = Field(min_length=1)
    link: str | None = None


class NotificationUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    message: str | None = Field(default=None, min_length=1)
    link: str | None = None
    read: bool | None = None
