# circussync/models/notification.py
from sqlmodel import SQLModel, Field

from circussync.models.base import Record


class NotificationBase(SQLModel):
    user_id: str = Field(description="Recipient user id")
    message: str = Field(min_length=1)
    link: str | None = None
    read: bool = False


class Notification(NotificationBase, Record):
    """Notification record as stored."""
