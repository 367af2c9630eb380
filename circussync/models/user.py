# circussync/models/user.py
from datetime import datetime

from pydantic import ConfigDict
from sqlmodel import SQLModel, Field

from circussync.core.roles import Role


class User(SQLModel):
    """
    Application user profile.

    Identity:
      - id: MUST match the identity provider's uid (Supabase auth.users.id)

    Role:
      - "readonly" | "performer" | "manager" | "admin"
      - new profiles start as "readonly"; only an admin may promote.

    Passwords never live here; the identity provider owns credentials.
    Profiles are never hard-deleted.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = Field(description="Matches the identity provider uid")

    email: str = Field(default="", description="Email from the identity provider")

    name: str = Field(default="", max_length=100, description="Display name")

    photo_url: str | None = Field(default=None, description="Avatar URL")

    role: Role = Field(default="readonly", description="Application role")

    last_login: datetime | None = Field(default=None, description="Last sign-in (UTC)")

    created_at: datetime | None = None
    updated_at: datetime | None = None
