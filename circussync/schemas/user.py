# circussync/schemas/user.py
from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

from circussync.core.roles import Role


class UserProfileUpdate(SQLModel):
    """
    Partial profile update.

    Editable fields are `name` and `photo_url`; email belongs to the
    identity provider and role changes go through `UserRoleUpdate`.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=100)
    photo_url: str | None = None

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class UserRoleUpdate(SQLModel):
    """
    Admin-only role update schema.
    """

    model_config = ConfigDict(extra="forbid")
    role: Role
