# circussync/schemas/agent.py
from pydantic import ConfigDict
from sqlmodel import SQLModel, Field

from circussync.models.agent import AgentBase


class AgentCreate(AgentBase):
    model_config = ConfigDict(extra="forbid")


class AgentUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=200)
    email: str | None = None
    phone: str | None = None
    specialization: list[str] | None = None
    notes: str | None = None
