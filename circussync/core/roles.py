# circussync/core/roles.py
from typing import Literal

# App-level roles, lowest privilege first.
Role = Literal["readonly", "performer", "manager", "admin"]

ROLE_ORDER: tuple[str, ...] = ("readonly", "performer", "manager", "admin")

DEFAULT_ROLE: Role = "readonly"
HIGHEST_ROLE: Role = "admin"


def role_rank(role: str) -> int:
    """
    Position of `role` in the hierarchy.

    Raises:
        ValueError: if the role is unknown.
    """
    try:
        return ROLE_ORDER.index(role)
    except ValueError:
        raise ValueError(f"Unknown role: {role!r}") from None


def has_role(actual: str | None, required: str) -> bool:
    """True iff `actual` ranks at or above `required`. No role never passes."""
    if actual is None or actual not in ROLE_ORDER:
        return False
    return role_rank(actual) >= role_rank(required)
