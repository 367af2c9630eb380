# circussync/core/timestamps.py
"""
Date conversion at the persistence boundary.

Records are written with every `datetime` turned into one canonical
string form; the walk recurses through nested dicts and lists. Reading
is driven by the entity models: only fields declared as `datetime`
(nested models included) are parsed back, so free-text fields that
happen to look like timestamps stay strings.

Canonical form:
    YYYY-MM-DDTHH:MM:SS.ffffff+00:00

It is always UTC and always fixed width, so comparing two encoded
values as strings gives the same answer as comparing the datetimes.
Range filters on nested JSON fields rely on that.
"""

from datetime import datetime, timezone
from typing import Any


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def ensure_aware(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def encode_datetime(value: datetime) -> str:
    return ensure_aware(value).astimezone(timezone.utc).isoformat(timespec="microseconds")


def encode_value(value: Any) -> Any:
    """Encode a single value (used for query filter operands)."""
    if isinstance(value, datetime):
        return encode_datetime(value)
    if isinstance(value, dict):
        return {k: encode_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [encode_value(v) for v in value]
    return value


def encode_for_storage(data: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of `data` with every datetime in canonical string form."""
    return {key: encode_value(value) for key, value in data.items()}

