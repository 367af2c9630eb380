# circussync/core/errors.py
"""
Domain exceptions shared by the persistence layer, services, stores
and the HTTP layer.

The HTTP mapping lives in `circussync.main`; nothing in here knows
about FastAPI.
"""

from typing import Any


class CircusSyncError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class StorageError(CircusSyncError):
    """The database rejected or failed an operation (permissions, bad query, ...)."""


class TransportError(StorageError):
    """The database or identity provider could not be reached."""


class NotFoundError(CircusSyncError):
    """A record required by the operation does not exist."""

    def __init__(self, resource: str, identifier: Any):
        message = f"{resource} not found: {identifier}"
        super().__init__(message, {"resource": resource, "identifier": identifier})
        self.resource = resource
        self.identifier = identifier


class AuthorizationError(CircusSyncError):
    """The acting user's role does not allow the operation."""


class AuthenticationError(CircusSyncError):
    """
    Identity-provider failure already mapped to a user-facing message.

    `code` keeps the normalized provider code (e.g. "invalid-credentials").
    """

    def __init__(self, message: str, code: str = "unknown"):
        super().__init__(message, {"code": code})
        self.code = code
