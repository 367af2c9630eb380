# circussync/core/identity.py
"""
Identity provider boundary.

The session manager only talks to `IdentityProvider`. Two
implementations exist:

  - InMemoryIdentityProvider (below)                 USE_MOCK_DATA=true
  - SupabaseIdentityProvider (core/supabase_identity) Supabase Auth

Provider failures surface as `ProviderError` carrying one normalized
code, so classification into user-facing messages never depends on a
vendor's error format.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache
from typing import Awaitable, Callable

from email_validator import EmailNotValidError, validate_email

from circussync.core.config import get_settings

logger = logging.getLogger(__name__)

# Normalized provider error codes
INVALID_CREDENTIALS = "invalid-credentials"
USER_NOT_FOUND = "user-not-found"
TOO_MANY_REQUESTS = "too-many-requests"
NETWORK_ERROR = "network-error"
CONFIGURATION_ERROR = "configuration-error"
EMAIL_ALREADY_IN_USE = "email-already-in-use"
WEAK_PASSWORD = "weak-password"
INVALID_EMAIL = "invalid-email"
NO_SESSION = "no-session"
UNKNOWN = "unknown"

MIN_PASSWORD_LENGTH = 6
MAX_FAILED_SIGN_INS = 5


class ProviderError(Exception):
    def __init__(self, code: str, message: str = ""):
        self.code = code
        super().__init__(message or code)


@dataclass(frozen=True)
class ProviderIdentity:
    uid: str
    email: str
    display_name: str = ""
    photo_url: str | None = None


SessionListener = Callable[[ProviderIdentity | None], Awaitable[None]]
ErrorListener = Callable[[Exception], None]


class IdentityProvider(ABC):
    """
    Email/password identity provider with a session-change subscription.

    Listeners are awaited in registration order on every sign-in/out;
    provider-side failures outside a direct call (e.g. restoring a
    stored session) go to the error listeners instead.
    """

    def __init__(self) -> None:
        self._listeners: list[tuple[SessionListener, ErrorListener | None]] = []

    def on_session_change(
        self,
        listener: SessionListener,
        on_error: ErrorListener | None = None,
    ) -> Callable[[], None]:
        """Subscribe; returns a callable that unsubscribes."""
        entry = (listener, on_error)
        self._listeners.append(entry)

        def unsubscribe() -> None:
            if entry in self._listeners:
                self._listeners.remove(entry)

        return unsubscribe

    async def _emit(self, identity: ProviderIdentity | None) -> None:
        for listener, _ in list(self._listeners):
            await listener(identity)

    def _emit_error(self, exc: Exception) -> None:
        for _, on_error in list(self._listeners):
            if on_error is not None:
                on_error(exc)

    @property
    @abstractmethod
    def current_identity(self) -> ProviderIdentity | None:
        """Identity of the active session, if any."""

    @abstractmethod
    async def start(self) -> None:
        """Restore any existing session and notify listeners with it (or None)."""

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> ProviderIdentity:
        """Start a session; listeners are notified before this returns."""

    @abstractmethod
    async def register(self, email: str, password: str, display_name: str) -> ProviderIdentity:
        """Create an identity with a display name and start its session."""

    @abstractmethod
    async def send_password_reset(self, email: str) -> None:
        """Dispatch a password-reset email."""

    @abstractmethod
    async def update_display_name(self, display_name: str) -> None:
        """Change the display name of the active session's identity."""

    @abstractmethod
    async def sign_out(self) -> None:
        """End the session; listeners are notified with None."""


@dataclass
class _Account:
    uid: str
    email: str
    password: str
    display_name: str = ""
    photo_url: str | None = None
    failed_attempts: int = 0

    def identity(self) -> ProviderIdentity:
        return ProviderIdentity(
            uid=self.uid,
            email=self.email,
            display_name=self.display_name,
            photo_url=self.photo_url,
        )


class InMemoryIdentityProvider(IdentityProvider):
    """
    Local stand-in for the hosted identity provider.

    Mirrors the hosted rules that matter to callers: unknown emails,
    wrong passwords, duplicate registration, weak passwords (< 6 chars),
    malformed emails and lock-out after repeated failed sign-ins.
    """

    def __init__(self) -> None:
        super().__init__()
        self.accounts: dict[str, _Account] = {}
        self.sent_resets: list[str] = []
        self._current: _Account | None = None

    @property
    def current_identity(self) -> ProviderIdentity | None:
        return self._current.identity() if self._current else None

    def add_account(
        self,
        email: str,
        password: str,
        display_name: str = "",
        uid: str | None = None,
    ) -> ProviderIdentity:
        """Seed an account without starting a session."""
        account = _Account(
            uid=uid or uuid.uuid4().hex,
            email=email,
            password=password,
            display_name=display_name,
        )
        self.accounts[email.lower()] = account
        return account.identity()

    @staticmethod
    def _check_email(email: str) -> None:
        try:
            validate_email(email or "", check_deliverability=False)
        except EmailNotValidError as exc:
            raise ProviderError(INVALID_EMAIL, str(exc)) from exc

    async def start(self) -> None:
        await self._emit(self.current_identity)

    async def sign_in(self, email: str, password: str) -> ProviderIdentity:
        self._check_email(email)
        account = self.accounts.get(email.lower())
        if account is None:
            raise ProviderError(USER_NOT_FOUND)
        if account.failed_attempts >= MAX_FAILED_SIGN_INS:
            raise ProviderError(TOO_MANY_REQUESTS)
        if account.password != password:
            account.failed_attempts += 1
            raise ProviderError(INVALID_CREDENTIALS)

        account.failed_attempts = 0
        self._current = account
        identity = account.identity()
        await self._emit(identity)
        return identity

    async def register(self, email: str, password: str, display_name: str) -> ProviderIdentity:
        self._check_email(email)
        if email.lower() in self.accounts:
            raise ProviderError(EMAIL_ALREADY_IN_USE)
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ProviderError(WEAK_PASSWORD)

        self.add_account(email, password, display_name=display_name)
        account = self.accounts[email.lower()]
        self._current = account
        identity = account.identity()
        await self._emit(identity)
        return identity

    async def send_password_reset(self, email: str) -> None:
        self._check_email(email)
        if email.lower() not in self.accounts:
            raise ProviderError(USER_NOT_FOUND)
        self.sent_resets.append(email)
        logger.info("Password reset requested for %s", email)

    async def update_display_name(self, display_name: str) -> None:
        if self._current is None:
            raise ProviderError(NO_SESSION)
        self._current.display_name = display_name

    async def sign_out(self) -> None:
        self._current = None
        await self._emit(None)


@lru_cache
def get_identity_provider() -> IdentityProvider:
    """Process-wide identity provider selected by configuration."""
    if get_settings().USE_MOCK_DATA:
        return InMemoryIdentityProvider()

    from circussync.core.supabase_identity import SupabaseIdentityProvider

    return SupabaseIdentityProvider()
