# circussync/core/supabase_identity.py
import logging
from typing import Any

import httpx
from supabase import AsyncClient, AuthError, AuthRetryableError

from circussync.core.identity import (
    CONFIGURATION_ERROR,
    EMAIL_ALREADY_IN_USE,
    INVALID_CREDENTIALS,
    INVALID_EMAIL,
    NETWORK_ERROR,
    NO_SESSION,
    TOO_MANY_REQUESTS,
    UNKNOWN,
    USER_NOT_FOUND,
    WEAK_PASSWORD,
    IdentityProvider,
    ProviderError,
    ProviderIdentity,
)
from circussync.core.supabase_client import supabase_public

logger = logging.getLogger(__name__)

# Supabase Auth error_code -> normalized provider code
_AUTH_CODES: dict[str, str] = {
    "invalid_credentials": INVALID_CREDENTIALS,
    "user_not_found": USER_NOT_FOUND,
    "over_request_rate_limit": TOO_MANY_REQUESTS,
    "over_email_send_rate_limit": TOO_MANY_REQUESTS,
    "email_exists": EMAIL_ALREADY_IN_USE,
    "user_already_exists": EMAIL_ALREADY_IN_USE,
    "weak_password": WEAK_PASSWORD,
    "email_address_invalid": INVALID_EMAIL,
    "validation_failed": INVALID_EMAIL,
    "session_not_found": NO_SESSION,
}


def translate_auth_error(exc: Exception) -> ProviderError:
    """Map a Supabase / transport exception onto a normalized ProviderError."""
    if isinstance(exc, ProviderError):
        return exc
    if isinstance(exc, (AuthRetryableError, httpx.HTTPError)):
        return ProviderError(NETWORK_ERROR, str(exc))
    if isinstance(exc, RuntimeError):
        # raised by supabase_public() when URL / key are missing
        return ProviderError(CONFIGURATION_ERROR, str(exc))
    if isinstance(exc, AuthError):
        code = getattr(exc, "code", None) or ""
        if code in _AUTH_CODES:
            return ProviderError(_AUTH_CODES[code], str(exc))
        status = getattr(exc, "status", None)
        if status == 429:
            return ProviderError(TOO_MANY_REQUESTS, str(exc))
        if status in (401, 403):
            return ProviderError(CONFIGURATION_ERROR, str(exc))
    return ProviderError(UNKNOWN, str(exc))


def _identity_from_user(user: Any) -> ProviderIdentity:
    metadata = getattr(user, "user_metadata", None) or {}
    return ProviderIdentity(
        uid=str(user.id),
        email=getattr(user, "email", None) or "",
        display_name=metadata.get("display_name") or metadata.get("full_name") or "",
        photo_url=metadata.get("avatar_url"),
    )


class SupabaseIdentityProvider(IdentityProvider):
    """
    Supabase Auth (email/password) behind the IdentityProvider interface.

    Listeners are notified by this class after each call completes, so a
    sign-in has finished updating session state by the time it returns.
    """

    def __init__(self, client: AsyncClient | None = None) -> None:
        super().__init__()
        self._client = client
        self._current: ProviderIdentity | None = None

    async def _get_client(self) -> AsyncClient:
        if self._client is None:
            self._client = await supabase_public()
        return self._client

    @property
    def current_identity(self) -> ProviderIdentity | None:
        return self._current

    async def start(self) -> None:
        try:
            client = await self._get_client()
            session = await client.auth.get_session()
        except Exception as exc:
            logger.error("Could not restore auth session: %s", exc)
            self._emit_error(translate_auth_error(exc))
            return

        self._current = _identity_from_user(session.user) if session else None
        await self._emit(self._current)

    async def sign_in(self, email: str, password: str) -> ProviderIdentity:
        try:
            client = await self._get_client()
            res = await client.auth.sign_in_with_password({"email": email, "password": password})
        except Exception as exc:
            raise translate_auth_error(exc) from exc

        self._current = _identity_from_user(res.user)
        await self._emit(self._current)
        return self._current

    async def register(self, email: str, password: str, display_name: str) -> ProviderIdentity:
        try:
            client = await self._get_client()
            res = await client.auth.sign_up(
                {
                    "email": email,
                    "password": password,
                    "options": {"data": {"display_name": display_name}},
                }
            )
        except Exception as exc:
            raise translate_auth_error(exc) from exc

        identity = _identity_from_user(res.user)
        # Projects with email confirmation return no session until confirmed.
        if res.session is not None:
            self._current = identity
            await self._emit(identity)
        return identity

    async def send_password_reset(self, email: str) -> None:
        try:
            client = await self._get_client()
            await client.auth.reset_password_for_email(email)
        except Exception as exc:
            raise translate_auth_error(exc) from exc

    async def update_display_name(self, display_name: str) -> None:
        if self._current is None:
            raise ProviderError(NO_SESSION)
        try:
            client = await self._get_client()
            await client.auth.update_user({"data": {"display_name": display_name}})
        except Exception as exc:
            raise translate_auth_error(exc) from exc
        self._current = ProviderIdentity(
            uid=self._current.uid,
            email=self._current.email,
            display_name=display_name,
            photo_url=self._current.photo_url,
        )

    async def sign_out(self) -> None:
        try:
            client = await self._get_client()
            await client.auth.sign_out()
        except Exception as exc:
            raise translate_auth_error(exc) from exc
        self._current = None
        await self._emit(None)
