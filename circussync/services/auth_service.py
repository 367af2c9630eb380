# circussync/services/auth_service.py
"""
Session manager.

Owns the process-wide session state `{current_user, loading, error}`.
The identity provider reports sign-in / sign-out through a session
listener; the listener resolves (or creates) the matching User profile
and republishes the state. Public actions never update `current_user`
themselves, except `sign_out` and `update_profile`.

Lifecycle:
    manager = AuthSessionManager(provider, user_service)
    await manager.init()     # subscribe + restore the stored session
    ...
    manager.close()          # unsubscribe
"""

import logging
from typing import Callable

from pydantic import BaseModel

from circussync.core.errors import AuthenticationError, TransportError
from circussync.core.identity import (
    CONFIGURATION_ERROR,
    EMAIL_ALREADY_IN_USE,
    INVALID_CREDENTIALS,
    INVALID_EMAIL,
    NETWORK_ERROR,
    TOO_MANY_REQUESTS,
    USER_NOT_FOUND,
    WEAK_PASSWORD,
    IdentityProvider,
    ProviderError,
    ProviderIdentity,
)
from circussync.core.roles import Role, has_role
from circussync.models.user import User
from circussync.services.base_service import Payload
from circussync.services.user_service import UserService
from circussync.stores.base import Store

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"

NETWORK_MESSAGE = "Network error. Please check your connection and try again."
CONFIGURATION_MESSAGE = "Authentication is not configured correctly. Please contact support."
RATE_LIMIT_MESSAGE = "Too many failed login attempts. Please try again later."
PROFILE_LOAD_MESSAGE = "Failed to load user profile"

SIGN_IN_MESSAGES: dict[str, str] = {
    INVALID_CREDENTIALS: "Invalid email or password",
    USER_NOT_FOUND: "Invalid email or password",
    TOO_MANY_REQUESTS: RATE_LIMIT_MESSAGE,
    NETWORK_ERROR: NETWORK_MESSAGE,
    CONFIGURATION_ERROR: CONFIGURATION_MESSAGE,
}

REGISTER_MESSAGES: dict[str, str] = {
    EMAIL_ALREADY_IN_USE: "Email is already in use",
    WEAK_PASSWORD: "Password is too weak",
    INVALID_EMAIL: "Email is invalid",
    NETWORK_ERROR: NETWORK_MESSAGE,
    CONFIGURATION_ERROR: CONFIGURATION_MESSAGE,
}

RESET_MESSAGES: dict[str, str] = {
    USER_NOT_FOUND: "No user found with this email",
    INVALID_EMAIL: "Email is invalid",
    TOO_MANY_REQUESTS: RATE_LIMIT_MESSAGE,
    NETWORK_ERROR: NETWORK_MESSAGE,
    CONFIGURATION_ERROR: CONFIGURATION_MESSAGE,
}


class AuthState(BaseModel):
    current_user: User | None = None
    loading: bool = True
    error: str | None = None


def _code_of(exc: Exception) -> str:
    return exc.code if isinstance(exc, ProviderError) else "unknown"


class AuthSessionManager(Store[AuthState]):
    def __init__(
        self,
        provider: IdentityProvider,
        users: UserService,
        navigate: Callable[[str], None] | None = None,
    ):
        super().__init__(AuthState())
        self.provider = provider
        self.users = users
        self.navigate = navigate
        self._unsubscribe: Callable[[], None] | None = None

    # ----- Lifecycle -----

    async def init(self) -> None:
        if self._unsubscribe is None:
            self._unsubscribe = self.provider.on_session_change(
                self._on_session_change,
                self._on_provider_error,
            )
        await self.provider.start()

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    # ----- Session listener -----

    async def _on_session_change(self, identity: ProviderIdentity | None) -> None:
        if identity is None:
            self.patch(current_user=None, loading=False)
            return
        try:
            user = await self.users.resolve_or_create(identity)
        except Exception as exc:
            logger.exception("Error resolving profile for %s: %s", identity.uid, exc)
            self.patch(current_user=None, loading=False, error=PROFILE_LOAD_MESSAGE)
            return
        self.patch(current_user=user, loading=False, error=None)

    def _on_provider_error(self, exc: Exception) -> None:
        logger.error("Auth state change error: %s", exc)
        self.patch(loading=False, error=str(exc))

    # ----- Classification -----

    def _fail(self, exc: Exception, messages: dict[str, str], fallback: str) -> Exception:
        """Publish the user-facing message for `exc` and return the error to raise."""
        code = _code_of(exc)
        message = messages.get(code, fallback)
        logger.error("%s (%s): %s", fallback, code, exc)
        self.patch(loading=False, error=message)
        if code == NETWORK_ERROR:
            return TransportError(message, {"code": code})
        return AuthenticationError(message, code)

    # ----- Actions -----

    async def sign_in(self, email: str, password: str) -> None:
        self.patch(loading=True, error=None)
        try:
            await self.provider.sign_in(email, password)
        except Exception as exc:
            raise self._fail(exc, SIGN_IN_MESSAGES, "Failed to sign in") from exc
        # the session listener has published the user by now
        self.patch(loading=False)

    async def sign_out(self) -> None:
        self.patch(loading=True, error=None)
        try:
            await self.provider.sign_out()
        except Exception as exc:
            raise self._fail(exc, {NETWORK_ERROR: NETWORK_MESSAGE}, "Failed to sign out") from exc
        self.set(AuthState(current_user=None, loading=False, error=None))
        if self.navigate is not None:
            self.navigate(LOGIN_PATH)

    async def register(self, email: str, password: str, display_name: str) -> None:
        self.patch(loading=True, error=None)
        try:
            await self.provider.register(email, password, display_name)
        except Exception as exc:
            raise self._fail(exc, REGISTER_MESSAGES, "Failed to register") from exc
        self.patch(loading=False)

    async def reset_password(self, email: str) -> None:
        self.patch(loading=True, error=None)
        try:
            await self.provider.send_password_reset(email)
        except Exception as exc:
            raise self._fail(exc, RESET_MESSAGES, "Failed to send password reset email") from exc
        self.patch(loading=False)

    async def update_profile(self, user_id: str, payload: Payload) -> User:
        """
        Merge profile changes; the session's own user is patched in place
        and its provider display name kept in sync.
        """
        self.patch(loading=True, error=None)
        try:
            user = await self.users.update_profile(user_id, payload)
            current = self.state.current_user
            if current is not None and current.id == user_id and user.name != current.name:
                await self.provider.update_display_name(user.name)
        except Exception as exc:
            logger.error("Error updating profile %s: %s", user_id, exc)
            self.patch(loading=False, error="Failed to update profile")
            raise

        current = self.state.current_user
        if current is not None and current.id == user_id:
            self.patch(current_user=user, loading=False)
        else:
            self.patch(loading=False)
        return user

    async def update_role(self, user_id: str, role: Role) -> User:
        """
        Raises:
            AuthorizationError: unless the session user is an admin; no
                write happens in that case.
        """
        try:
            user = await self.users.update_role(self.state.current_user, user_id, role)
        except Exception as exc:
            logger.error("Error updating role of %s: %s", user_id, exc)
            self.patch(error="Failed to update user role")
            raise

        current = self.state.current_user
        if current is not None and current.id == user_id:
            self.patch(current_user=user)
        return user

    def authorize(self, required: Role) -> bool:
        """True iff a session user is present, not loading, and ranks >= `required`."""
        state = self.state
        if state.current_user is None or state.loading:
            return False
        return has_role(state.current_user.role, required)
