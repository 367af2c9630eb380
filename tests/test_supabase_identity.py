import asyncio
from types import SimpleNamespace

import httpx
import pytest
from supabase import AuthApiError, AuthRetryableError, AuthWeakPasswordError

from circussync.core.errors import AuthenticationError
from circussync.core.identity import (
    CONFIGURATION_ERROR,
    EMAIL_ALREADY_IN_USE,
    INVALID_CREDENTIALS,
    NETWORK_ERROR,
    TOO_MANY_REQUESTS,
    UNKNOWN,
    USER_NOT_FOUND,
    WEAK_PASSWORD,
    ProviderError,
)
from circussync.core.supabase_identity import SupabaseIdentityProvider, translate_auth_error
from circussync.services.auth_service import AuthSessionManager


@pytest.mark.parametrize(
    ("exc", "code"),
    [
        (AuthApiError("Invalid login credentials", 400, "invalid_credentials"), INVALID_CREDENTIALS),
        (AuthApiError("User not found", 404, "user_not_found"), USER_NOT_FOUND),
        (AuthApiError("User already registered", 422, "user_already_exists"), EMAIL_ALREADY_IN_USE),
        (AuthApiError("Slow down", 429, "over_request_rate_limit"), TOO_MANY_REQUESTS),
        (AuthApiError("Slow down", 429, None), TOO_MANY_REQUESTS),
        (AuthApiError("Invalid API key", 401, None), CONFIGURATION_ERROR),
        (AuthApiError("Forbidden", 403, None), CONFIGURATION_ERROR),
        (AuthWeakPasswordError("Password too short", 422, ["length"]), WEAK_PASSWORD),
        (AuthRetryableError("Bad gateway", 502), NETWORK_ERROR),
        (httpx.ConnectError("connection refused"), NETWORK_ERROR),
        (RuntimeError("SUPABASE_URL and SUPABASE_KEY must be set"), CONFIGURATION_ERROR),
        (AuthApiError("Teapot", 418, None), UNKNOWN),
        (ValueError("boom"), UNKNOWN),
    ],
)
def test_translate_auth_error(exc, code) -> None:
    assert translate_auth_error(exc).code == code


def test_provider_errors_pass_through_unchanged() -> None:
    error = ProviderError(WEAK_PASSWORD)

    assert translate_auth_error(error) is error


class FakeAuth:
    def __init__(self, sign_in_error=None):
        self.sign_in_error = sign_in_error
        self.signed_out = False

    async def sign_in_with_password(self, credentials):
        if self.sign_in_error is not None:
            raise self.sign_in_error
        user = SimpleNamespace(
            id="uid-1",
            email=credentials["email"],
            user_metadata={"display_name": "Ann"},
        )
        return SimpleNamespace(user=user, session=SimpleNamespace())

    async def sign_out(self):
        self.signed_out = True


def test_sign_in_emits_identity() -> None:
    provider = SupabaseIdentityProvider(SimpleNamespace(auth=FakeAuth()))
    seen = []

    async def listener(identity):
        seen.append(identity)

    provider.on_session_change(listener)
    identity = asyncio.run(provider.sign_in("ann@example.com", "secret123"))

    assert identity.uid == "uid-1"
    assert identity.display_name == "Ann"
    assert seen == [identity]


def test_wrong_password_through_session_manager(user_service) -> None:
    auth = FakeAuth(AuthApiError("Invalid login credentials", 400, "invalid_credentials"))
    manager = AuthSessionManager(SupabaseIdentityProvider(SimpleNamespace(auth=auth)), user_service)

    with pytest.raises(AuthenticationError) as excinfo:
        asyncio.run(manager.sign_in("ann@example.com", "wrong"))

    assert excinfo.value.message == "Invalid email or password"
    assert manager.state.current_user is None
