import asyncio

import pytest

from circussync.core.errors import AuthenticationError, AuthorizationError, TransportError
from circussync.core.identity import NETWORK_ERROR, InMemoryIdentityProvider, ProviderError
from circussync.core.roles import ROLE_ORDER, role_rank
from circussync.models.user import User
from circussync.services.auth_service import AuthSessionManager, AuthState

EMAIL = "ann@example.com"
PASSWORD = "secret123"


def _manager(provider, user_service, navigate=None) -> AuthSessionManager:
    return AuthSessionManager(provider, user_service, navigate)


def test_wrong_password_yields_fixed_message_and_no_user(provider, user_service) -> None:
    provider.add_account(EMAIL, PASSWORD)
    manager = _manager(provider, user_service)

    async def run():
        await manager.init()
        with pytest.raises(AuthenticationError) as excinfo:
            await manager.sign_in(EMAIL, "wrong-password")
        return excinfo.value

    error = asyncio.run(run())

    assert error.message == "Invalid email or password"
    assert manager.state.error == "Invalid email or password"
    assert manager.state.current_user is None
    assert manager.state.loading is False


def test_unknown_email_gets_the_same_message(provider, user_service) -> None:
    manager = _manager(provider, user_service)

    with pytest.raises(AuthenticationError, match="Invalid email or password"):
        asyncio.run(manager.sign_in("nobody@example.com", PASSWORD))


def test_repeated_failures_are_rate_limited(provider, user_service) -> None:
    provider.add_account(EMAIL, PASSWORD)
    manager = _manager(provider, user_service)

    async def run():
        for _ in range(5):
            with pytest.raises(AuthenticationError):
                await manager.sign_in(EMAIL, "nope")
        with pytest.raises(AuthenticationError) as excinfo:
            await manager.sign_in(EMAIL, PASSWORD)
        return excinfo.value

    error = asyncio.run(run())

    assert error.message == "Too many failed login attempts. Please try again later."


def test_sign_in_provisions_readonly_profile(provider, user_service) -> None:
    identity = provider.add_account(EMAIL, PASSWORD, display_name="Ann")
    manager = _manager(provider, user_service)

    async def run():
        await manager.init()
        await manager.sign_in(EMAIL, PASSWORD)
        return await user_service.get_user(identity.uid)

    stored = asyncio.run(run())

    user = manager.state.current_user
    assert user is not None and user.id == identity.uid
    assert user.role == "readonly"
    assert user.name == "Ann"
    assert stored.last_login is not None
    assert manager.authorize("readonly")
    assert not manager.authorize("performer")


@pytest.mark.parametrize("session_role", ROLE_ORDER)
@pytest.mark.parametrize("required", ROLE_ORDER)
def test_authorize_follows_role_rank(provider, user_service, session_role, required) -> None:
    manager = _manager(provider, user_service)
    manager.set(AuthState(current_user=User(id="u1", role=session_role), loading=False))

    assert manager.authorize(required) == (role_rank(session_role) >= role_rank(required))


@pytest.mark.parametrize("required", ROLE_ORDER)
def test_authorize_is_false_without_a_session_user(provider, user_service, required) -> None:
    manager = _manager(provider, user_service)
    manager.set(AuthState(current_user=None, loading=False))

    assert not manager.authorize(required)


def test_authorize_is_false_while_loading(provider, user_service) -> None:
    manager = _manager(provider, user_service)
    manager.set(AuthState(current_user=User(id="u1", role="admin"), loading=True))

    assert not manager.authorize("readonly")


def test_update_role_by_non_admin_is_rejected_without_write(provider, user_service) -> None:
    provider.add_account(EMAIL, PASSWORD)
    manager = _manager(provider, user_service)

    async def run():
        await manager.init()
        await manager.sign_in(EMAIL, PASSWORD)
        await user_service.repo.create_with_id("target", {"email": "t@example.com", "role": "readonly"})
        before = await user_service.get_user("target")
        with pytest.raises(AuthorizationError):
            await manager.update_role("target", "admin")
        return before, await user_service.get_user("target")

    before, after = asyncio.run(run())

    assert after == before


def test_admin_can_update_roles(provider, user_service) -> None:
    identity = provider.add_account(EMAIL, PASSWORD)
    manager = _manager(provider, user_service)

    async def run():
        await user_service.repo.create_with_id(identity.uid, {"email": EMAIL, "role": "admin"})
        await user_service.repo.create_with_id("target", {"email": "t@example.com"})
        await manager.init()
        await manager.sign_in(EMAIL, PASSWORD)
        return await manager.update_role("target", "manager")

    assert asyncio.run(run()).role == "manager"


def test_register_creates_profile_with_display_name(provider, user_service) -> None:
    manager = _manager(provider, user_service)

    async def run():
        await manager.init()
        await manager.register("new@example.com", PASSWORD, "Newcomer")

    asyncio.run(run())

    user = manager.state.current_user
    assert user is not None
    assert user.name == "Newcomer"
    assert user.role == "readonly"


@pytest.mark.parametrize(
    ("email", "password", "message"),
    [
        (EMAIL, PASSWORD, "Email is already in use"),
        ("other@example.com", "123", "Password is too weak"),
        ("not-an-email", PASSWORD, "Email is invalid"),
    ],
)
def test_register_failures_map_to_fixed_messages(provider, user_service, email, password, message) -> None:
    provider.add_account(EMAIL, PASSWORD)
    manager = _manager(provider, user_service)

    with pytest.raises(AuthenticationError) as excinfo:
        asyncio.run(manager.register(email, password, "Someone"))

    assert excinfo.value.message == message
    assert manager.state.error == message


def test_reset_password(provider, user_service) -> None:
    provider.add_account(EMAIL, PASSWORD)
    manager = _manager(provider, user_service)

    asyncio.run(manager.reset_password(EMAIL))
    with pytest.raises(AuthenticationError, match="No user found with this email"):
        asyncio.run(manager.reset_password("ghost@example.com"))

    assert provider.sent_resets == [EMAIL]


def test_network_failures_raise_transport_error(user_service) -> None:
    class OfflineProvider(InMemoryIdentityProvider):
        async def sign_in(self, email, password):
            raise ProviderError(NETWORK_ERROR, "connection refused")

    manager = _manager(OfflineProvider(), user_service)

    with pytest.raises(TransportError):
        asyncio.run(manager.sign_in(EMAIL, PASSWORD))

    assert manager.state.error == "Network error. Please check your connection and try again."


def test_sign_out_clears_state_and_navigates_to_login(provider, user_service) -> None:
    provider.add_account(EMAIL, PASSWORD)
    visited: list[str] = []
    manager = _manager(provider, user_service, visited.append)

    async def run():
        await manager.init()
        await manager.sign_in(EMAIL, PASSWORD)
        await manager.sign_out()

    asyncio.run(run())

    assert manager.state.current_user is None
    assert visited == ["/login"]


def test_profile_resolution_failure_sets_error_state(provider, user_service) -> None:
    provider.add_account(EMAIL, PASSWORD)
    manager = _manager(provider, user_service)

    async def broken(identity, touch_login=True):
        raise RuntimeError("database unavailable")

    user_service.resolve_or_create = broken

    async def run():
        await manager.init()
        await manager.sign_in(EMAIL, PASSWORD)

    asyncio.run(run())

    assert manager.state.current_user is None
    assert manager.state.error == "Failed to load user profile"


def test_provider_error_channel_republishes_error(provider, user_service) -> None:
    manager = _manager(provider, user_service)
    asyncio.run(manager.init())

    provider._emit_error(RuntimeError("session restore failed"))

    assert manager.state.error == "session restore failed"
    assert manager.state.loading is False


def test_close_stops_listening(provider, user_service) -> None:
    provider.add_account(EMAIL, PASSWORD)
    manager = _manager(provider, user_service)

    async def run():
        await manager.init()
        manager.close()
        await provider.sign_in(EMAIL, PASSWORD)

    asyncio.run(run())

    assert manager.state.current_user is None


def test_update_own_profile_patches_state_and_provider(provider, user_service) -> None:
    identity = provider.add_account(EMAIL, PASSWORD, display_name="Ann")
    manager = _manager(provider, user_service)

    async def run():
        await manager.init()
        await manager.sign_in(EMAIL, PASSWORD)
        await manager.update_profile(identity.uid, {"name": "Annie"})

    asyncio.run(run())

    assert manager.state.current_user.name == "Annie"
    assert provider.current_identity.display_name == "Annie"
