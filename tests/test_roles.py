import pytest

from circussync.core.roles import ROLE_ORDER, has_role, role_rank


def test_hierarchy_order() -> None:
    assert ROLE_ORDER == ("readonly", "performer", "manager", "admin")
    assert role_rank("readonly") < role_rank("performer") < role_rank("manager") < role_rank("admin")


@pytest.mark.parametrize("actual", ROLE_ORDER)
@pytest.mark.parametrize("required", ROLE_ORDER)
def test_has_role_follows_rank(actual: str, required: str) -> None:
    assert has_role(actual, required) == (role_rank(actual) >= role_rank(required))


def test_missing_or_unknown_role_never_passes() -> None:
    assert not has_role(None, "readonly")
    assert not has_role("owner", "readonly")


def test_unknown_required_role_is_an_error() -> None:
    with pytest.raises(ValueError):
        role_rank("owner")
