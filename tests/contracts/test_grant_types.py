import pytest
from pydantic import ValidationError

from oidclogin.contracts.grant import AuthCodeKeyboardOption, AuthCodeOption, GrantOptionSet, ROPCOption


def test_grant_option_set_requires_an_option() -> None:
    with pytest.raises(ValidationError):
        GrantOptionSet()


def test_grant_option_set_rejects_multiple_options() -> None:
    with pytest.raises(ValidationError):
        GrantOptionSet(
            auth_code_option=AuthCodeOption(bind_address=["127.0.0.1:8000"]),
            ropc_option=ROPCOption(username="alice", password="pw"),
        )


@pytest.mark.parametrize(
    "option",
    [
        AuthCodeOption(bind_address=["127.0.0.1:8000"]),
        AuthCodeKeyboardOption(),
        ROPCOption(username="alice", password="pw"),
    ],
)
def test_option_returns_populated_variant(option: AuthCodeOption | AuthCodeKeyboardOption | ROPCOption) -> None:
    field = {
        AuthCodeOption: "auth_code_option",
        AuthCodeKeyboardOption: "auth_code_keyboard_option",
        ROPCOption: "ropc_option",
    }[type(option)]

    assert GrantOptionSet(**{field: option}).option is option


def test_auth_code_option_requires_bind_address() -> None:
    with pytest.raises(ValidationError):
        AuthCodeOption(bind_address=[])


def test_auth_code_option_defaults() -> None:
    option = AuthCodeOption(bind_address=["127.0.0.1:8000"])

    assert option.skip_open_browser is False
    assert option.redirect_url_hostname == "localhost"
    assert option.auth_request_extra_params == {}


def test_ropc_option_repr_hides_password() -> None:
    assert "hunter2" not in repr(ROPCOption(username="alice", password="hunter2"))


def test_grant_option_set_is_frozen() -> None:
    option_set = GrantOptionSet(auth_code_keyboard_option=AuthCodeKeyboardOption())

    with pytest.raises(ValidationError):
        option_set.ropc_option = ROPCOption(username="alice", password="pw")  # type: ignore[misc]


def test_option_raises_when_constructed_without_validation() -> None:
    option_set = GrantOptionSet.model_construct()

    with pytest.raises(ValueError, match="no grant option is set"):
        option_set.option
