"""Grant option contracts handed to the authentication use case."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from oidclogin.contracts.config import DEFAULT_REDIRECT_URL_HOSTNAME


class AuthCodeOption(BaseModel):
    bind_address: list[str] = Field(min_length=1)
    skip_open_browser: bool = False
    redirect_url_hostname: str = DEFAULT_REDIRECT_URL_HOSTNAME
    auth_request_extra_params: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}


class AuthCodeKeyboardOption(BaseModel):
    auth_request_extra_params: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}


class ROPCOption(BaseModel):
    username: str
    password: str = Field(repr=False)

    model_config = {"frozen": True}


class GrantOptionSet(BaseModel):
    """Exactly one grant strategy; the populated field selects the flow."""

    auth_code_option: AuthCodeOption | None = None
    auth_code_keyboard_option: AuthCodeKeyboardOption | None = None
    ropc_option: ROPCOption | None = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_single_option(self) -> GrantOptionSet:
        populated = [
            option
            for option in (self.auth_code_option, self.auth_code_keyboard_option, self.ropc_option)
            if option is not None
        ]
        if len(populated) != 1:
            raise ValueError(f"exactly one grant option must be set, got {len(populated)}")
        return self

    @property
    def option(self) -> AuthCodeOption | AuthCodeKeyboardOption | ROPCOption:
        if self.auth_code_option is not None:
            return self.auth_code_option
        if self.auth_code_keyboard_option is not None:
            return self.auth_code_keyboard_option
        if self.ropc_option is None:
            raise ValueError("no grant option is set")
        return self.ropc_option
