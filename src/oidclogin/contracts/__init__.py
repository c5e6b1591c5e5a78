"""Public contracts for oidclogin."""

from oidclogin.contracts.config import DEFAULT_LISTEN_ADDRESS, DEFAULT_REDIRECT_URL_HOSTNAME, RawAuthConfig
from oidclogin.contracts.exceptions import (
    ConfigError,
    OidcLoginError,
    RandomSourceUnavailableError,
    StateMismatchError,
    UnsupportedGrantTypeError,
)
from oidclogin.contracts.grant import AuthCodeKeyboardOption, AuthCodeOption, GrantOptionSet, ROPCOption
from oidclogin.contracts.provider import Provider, TokenSet

__all__ = [
    "DEFAULT_LISTEN_ADDRESS",
    "DEFAULT_REDIRECT_URL_HOSTNAME",
    "AuthCodeKeyboardOption",
    "AuthCodeOption",
    "ConfigError",
    "GrantOptionSet",
    "OidcLoginError",
    "Provider",
    "ROPCOption",
    "RandomSourceUnavailableError",
    "RawAuthConfig",
    "StateMismatchError",
    "TokenSet",
    "UnsupportedGrantTypeError",
]
