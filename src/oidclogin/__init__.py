"""Public API surface for oidclogin."""

from oidclogin.auth import ALL_GRANT_TYPES, resolve_grant_option_set, resolve_listen_addresses
from oidclogin.config import build_config, load_config
from oidclogin.contracts.config import DEFAULT_LISTEN_ADDRESS, RawAuthConfig
from oidclogin.contracts.exceptions import (
    ConfigError,
    OidcLoginError,
    RandomSourceUnavailableError,
    StateMismatchError,
    UnsupportedGrantTypeError,
)
from oidclogin.contracts.grant import AuthCodeKeyboardOption, AuthCodeOption, GrantOptionSet, ROPCOption
from oidclogin.contracts.provider import Provider, TokenSet
from oidclogin.oidc import (
    AuthorizationRequest,
    new_authorization_request,
    new_nonce,
    new_opaque_token,
    new_state,
    verify_state,
)

__all__ = [
    "ALL_GRANT_TYPES",
    "DEFAULT_LISTEN_ADDRESS",
    "AuthCodeKeyboardOption",
    "AuthCodeOption",
    "AuthorizationRequest",
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
    "build_config",
    "load_config",
    "new_authorization_request",
    "new_nonce",
    "new_opaque_token",
    "new_state",
    "resolve_grant_option_set",
    "resolve_listen_addresses",
    "verify_state",
]
