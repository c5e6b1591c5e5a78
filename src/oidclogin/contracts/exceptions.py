"""Exception hierarchy for oidclogin."""

from __future__ import annotations


class OidcLoginError(Exception):
    """Base exception for all oidclogin errors."""


class ConfigError(OidcLoginError):
    """Configuration loading or validation failure."""


class UnsupportedGrantTypeError(ConfigError):
    """Grant type matches none of the supported strategies."""

    def __init__(self, grant_type: str, *, allowed: tuple[str, ...]) -> None:
        super().__init__(f"grant-type must be one of ({'|'.join(allowed)})")
        self.grant_type = grant_type
        self.allowed = allowed


class RandomSourceUnavailableError(OidcLoginError):
    """The secure random source could not supply bytes."""


class StateMismatchError(OidcLoginError):
    """Authorization response state does not match the issued one."""
