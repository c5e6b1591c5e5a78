"""Grant type resolution."""

from __future__ import annotations

import logging

from oidclogin.auth.listen_address import resolve_listen_addresses
from oidclogin.contracts.config import RawAuthConfig
from oidclogin.contracts.exceptions import UnsupportedGrantTypeError
from oidclogin.contracts.grant import AuthCodeKeyboardOption, AuthCodeOption, GrantOptionSet, ROPCOption

logger = logging.getLogger(__name__)

GRANT_TYPE_AUTO = "auto"
GRANT_TYPE_AUTHCODE = "authcode"
GRANT_TYPE_AUTHCODE_KEYBOARD = "authcode-keyboard"
GRANT_TYPE_PASSWORD = "password"

ALL_GRANT_TYPES: tuple[str, ...] = (
    GRANT_TYPE_AUTO,
    GRANT_TYPE_AUTHCODE,
    GRANT_TYPE_AUTHCODE_KEYBOARD,
    GRANT_TYPE_PASSWORD,
)


def uses_password_heuristic(config: RawAuthConfig) -> bool:
    """Whether ``auto`` should pick the password grant.

    A username is taken as the signal for a headless login; without one,
    ``auto`` falls back to the browser-based authorization code flow.
    """
    return config.grant_type == GRANT_TYPE_AUTO and config.username != ""


def resolve_grant_option_set(config: RawAuthConfig) -> GrantOptionSet:
    """Classify the raw configuration into exactly one grant strategy.

    Branch order matters: ``auto`` without a username is decided before
    ``authcode-keyboard`` and ``password`` are considered.
    """
    auto_password = uses_password_heuristic(config)

    if config.grant_type == GRANT_TYPE_AUTHCODE or (config.grant_type == GRANT_TYPE_AUTO and not auto_password):
        bind_address = resolve_listen_addresses(config.listen_address, config.listen_port)
        logger.debug("grant type %s: authorization code flow, bind address %s", config.grant_type, bind_address)
        return GrantOptionSet(
            auth_code_option=AuthCodeOption(
                bind_address=bind_address,
                skip_open_browser=config.skip_open_browser,
                redirect_url_hostname=config.redirect_url_hostname,
                auth_request_extra_params=dict(config.auth_request_extra_params),
            )
        )

    if config.grant_type == GRANT_TYPE_AUTHCODE_KEYBOARD:
        logger.debug("grant type %s: authorization code flow with keyboard", config.grant_type)
        return GrantOptionSet(
            auth_code_keyboard_option=AuthCodeKeyboardOption(
                auth_request_extra_params=dict(config.auth_request_extra_params),
            )
        )

    if config.grant_type == GRANT_TYPE_PASSWORD or auto_password:
        # Empty credentials are rejected by the token endpoint, not here.
        logger.debug("grant type %s: resource owner password credentials flow", config.grant_type)
        return GrantOptionSet(ropc_option=ROPCOption(username=config.username, password=config.password))

    raise UnsupportedGrantTypeError(config.grant_type, allowed=ALL_GRANT_TYPES)
