"""Single-use opaque tokens for the OAuth2 state and OIDC nonce parameters."""

from __future__ import annotations

import base64
import secrets

from oidclogin.contracts.exceptions import RandomSourceUnavailableError

TOKEN_BYTES = 32


def _random_bytes(size: int) -> bytes:
    try:
        data = secrets.token_bytes(size)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceUnavailableError(f"could not generate a random: {exc}") from exc
    if len(data) != size:
        raise RandomSourceUnavailableError(f"short read from random source: got {len(data)} of {size} bytes")
    return data


def _base64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def new_opaque_token() -> str:
    """Return 32 fresh CSPRNG bytes as unpadded URL-safe base64."""
    return _base64url_encode(_random_bytes(TOKEN_BYTES))


def new_state() -> str:
    return new_opaque_token()


def new_nonce() -> str:
    return new_opaque_token()
