"""Authorization request construction and callback state checks."""

from __future__ import annotations

import logging
import secrets
from collections.abc import Mapping
from urllib.parse import urlencode

from pydantic import BaseModel, Field

from oidclogin.contracts.exceptions import StateMismatchError
from oidclogin.contracts.provider import Provider
from oidclogin.oidc.tokens import new_nonce, new_state

logger = logging.getLogger(__name__)

OPENID_SCOPE = "openid"


class AuthorizationRequest(BaseModel):
    client_id: str
    redirect_uri: str
    scopes: tuple[str, ...]
    state: str = Field(repr=False)
    nonce: str = Field(repr=False)
    extra_params: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def authorization_url(self, authorization_endpoint: str) -> str:
        params = dict(self.extra_params)
        params.update(
            {
                "response_type": "code",
                "client_id": self.client_id,
                "redirect_uri": self.redirect_uri,
                "scope": " ".join(self.scopes),
                "state": self.state,
                "nonce": self.nonce,
            }
        )
        separator = "&" if "?" in authorization_endpoint else "?"
        return f"{authorization_endpoint}{separator}{urlencode(params)}"


def new_authorization_request(
    provider: Provider,
    *,
    redirect_uri: str,
    extra_params: Mapping[str, str] | None = None,
) -> AuthorizationRequest:
    """Start an authorization round trip with fresh, independent state and nonce."""
    scopes = (OPENID_SCOPE, *provider.extra_scopes)
    logger.debug("authorization request for client %s with scopes %s", provider.client_id, scopes)
    return AuthorizationRequest(
        client_id=provider.client_id,
        redirect_uri=redirect_uri,
        scopes=scopes,
        state=new_state(),
        nonce=new_nonce(),
        extra_params=dict(extra_params or {}),
    )


def verify_state(expected: str, actual: str) -> None:
    if not expected or not actual:
        raise StateMismatchError("state is missing from the authorization response")
    if not secrets.compare_digest(expected.encode("utf-8"), actual.encode("utf-8")):
        raise StateMismatchError("state does not match the authorization request")
