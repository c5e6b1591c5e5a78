"""OIDC helpers that need no network access."""

from oidclogin.oidc.request import AuthorizationRequest, new_authorization_request, verify_state
from oidclogin.oidc.tokens import new_nonce, new_opaque_token, new_state

__all__ = [
    "AuthorizationRequest",
    "new_authorization_request",
    "new_nonce",
    "new_opaque_token",
    "new_state",
    "verify_state",
]
