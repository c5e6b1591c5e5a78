"""OIDC provider and token set contracts."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


class Provider(BaseModel):
    """OIDC issuer descriptor for a single login attempt."""

    issuer_url: str
    client_id: str
    client_secret: str | None = Field(default=None, repr=False)
    extra_scopes: tuple[str, ...] = ()
    certificate_authority: Path | None = None
    certificate_authority_data: str | None = None
    skip_tls_verify: bool = False

    model_config = {"frozen": True}

    @field_validator("issuer_url", "client_id")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value


class TokenSet(BaseModel):
    """Output of the authorization code, ROPC and refresh exchanges."""

    id_token: str = Field(repr=False)
    refresh_token: str | None = Field(default=None, repr=False)
    id_token_claims: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}
