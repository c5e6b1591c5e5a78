from pathlib import Path

import pytest
from pydantic import ValidationError

from oidclogin.contracts.provider import Provider, TokenSet


def test_provider_defaults() -> None:
    provider = Provider(issuer_url="https://issuer.example.com", client_id="YOUR_CLIENT_ID")

    assert provider.client_secret is None
    assert provider.extra_scopes == ()
    assert provider.certificate_authority is None
    assert provider.certificate_authority_data is None
    assert provider.skip_tls_verify is False


def test_provider_keeps_all_fields() -> None:
    provider = Provider(
        issuer_url="https://issuer.example.com",
        client_id="YOUR_CLIENT_ID",
        client_secret="YOUR_CLIENT_SECRET",
        extra_scopes=["email", "profile"],
        certificate_authority="/path/to/cacert",
        skip_tls_verify=True,
    )

    assert provider.extra_scopes == ("email", "profile")
    assert provider.certificate_authority == Path("/path/to/cacert")
    assert provider.skip_tls_verify is True
    assert "YOUR_CLIENT_SECRET" not in repr(provider)


@pytest.mark.parametrize("field", ["issuer_url", "client_id"])
def test_provider_rejects_blank_required_fields(field: str) -> None:
    values = {"issuer_url": "https://issuer.example.com", "client_id": "YOUR_CLIENT_ID", field: "  "}

    with pytest.raises(ValidationError):
        Provider(**values)


def test_token_set_repr_hides_tokens() -> None:
    token_set = TokenSet(id_token="ID.TOKEN.VALUE", refresh_token="REFRESH", id_token_claims={"sub": "alice"})

    assert token_set.id_token_claims == {"sub": "alice"}
    assert "ID.TOKEN.VALUE" not in repr(token_set)
    assert "REFRESH" not in repr(token_set)


def test_token_set_refresh_token_is_optional() -> None:
    token_set = TokenSet(id_token="ID.TOKEN.VALUE")

    assert token_set.refresh_token is None
    assert token_set.id_token_claims == {}
