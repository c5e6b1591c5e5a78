import base64
import re

import pytest

from oidclogin.contracts.exceptions import RandomSourceUnavailableError
from oidclogin.oidc import tokens
from oidclogin.oidc.tokens import TOKEN_BYTES, new_nonce, new_opaque_token, new_state

_URL_SAFE = re.compile(r"^[A-Za-z0-9_-]+$")


def test_opaque_token_is_unpadded_url_safe_base64_of_32_bytes() -> None:
    token = new_opaque_token()

    assert len(token) == 43
    assert "=" not in token
    assert _URL_SAFE.match(token)
    assert len(base64.urlsafe_b64decode(token + "=")) == TOKEN_BYTES


def test_opaque_tokens_do_not_repeat() -> None:
    drawn = [new_opaque_token() for _ in range(10_000)]

    assert len(set(drawn)) == len(drawn)
    assert all(_URL_SAFE.match(token) for token in drawn)
    assert base64.urlsafe_b64encode(bytes(TOKEN_BYTES)).decode().rstrip("=") not in drawn


def test_state_and_nonce_are_independent() -> None:
    assert new_state() != new_nonce()


def test_encodes_bytes_from_random_source(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(tokens.secrets, "token_bytes", lambda size: b"\xfb" * size)

    assert new_opaque_token() == base64.urlsafe_b64encode(b"\xfb" * 32).decode("ascii").rstrip("=")


def test_raises_when_random_source_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail(size: int) -> bytes:
        raise OSError("getrandom failed")

    monkeypatch.setattr(tokens.secrets, "token_bytes", _fail)

    with pytest.raises(RandomSourceUnavailableError) as exc_info:
        new_opaque_token()

    assert isinstance(exc_info.value.__cause__, OSError)


def test_raises_on_short_read(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(tokens.secrets, "token_bytes", lambda size: b"\x01" * (size - 1))

    with pytest.raises(RandomSourceUnavailableError):
        new_state()
