"""Configuration contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

DEFAULT_LISTEN_ADDRESS: tuple[str, ...] = ("127.0.0.1:8000", "127.0.0.1:18000")
DEFAULT_REDIRECT_URL_HOSTNAME = "localhost"


class RawAuthConfig(BaseModel):
    grant_type: str = "auto"
    listen_address: list[str] = Field(default_factory=lambda: list(DEFAULT_LISTEN_ADDRESS), min_length=1)
    listen_port: list[int] = Field(default_factory=list)  # deprecated
    skip_open_browser: bool = False
    redirect_url_hostname: str = DEFAULT_REDIRECT_URL_HOSTNAME
    auth_request_extra_params: dict[str, str] = Field(default_factory=dict)
    username: str = ""
    password: str = Field(default="", repr=False)

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("listen_port")
    @classmethod
    def validate_listen_port(cls, value: list[int]) -> list[int]:
        for port in value:
            if not 0 <= port <= 65535:
                raise ValueError(f"listen_port out of range: {port}")
        return value
