"""Config loading for the authentication options."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from oidclogin.contracts.config import RawAuthConfig
from oidclogin.contracts.exceptions import ConfigError

logger = logging.getLogger(__name__)


def build_config(payload: Mapping[str, Any]) -> RawAuthConfig:
    try:
        config = RawAuthConfig.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    if config.listen_port:
        logger.warning("listen_port is deprecated, use listen_address instead")
    return config


def load_config(path: str | Path, *, overrides: Mapping[str, Any] | None = None) -> RawAuthConfig:
    """Load options from a JSON file; ``overrides`` win over file values."""
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc

    if not isinstance(raw_payload, dict):
        raise ConfigError(f"config file must contain a JSON object: {config_path}")

    payload = {**raw_payload, **(overrides or {})}
    return build_config(payload)
