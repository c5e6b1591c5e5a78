"""Configuration loading."""

from oidclogin.config.loader import build_config, load_config

__all__ = ["build_config", "load_config"]
