"""Command-line interface for oidclogin."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Any

from oidclogin import (
    ALL_GRANT_TYPES,
    ConfigError,
    GrantOptionSet,
    OidcLoginError,
    RawAuthConfig,
    build_config,
    load_config,
    resolve_grant_option_set,
)

logger = logging.getLogger(__name__)

_MASK = "********"


def _package_version() -> str:
    try:
        return version("oidclogin")
    except PackageNotFoundError:
        return "0.0.0"


def _split_values(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def _parse_ports(value: str) -> list[int]:
    try:
        return [int(part) for part in _split_values(value)]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid port list: {value}") from exc


def _parse_key_values(value: str) -> dict[str, str]:
    params: dict[str, str] = {}
    for pair in _split_values(value):
        key, separator, item = pair.partition("=")
        if not separator or not key:
            raise argparse.ArgumentTypeError(f"{pair} must be formatted as key=value")
        params[key] = item
    return params


def add_authentication_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the grant flags; unset flags stay ``None`` so config files can fill them."""
    parser.add_argument(
        "--grant-type",
        default=None,
        help=f"Authorization grant type to use. One of ({'|'.join(ALL_GRANT_TYPES)})",
    )
    parser.add_argument(
        "--listen-address",
        action="append",
        type=_split_values,
        default=None,
        help="[authcode] Address to bind to the local server. If multiple addresses are set, it will try binding in order",
    )
    parser.add_argument(
        "--listen-port",
        action="append",
        type=_parse_ports,
        default=None,
        help="[authcode] deprecated: port to bind to the local server",
    )
    parser.add_argument(
        "--skip-open-browser",
        action="store_true",
        default=None,
        help="[authcode] Do not open the browser automatically",
    )
    parser.add_argument(
        "--oidc-redirect-url-hostname",
        dest="redirect_url_hostname",
        default=None,
        help="[authcode] Hostname of the redirect URL",
    )
    parser.add_argument(
        "--oidc-auth-request-extra-params",
        dest="auth_request_extra_params",
        action="append",
        type=_parse_key_values,
        default=None,
        help="[authcode, authcode-keyboard] Extra query parameters to send with an authentication request",
    )
    parser.add_argument("--username", default=None, help="[password] Username for resource owner password credentials grant")
    parser.add_argument("--password", default=None, help="[password] Password for resource owner password credentials grant")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="oidclogin")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)
    resolve_parser = subparsers.add_parser("resolve", help="Show the grant strategy selected by the options")
    resolve_parser.add_argument("--config", default=None, help="Path to a JSON file with authentication options")
    add_authentication_arguments(resolve_parser)
    resolve_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


def _overrides_from_args(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.grant_type is not None:
        overrides["grant_type"] = args.grant_type
    if args.listen_address is not None:
        overrides["listen_address"] = [address for chunk in args.listen_address for address in chunk]
    if args.listen_port is not None:
        overrides["listen_port"] = [port for chunk in args.listen_port for port in chunk]
    if args.skip_open_browser is not None:
        overrides["skip_open_browser"] = args.skip_open_browser
    if args.redirect_url_hostname is not None:
        overrides["redirect_url_hostname"] = args.redirect_url_hostname
    if args.auth_request_extra_params is not None:
        merged: dict[str, str] = {}
        for params in args.auth_request_extra_params:
            merged.update(params)
        overrides["auth_request_extra_params"] = merged
    if args.username is not None:
        overrides["username"] = args.username
    if args.password is not None:
        overrides["password"] = args.password
    return overrides


def _resolve_config(args: argparse.Namespace) -> RawAuthConfig:
    overrides = _overrides_from_args(args)
    if args.config:
        return load_config(args.config, overrides=overrides)
    return build_config(overrides)


def _format_grant_option_set(option_set: GrantOptionSet) -> str:
    payload = option_set.model_dump(mode="json", exclude_none=True)
    ropc = payload.get("ropc_option")
    if ropc is not None and ropc.get("password"):
        ropc["password"] = _MASK
    return json.dumps(payload, indent=2, sort_keys=True)


def _run_resolve(args: argparse.Namespace) -> GrantOptionSet:
    config = _resolve_config(args)
    option_set = resolve_grant_option_set(config)
    print(_format_grant_option_set(option_set))
    return option_set


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        _run_resolve(args)
        return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except OidcLoginError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
