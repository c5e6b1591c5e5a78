"""Auth module public exports."""

from oidclogin.auth.grant import ALL_GRANT_TYPES, resolve_grant_option_set, uses_password_heuristic
from oidclogin.auth.listen_address import resolve_listen_addresses

__all__ = ["ALL_GRANT_TYPES", "resolve_grant_option_set", "resolve_listen_addresses", "uses_password_heuristic"]
