"""Local callback listener address resolution."""

from __future__ import annotations

from collections.abc import Sequence

LEGACY_LISTEN_HOST = "127.0.0.1"


def resolve_listen_addresses(listen_address: Sequence[str], listen_port: Sequence[int]) -> list[str]:
    """Return the addresses the callback listener should try binding, in order.

    ``listen_address`` always carries at least the built-in default. When any
    deprecated ``listen_port`` is given it takes full precedence: the address
    list is ignored and each port is bound on the loopback host.
    """
    if not listen_port:
        return list(listen_address)
    return [f"{LEGACY_LISTEN_HOST}:{port}" for port in listen_port]
