# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Server address wrapper.

ASGI Mapping::

    scope["server"] = ("example.com", 8080)  →  Address(host, port)
    scope["server"] = ("/tmp/app.sock", None) →  Address(host, None)

The server address is the last fallback when a request carries neither
``X-Forwarded-Host`` nor ``Host``.
"""

from collections.abc import Mapping
from typing import Any

__all__ = ["Address", "server_from_scope"]


class Address:
    """
    Server address (name or IP, port).

    Example:
        >>> addr = Address("10.0.0.1", 8080)
        >>> addr.host_with_port
        '10.0.0.1:8080'
        >>> addr == ("10.0.0.1", 8080)
        True
    """

    __slots__ = ("host", "port")

    def __init__(self, host: str | None, port: int | None) -> None:
        self.host = host
        self.port = port

    @property
    def host_with_port(self) -> str:
        """``host:port`` with absent parts rendered as empty strings."""
        host = "" if self.host is None else self.host
        port = "" if self.port is None else self.port
        return f"{host}:{port}"

    def __repr__(self) -> str:
        return f"Address(host={self.host!r}, port={self.port})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Address):
            return self.host == other.host and self.port == other.port
        if isinstance(other, tuple) and len(other) == 2:
            return bool(self.host == other[0] and self.port == other[1])
        return False


def server_from_scope(scope: Mapping[str, Any]) -> Address | None:
    """Return the scope's ``server`` entry as an Address, or None if missing."""
    server = scope.get("server")
    if not server:
        return None
    return Address(host=server[0], port=server[1])
