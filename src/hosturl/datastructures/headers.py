# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Case-insensitive request header lookup.

Purpose
=======
Host resolution reads ``X-Forwarded-Host`` and ``Host`` from the request.
Header names are case-insensitive per RFC 7230, and a proxy chain may send
``X-Forwarded-Host`` more than once. ASGI delivers headers as
``list[tuple[bytes, bytes]]`` with Latin-1 encoding.

Processing Schema::

    [(b"Host", b"example.com"), (b"X-Forwarded-Host", b"a.com")]
                        ↓
                Latin-1 decode, lowercase names
                        ↓
    [("host", "example.com"), ("x-forwarded-host", "a.com")]
                        ↓
    headers.get("HOST") → "example.com"

Definition::

    class Headers:
        __slots__ = ("_headers",)

        def __init__(self, raw_headers: Iterable[tuple[bytes | str, bytes | str]] = ()) -> None
        def get(self, key: str, default: str | None = None) -> str | None
        def getlist(self, key: str) -> list[str]
        def get_combined(self, key: str) -> str | None
        def __contains__(self, key: object) -> bool
        def __len__(self) -> int

    def headers_from_scope(scope: Mapping[str, Any]) -> Headers

Design Notes
============
- Read-only, names normalized to lowercase, values preserved as-is
- ``get_combined`` joins repeated values with ", " the way a CGI
  environment folds duplicate headers into one variable
"""

from collections.abc import Iterable, Mapping
from typing import Any

__all__ = ["Headers", "headers_from_scope"]


def _decode(value: bytes | str) -> str:
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return value


class Headers:
    """
    Immutable, case-insensitive HTTP headers with multi-value support.

    Accepts raw ASGI ``(bytes, bytes)`` pairs or already-decoded
    ``(str, str)`` pairs.

    Example:
        >>> headers = Headers([(b"X-Forwarded-Host", b"a.com"), (b"x-forwarded-host", b"b.com")])
        >>> headers.get("x-forwarded-host")
        'a.com'
        >>> headers.get_combined("X-Forwarded-Host")
        'a.com, b.com'
    """

    __slots__ = ("_headers",)

    def __init__(self, raw_headers: Iterable[tuple[bytes | str, bytes | str]] = ()) -> None:
        self._headers: list[tuple[str, str]] = [
            (_decode(name).lower(), _decode(value)) for name, value in raw_headers
        ]

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the first value for a header, or default if absent."""
        key_lower = key.lower()
        for name, value in self._headers:
            if name == key_lower:
                return value
        return default

    def getlist(self, key: str) -> list[str]:
        """Return every value sent for a header, in order."""
        key_lower = key.lower()
        return [value for name, value in self._headers if name == key_lower]

    def get_combined(self, key: str) -> str | None:
        """Return all values for a header joined by ", ", or None if absent."""
        values = self.getlist(key)
        if not values:
            return None
        return ", ".join(values)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"Headers({self._headers!r})"


def headers_from_scope(scope: Mapping[str, Any]) -> Headers:
    """Create Headers from an ASGI scope; empty when the scope has no headers."""
    return Headers(scope.get("headers") or [])
