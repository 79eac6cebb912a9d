# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Data structures and encoding primitives used by hosturl.

Mapping from ASGI to hosturl classes::

    ASGI Raw Data                          hosturl
    ─────────────────                      ──────────────────
    scope["server"] = ("example.com", 80)  →  Address(host, port)
    scope["headers"] = [(b"...", b"...")]  →  Headers (case-insensitive)
    {"page": 2, "q": "x"}                  →  to_query() -> "page=2&q=x"

Modules
=======
- ``address``: Server address wrapper
- ``headers``: Case-insensitive HTTP headers
- ``query``: Query string serialization and escaping
"""

from .address import Address, server_from_scope
from .headers import Headers, headers_from_scope
from .query import escape, escape_fragment, to_param, to_query

__all__ = [
    "Address",
    "Headers",
    "escape",
    "escape_fragment",
    "headers_from_scope",
    "server_from_scope",
    "to_param",
    "to_query",
]
