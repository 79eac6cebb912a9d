# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Query string serialization and percent-encoding primitives.

Purpose
=======
The reverse direction of query parsing: turns a parameter mapping into a
query string for generated URLs, and escapes credentials and fragments.
Uses ``urllib.parse`` for the actual percent-encoding.

Serialization Schema::

    {"q": "a b", "tags": ["x", "y"], "page": {"n": 2}, "empty": None}
                        ↓
                to_param per value
                        ↓
    q=a+b   page%5Bn%5D=2   tags%5B%5D=x&tags%5B%5D=y   empty=
                        ↓
                sort, join with "&"
                        ↓
    "empty=&page%5Bn%5D=2&q=a+b&tags%5B%5D=x&tags%5B%5D=y"

Value Conversion (``to_param``)::

    +------------------+-------------------+
    | Value            | Parameter         |
    +------------------+-------------------+
    | None             | None (absent)     |
    | True / False     | "true" / "false"  |
    | list / tuple     | items joined "/"  |
    | anything else    | str(value)        |
    +------------------+-------------------+

Definition::

    def to_param(value: Any) -> str | None
    def to_query(params: Mapping[str, Any], namespace: str | None = None) -> str
    def escape(value: Any) -> str
    def escape_fragment(value: str) -> str

Design Notes
============
- Pairs are sorted so the output is stable regardless of mapping order;
  items of a list keep their order inside their group
- Empty nested mappings and empty lists produce no pair at all
- ``escape`` is form encoding (space becomes "+"), ``escape_fragment``
  keeps every character RFC 3986 allows in a fragment
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, quote_plus

__all__ = ["to_param", "to_query", "escape", "escape_fragment", "FRAGMENT_SAFE"]

# sub-delims, ":" "@" (pchar) and "/" "?"; unreserved characters are always safe
FRAGMENT_SAFE = "!$&'()*+,;=:@/?"


def to_param(value: Any) -> str | None:
    """Convert a value to its URL parameter form. None stays None."""
    if value is None:
        return None
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, (list, tuple)):
        return "/".join(str(to_param(item) or "") for item in value)
    return str(value)


def escape(value: Any) -> str:
    """Form-encode a value (space becomes "+")."""
    return quote_plus(str(value))


def escape_fragment(value: str) -> str:
    """Percent-encode characters not allowed in a URL fragment."""
    return quote(value, safe=FRAGMENT_SAFE)


def _pair(key: str, value: Any) -> str:
    return f"{escape(key)}={escape(to_param(value) or '')}"


def _to_query(key: str, value: Any) -> str:
    if isinstance(value, Mapping):
        return to_query(value, key)
    if isinstance(value, (list, tuple)):
        prefix = f"{key}[]"
        if not value:
            return _pair(prefix, None)
        return "&".join(_to_query(prefix, item) for item in value)
    return _pair(key, value)


def to_query(params: Mapping[str, Any], namespace: str | None = None) -> str:
    """
    Serialize a parameter mapping into a query string.

    Args:
        params: Parameter mapping; values may be nested mappings or lists.
        namespace: Enclosing key for nested mappings, e.g. "user" gives
            ``user[name]=...``.

    Returns:
        Query string without the leading "?".

    Example:
        >>> to_query({"b": 1, "a": [2, 1]})
        'a%5B%5D=2&a%5B%5D=1&b=1'
        >>> to_query({"name": "Ann"}, "user")
        'user%5Bname%5D=Ann'
    """
    pairs = []
    for key, value in params.items():
        if isinstance(value, (Mapping, list, tuple)) and not value:
            continue
        full_key = f"{namespace}[{key}]" if namespace else str(key)
        pairs.append(_to_query(full_key, value))
    # arrays of mappings keep their item order
    if not namespace or "[]" not in namespace:
        pairs.sort()
    return "&".join(pairs)
