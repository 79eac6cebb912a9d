# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""ASGI type definitions for hosturl.

Scope : MutableMapping[str, Any]
    Connection metadata. RequestHostInfo reads ``headers``, ``server``,
    ``scheme``, ``root_path``, ``path`` and ``query_string`` from it.

Message : MutableMapping[str, Any]
    Message exchanged through receive/send.

Receive : Callable[[], Awaitable[Message]]
Send : Callable[[Message], Awaitable[None]]
ASGIApp : Callable[[Scope, Receive, Send], Awaitable[None]]
"""

from typing import Any, Awaitable, Callable, MutableMapping

Scope = MutableMapping[str, Any]
Message = MutableMapping[str, Any]
Receive = Callable[[], Awaitable[Message]]
Send = Callable[[Message], Awaitable[None]]
ASGIApp = Callable[[Scope, Receive, Send], Awaitable[None]]

__all__ = ["ASGIApp", "Message", "Receive", "Scope", "Send"]
