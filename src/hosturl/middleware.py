# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Host info middleware - attaches a RequestHostInfo to every request scope.

Creates a fresh RequestHostInfo for each HTTP and WebSocket connection and
stores it in ``scope["host_info"]``, so handlers can read the request's
host, port and subdomain or build URLs relative to it. Lifespan and other
scope types pass through untouched.

Config:
    tld_length (int): Default TLD label count. Default: taken from config.
    config (UrlConfig): Shared URL configuration. Default: UrlConfig().
    scope_key (str): Scope key for the host info. Default: "host_info".

Example:
    app = HostInfoMiddleware(app, tld_length=2)

    async def handler(scope, receive, send):
        info = scope["host_info"]
        if info.subdomain() == "admin":
            ...
"""

from __future__ import annotations

import logging

from .config import UrlConfig
from .request import RequestHostInfo
from .types import ASGIApp, Receive, Scope, Send

__all__ = ["HostInfoMiddleware"]

HANDLED_SCOPE_TYPES = ("http", "websocket")


class HostInfoMiddleware:
    """ASGI middleware creating one RequestHostInfo per connection.

    Attributes:
        app: Next ASGI application in the chain.
        tld_length: TLD label count handed to each RequestHostInfo.
        scope_key: Scope key the host info is stored under.
    """

    __slots__ = ("app", "tld_length", "scope_key", "logger")

    def __init__(
        self,
        app: ASGIApp,
        tld_length: int | None = None,
        config: UrlConfig | None = None,
        scope_key: str = "host_info",
    ) -> None:
        self.app = app
        if tld_length is None:
            tld_length = (config or UrlConfig()).tld_length
        self.tld_length = tld_length
        self.scope_key = scope_key
        self.logger = logging.getLogger("hosturl.middleware")

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in HANDLED_SCOPE_TYPES:
            await self.app(scope, receive, send)
            return

        info = RequestHostInfo.from_scope(scope, tld_length=self.tld_length)
        scope[self.scope_key] = info
        self.logger.debug("%s %s host=%s", scope["type"], scope.get("path", "/"), info.host)
        await self.app(scope, receive, send)
