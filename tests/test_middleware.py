# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tests for HostInfoMiddleware."""

import pytest

from hosturl.config import UrlConfig
from hosturl.middleware import HostInfoMiddleware
from hosturl.request import RequestHostInfo


class TestHostInfoMiddleware:
    """Tests for HostInfoMiddleware."""

    @pytest.fixture
    def captured(self) -> list:
        """Fixture collecting scopes passed to the app."""
        return []

    @pytest.fixture
    def dummy_app(self, captured: list):
        """Dummy ASGI app that captures scope."""

        async def app(scope, receive, send):
            captured.append(scope)

        return app

    @pytest.mark.asyncio
    async def test_http_scope(self, dummy_app, captured) -> None:
        """Middleware attaches host info to HTTP requests."""
        middleware = HostInfoMiddleware(dummy_app, tld_length=1)
        scope = {
            "type": "http",
            "path": "/",
            "headers": [(b"host", b"www.example.com:8080")],
        }
        await middleware(scope, None, None)

        info = captured[0]["host_info"]
        assert isinstance(info, RequestHostInfo)
        assert info.host == "www.example.com"
        assert info.port == 8080
        assert info.subdomain() == "www"

    @pytest.mark.asyncio
    async def test_websocket_scope(self, dummy_app, captured) -> None:
        """WebSocket connections get host info too."""
        middleware = HostInfoMiddleware(dummy_app, tld_length=1)
        scope = {"type": "websocket", "scheme": "wss", "headers": [(b"host", b"example.com")]}
        await middleware(scope, None, None)

        info = captured[0]["host_info"]
        assert info.protocol == "https://"
        assert info.port == 443

    @pytest.mark.asyncio
    async def test_lifespan_passthrough(self, dummy_app, captured) -> None:
        """Non-HTTP scopes pass through unchanged."""
        middleware = HostInfoMiddleware(dummy_app, tld_length=1)
        await middleware({"type": "lifespan"}, None, None)

        assert "host_info" not in captured[0]

    @pytest.mark.asyncio
    async def test_fresh_instance_per_request(self, dummy_app, captured) -> None:
        """Each request gets its own host info."""
        middleware = HostInfoMiddleware(dummy_app, tld_length=1)
        await middleware({"type": "http", "headers": [(b"host", b"a.com:1000")]}, None, None)
        await middleware({"type": "http", "headers": [(b"host", b"b.com")]}, None, None)

        first, second = captured[0]["host_info"], captured[1]["host_info"]
        assert first is not second
        assert first.port == 1000
        assert second.port == 80

    @pytest.mark.asyncio
    async def test_tld_length_from_config(self, dummy_app, captured) -> None:
        middleware = HostInfoMiddleware(dummy_app, config=UrlConfig(tld_length=2))
        scope = {"type": "http", "headers": [(b"host", b"www.example.co.uk")]}
        await middleware(scope, None, None)

        assert middleware.tld_length == 2
        assert captured[0]["host_info"].domain() == "example.co.uk"

    @pytest.mark.asyncio
    async def test_scope_key(self, dummy_app, captured) -> None:
        middleware = HostInfoMiddleware(dummy_app, tld_length=1, scope_key="hostinfo")
        await middleware({"type": "http", "headers": []}, None, None)

        assert "hostinfo" in captured[0]
        assert "host_info" not in captured[0]
