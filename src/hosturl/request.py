# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Per-request host, port and protocol information.

RequestHostInfo answers "which host/port/scheme did the client ask for"
for one request, reading the request's headers:

    X-Forwarded-Host  (last entry of a proxy chain)
          ↓ absent
    Host
          ↓ absent
    server name/address : server port

``protocol`` and ``port`` are computed on first access and cached for the
lifetime of the instance. Create one instance per request; never share it
across requests.

Example:
    info = RequestHostInfo.from_scope(scope)
    info.host            # "www.example.com"
    info.port            # 8080
    info.subdomain()     # "www"
    info.url             # "https://www.example.com:8080/path?q=1"
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from .datastructures import Address, Headers, headers_from_scope, server_from_scope
from .host import DEFAULT_TLD_LENGTH, extract_domain, extract_subdomain, extract_subdomains
from .types import Scope
from .urls import url_for

__all__ = ["RequestHostInfo"]

FORWARDED_SPLIT_RE = re.compile(r",\s?")
PORT_SUFFIX_RE = re.compile(r":(\d+)$")

SECURE_SCHEMES = ("https", "wss")

logger = logging.getLogger("hosturl.request")


class RequestHostInfo:
    """
    Host-related values derived from one request.

    Attributes:
        headers: Case-insensitive request headers.
        server: Server address from the transport, used as last fallback.
        ssl: True if the request arrived over TLS.
        fullpath: Request path including query string.
        tld_length: Default TLD label count for domain/subdomain accessors.
    """

    __slots__ = ("headers", "server", "ssl", "fullpath", "tld_length", "_protocol", "_port")

    def __init__(
        self,
        headers: Headers,
        server: Address | None = None,
        ssl: bool = False,
        fullpath: str = "/",
        tld_length: int = DEFAULT_TLD_LENGTH,
    ) -> None:
        self.headers = headers
        self.server = server
        self.ssl = ssl
        self.fullpath = fullpath
        self.tld_length = tld_length
        self._protocol: str | None = None
        self._port: int | None = None

    @classmethod
    def from_scope(cls, scope: Scope, tld_length: int = DEFAULT_TLD_LENGTH) -> RequestHostInfo:
        """
        Create host info from an ASGI HTTP or WebSocket scope.

        Args:
            scope: ASGI scope with headers, server, scheme, root_path, path
                and query_string.
            tld_length: Default TLD label count.
        """
        fullpath = str(scope.get("root_path", "")) + str(scope.get("path", "/"))
        query_string = scope.get("query_string", b"")
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        if query_string:
            fullpath += f"?{query_string}"
        return cls(
            headers=headers_from_scope(scope),
            server=server_from_scope(scope),
            ssl=str(scope.get("scheme", "http")).lower() in SECURE_SCHEMES,
            fullpath=fullpath,
            tld_length=tld_length,
        )

    def reset(self) -> None:
        """Drop the cached protocol and port."""
        self._protocol = None
        self._port = None

    @property
    def raw_host_with_port(self) -> str:
        """Host as sent by the client, port included. Not cached."""
        forwarded = self.headers.get_combined("x-forwarded-host")
        if forwarded is not None:
            host = FORWARDED_SPLIT_RE.split(forwarded)[-1]
            logger.debug("Host from X-Forwarded-Host %r: %s", forwarded, host)
            return host
        host = self.headers.get("host")
        if host is not None:
            return host
        if self.server is None:
            return ":"
        return self.server.host_with_port

    @property
    def host(self) -> str:
        """Host without port, such as "example.com"."""
        return PORT_SUFFIX_RE.sub("", self.raw_host_with_port)

    @property
    def host_with_port(self) -> str:
        """``host:port`` string, port omitted when standard."""
        return f"{self.host}{self.port_string}"

    @property
    def protocol(self) -> str:
        """'https://' for TLS requests, 'http://' otherwise. Cached."""
        if self._protocol is None:
            self._protocol = "https://" if self.ssl else "http://"
        return self._protocol

    @property
    def port(self) -> int:
        """Port from the host header, or the protocol's standard port. Cached."""
        if self._port is None:
            match = PORT_SUFFIX_RE.search(self.raw_host_with_port)
            self._port = int(match.group(1)) if match else self.standard_port
        return self._port

    @property
    def standard_port(self) -> int:
        """443 for https, 80 otherwise."""
        return 443 if self.protocol == "https://" else 80

    @property
    def is_standard_port(self) -> bool:
        return self.port == self.standard_port

    @property
    def optional_port(self) -> int | None:
        """Port, or None when it is the standard port."""
        return None if self.is_standard_port else self.port

    @property
    def port_string(self) -> str:
        """":8080" style suffix, "" when the port is standard."""
        return "" if self.is_standard_port else f":{self.port}"

    @property
    def server_port(self) -> int:
        """Port the server is listening on, 0 if unknown."""
        if self.server is None or self.server.port is None:
            return 0
        return int(self.server.port)

    @property
    def url(self) -> str:
        """Complete URL of this request."""
        return self.protocol + self.host + self.port_string + self.fullpath

    def domain(self, tld_length: int | None = None) -> str | None:
        """
        Return the domain of the request host.

        "example.com" for "www.example.com"; pass ``tld_length=2`` to get
        "example.co.uk" for "www.example.co.uk".
        """
        return extract_domain(self.host, self.tld_length if tld_length is None else tld_length)

    def subdomains(self, tld_length: int | None = None) -> list[str]:
        """Return the subdomains as a list, ["dev", "www"] for "dev.www.example.com"."""
        return extract_subdomains(self.host, self.tld_length if tld_length is None else tld_length)

    def subdomain(self, tld_length: int | None = None) -> str:
        """Return the subdomains as a string, "dev.www" for "dev.www.example.com"."""
        return extract_subdomain(self.host, self.tld_length if tld_length is None else tld_length)

    def url_for(self, options: Mapping[str, Any] | None = None, **overrides: Any) -> str:
        """
        Build a URL defaulting host, protocol and port to this request.

        Example:
            >>> info.url_for(path="/login", subdomain="auth")
            'https://auth.example.com:8443/login'
        """
        defaults: dict[str, Any] = {
            "host": self.host,
            "protocol": self.protocol,
            "port": self.optional_port,
            "tld_length": self.tld_length,
        }
        return url_for({**defaults, **(options or {}), **overrides}, self.tld_length)

    def __repr__(self) -> str:
        return f"<RequestHostInfo host={self.host!r} ssl={self.ssl}>"
