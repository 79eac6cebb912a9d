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

"""hosturl - request host model and URL generation for ASGI applications.

Main components:
    RequestHostInfo: Host, port, protocol and subdomains of one request
    UrlBuilder: URL generation bound to a UrlConfig
    url_for: URL generation from an options mapping
    HostInfoMiddleware: Attaches a RequestHostInfo to each request scope

Host helpers:
    is_named_host, extract_domain, extract_subdomains, extract_subdomain

Usage:
    from hosturl import RequestHostInfo, url_for

    info = RequestHostInfo.from_scope(scope)
    info.subdomain()  # "www"
    url_for({"host": info.host, "subdomain": "api", "path": "/v1"})
"""

__version__ = "0.1.0"

from .config import UrlConfig
from .datastructures import Address, Headers, headers_from_scope
from .exceptions import ConfigError, MissingHostError
from .host import (
    DEFAULT_TLD_LENGTH,
    extract_domain,
    extract_subdomain,
    extract_subdomains,
    is_named_host,
)
from .middleware import HostInfoMiddleware
from .request import RequestHostInfo
from .urls import UrlBuilder, build_host_url, extract_protocol, url_for

__all__ = [
    # Host classification
    "DEFAULT_TLD_LENGTH",
    "extract_domain",
    "extract_subdomain",
    "extract_subdomains",
    "is_named_host",
    # URL generation
    "UrlBuilder",
    "build_host_url",
    "extract_protocol",
    "url_for",
    # Request
    "RequestHostInfo",
    "HostInfoMiddleware",
    # Configuration
    "UrlConfig",
    # Data structures
    "Address",
    "Headers",
    "headers_from_scope",
    # Exceptions
    "ConfigError",
    "MissingHostError",
]
