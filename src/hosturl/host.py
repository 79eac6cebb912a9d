# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Host classification and domain/subdomain extraction.

Purpose
=======
Splits a host string into its registrable domain and its subdomain labels.
Splitting is purely label-count based: there is no public suffix list, the
caller configures ``tld_length`` to cover multi-label suffixes like
``co.uk``.

Extraction Schema::

    host = "dev.www.example.co.uk"

    tld_length=1:   dev . www . example . co . uk
                    ─────────────────────   ───────
                    subdomains              domain ("co.uk")

    tld_length=2:   dev . www . example . co . uk
                    ─────────   ─────────────────
                    subdomains  domain ("example.co.uk")

Definition::

    DEFAULT_TLD_LENGTH = 1
    IP_HOST_RE: re.Pattern[str]

    def is_named_host(host: str | None) -> bool
    def extract_domain(host: str | None, tld_length: int = 1) -> str | None
    def extract_subdomains(host: str | None, tld_length: int = 1) -> list[str]
    def extract_subdomain(host: str | None, tld_length: int = 1) -> str

Example::

    from hosturl.host import extract_domain, extract_subdomains

    extract_domain("www.example.co.uk", 2)       # "example.co.uk"
    extract_subdomains("dev.www.example.com")    # ["dev", "www"]
    extract_domain("192.168.1.1")                # None (IP literal)

Design Notes
============
- Only IPv4 dotted quads are recognized as IP literals; the pattern is
  anchored at the end of the string only
- All functions are total: absent results are ``None``, ``""`` or ``[]``
"""

from __future__ import annotations

import re

__all__ = [
    "DEFAULT_TLD_LENGTH",
    "IP_HOST_RE",
    "is_named_host",
    "extract_domain",
    "extract_subdomains",
    "extract_subdomain",
]

DEFAULT_TLD_LENGTH = 1

IP_HOST_RE = re.compile(r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}$")


def is_named_host(host: str | None) -> bool:
    """Return True if host is a DNS-style name, False for IP literals or no host."""
    if not host:
        return False
    return IP_HOST_RE.search(host) is None


def extract_domain(host: str | None, tld_length: int = DEFAULT_TLD_LENGTH) -> str | None:
    """
    Return the registrable domain of host.

    Args:
        host: Host name, e.g. "www.example.com".
        tld_length: Number of labels forming the top-level domain.

    Returns:
        The last ``tld_length + 1`` labels joined by ".", or None when
        host is not a named host. Shorter hosts are returned whole.
    """
    if host is None or not is_named_host(host):
        return None
    labels = host.split(".")
    return ".".join(labels[-(tld_length + 1):])


def extract_subdomains(host: str | None, tld_length: int = DEFAULT_TLD_LENGTH) -> list[str]:
    """
    Return the subdomain labels of host, outermost first.

    Args:
        host: Host name, e.g. "dev.www.example.com".
        tld_length: Number of labels forming the top-level domain.

    Returns:
        Every label before the domain, empty list if there are none or
        host is not a named host.
    """
    if host is None or not is_named_host(host):
        return []
    labels = host.split(".")
    end = len(labels) - tld_length - 1
    if end <= 0:
        return []
    return labels[:end]


def extract_subdomain(host: str | None, tld_length: int = DEFAULT_TLD_LENGTH) -> str:
    """Return the subdomains of host joined by ".", or "" if there are none."""
    return ".".join(extract_subdomains(host, tld_length))
