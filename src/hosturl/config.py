# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
URL generation configuration.

Holds the process-wide settings read once at startup:

- ``tld_length``: number of labels forming the top-level domain (default 1,
  use 2 for hosts under suffixes like ``co.uk``)
- ``host``, ``protocol``, ``port``: default URL options merged under every
  ``UrlBuilder.url_for`` call

Config precedence (later overrides earlier):

1. Built-in DEFAULTS
2. Environment variables: HOSTURL_* (e.g., HOSTURL_TLD_LENGTH)
3. Command line arguments
4. Explicit constructor parameters

Example::

    config = UrlConfig(tld_length=2, host="www.example.co.uk")
    config.tld_length            # 2
    config.default_url_options   # {"host": "www.example.co.uk"}
"""

from __future__ import annotations

import logging
from typing import Any

from genro_toolbox import SmartOptions  # type: ignore[import-untyped]

from .exceptions import ConfigError
from .host import DEFAULT_TLD_LENGTH

__all__ = ["UrlConfig", "DEFAULTS"]

DEFAULTS = {"tld_length": DEFAULT_TLD_LENGTH}

URL_OPTION_KEYS = ("host", "protocol", "port")

logger = logging.getLogger("hosturl.config")


def _url_opts_spec(
    tld_length: int = DEFAULT_TLD_LENGTH,
    host: str = "",
    protocol: str = "",
    port: int = 0,
) -> None:
    """Reference function for SmartOptions type extraction."""


class UrlConfig:
    """Resolved URL generation settings. Build once, then share read-only."""

    __slots__ = ("_opts", "_tld_length")

    def __init__(
        self,
        tld_length: int | None = None,
        host: str | None = None,
        protocol: str | None = None,
        port: int | None = None,
        argv: list[str] | None = None,
    ) -> None:
        env_argv_opts = SmartOptions(_url_opts_spec, env="HOSTURL", argv=argv or [])
        caller_opts = SmartOptions(
            dict(tld_length=tld_length, host=host, protocol=protocol, port=port),
            ignore_none=True,
        )
        self._opts = SmartOptions(DEFAULTS) + env_argv_opts + caller_opts
        self._tld_length = self._validate_tld_length(self._opts["tld_length"])
        logger.debug(
            "URL config resolved: tld_length=%s defaults=%s",
            self._tld_length,
            self.default_url_options,
        )

    @staticmethod
    def _validate_tld_length(value: Any) -> int:
        if value is None:
            return DEFAULT_TLD_LENGTH
        if isinstance(value, bool):
            raise ConfigError(f"Invalid tld_length {value!r}: expected an integer >= 1")
        try:
            tld_length = int(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid tld_length {value!r}: expected an integer >= 1") from e
        if tld_length < 1:
            raise ConfigError(f"Invalid tld_length {value!r}: expected an integer >= 1")
        return tld_length

    @property
    def tld_length(self) -> int:
        """Default number of top-level domain labels."""
        return self._tld_length

    @property
    def default_url_options(self) -> dict[str, Any]:
        """Configured host/protocol/port, unset entries omitted."""
        result: dict[str, Any] = {}
        for key in URL_OPTION_KEYS:
            value = self._opts[key]
            if value is None or value == "" or (key == "port" and not value):
                continue
            result[key] = value
        return result

    def __repr__(self) -> str:
        return f"UrlConfig(tld_length={self._tld_length}, defaults={self.default_url_options!r})"
