# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Exception classes for hosturl.

Module Structure
----------------
Two exception classes:

1. MissingHostError - URL generation without a host and without only_path
2. ConfigError - Invalid configuration values at startup

Design Decisions
----------------
- MissingHostError subclasses ValueError: it signals a programming or
  configuration error in the options passed to ``url_for``, never a
  transient condition. Callers should not retry.
- Header parsing and host classification never raise. Absent values
  degrade to fallbacks (forwarded host -> Host -> server address,
  missing port -> standard port).

Example:
    >>> from hosturl import url_for
    >>> url_for({})
    Traceback (most recent call last):
        ...
    hosturl.exceptions.MissingHostError: Missing host to link to! ...
"""

__all__ = ["MissingHostError", "ConfigError", "MISSING_HOST_MESSAGE"]

MISSING_HOST_MESSAGE = (
    "Missing host to link to! Please provide the :host parameter, "
    "set default_url_options[:host], or set :only_path to true"
)


class MissingHostError(ValueError):
    """
    Raised when a URL cannot be built because no host is known.

    Raised by ``url_for`` when ``host`` is blank and ``only_path`` is not
    set. Fix by passing ``host``, configuring a default host, or passing
    ``only_path=True``.
    """

    def __init__(self, message: str = MISSING_HOST_MESSAGE) -> None:
        super().__init__(message)


class ConfigError(Exception):
    """Configuration error."""
