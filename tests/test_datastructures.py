# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tests for data structures.

These tests verify the classes and helpers defined in hosturl.datastructures.
Tests cover:
- Address: server address wrapper
- Headers: case-insensitive HTTP headers
- Query primitives: to_param, to_query, escape, escape_fragment
- Helper functions: headers_from_scope, server_from_scope
"""

from hosturl.datastructures import (
    Address,
    Headers,
    escape,
    escape_fragment,
    headers_from_scope,
    server_from_scope,
    to_param,
    to_query,
)


class TestAddress:
    """Test Address class."""

    def test_create(self) -> None:
        addr = Address("127.0.0.1", 8000)
        assert addr.host == "127.0.0.1"
        assert addr.port == 8000

    def test_host_with_port(self) -> None:
        assert Address("example.com", 8080).host_with_port == "example.com:8080"
        assert Address(None, None).host_with_port == ":"

    def test_equality(self) -> None:
        addr = Address("localhost", 80)
        assert addr == Address("localhost", 80)
        assert addr == ("localhost", 80)
        assert addr != ("localhost", 8080)
        assert addr != "localhost:80"

    def test_server_from_scope(self) -> None:
        assert server_from_scope({"server": ("example.com", 443)}) == ("example.com", 443)
        assert server_from_scope({"server": None}) is None
        assert server_from_scope({}) is None


class TestHeaders:
    """Test Headers class."""

    def test_case_insensitive_get(self) -> None:
        headers = Headers([(b"Host", b"example.com")])
        assert headers.get("host") == "example.com"
        assert headers.get("HOST") == "example.com"
        assert headers.get("missing") is None
        assert headers.get("missing", "default") == "default"

    def test_str_pairs(self) -> None:
        headers = Headers([("X-Forwarded-Host", "a.com")])
        assert headers.get("x-forwarded-host") == "a.com"

    def test_getlist(self) -> None:
        headers = Headers([(b"x-forwarded-host", b"a.com"), (b"X-Forwarded-Host", b"b.com")])
        assert headers.getlist("X-FORWARDED-HOST") == ["a.com", "b.com"]
        assert headers.getlist("host") == []

    def test_get_combined(self) -> None:
        headers = Headers([(b"x-forwarded-host", b"a.com"), (b"x-forwarded-host", b"b.com")])
        assert headers.get_combined("x-forwarded-host") == "a.com, b.com"
        assert headers.get_combined("host") is None

    def test_contains_and_len(self) -> None:
        headers = Headers([(b"host", b"example.com")])
        assert "Host" in headers
        assert "other" not in headers
        assert 1 not in headers
        assert len(headers) == 1

    def test_latin1_decoding(self) -> None:
        headers = Headers([(b"host", "café.com".encode("latin-1"))])
        assert headers.get("host") == "café.com"

    def test_headers_from_scope(self) -> None:
        scope = {"headers": [(b"host", b"example.com")]}
        assert headers_from_scope(scope).get("host") == "example.com"
        assert len(headers_from_scope({})) == 0


class TestToParam:
    """Test to_param()."""

    def test_values(self) -> None:
        assert to_param(None) is None
        assert to_param(True) == "true"
        assert to_param(False) == "false"
        assert to_param(42) == "42"
        assert to_param("") == ""
        assert to_param(["a", 1, True]) == "a/1/true"


class TestToQuery:
    """Test to_query()."""

    def test_sorted(self) -> None:
        assert to_query({"b": 2, "a": 1}) == "a=1&b=2"

    def test_escaping(self) -> None:
        assert to_query({"q": "a b&c"}) == "q=a+b%26c"

    def test_list_keeps_order(self) -> None:
        assert to_query({"b": 1, "a": [2, 1]}) == "a%5B%5D=2&a%5B%5D=1&b=1"

    def test_nested_mapping(self) -> None:
        assert to_query({"user": {"name": "Ann", "age": 30}}) == "user%5Bage%5D=30&user%5Bname%5D=Ann"

    def test_list_of_mappings_keeps_key_order(self) -> None:
        assert to_query({"items": [{"b": 1, "a": 2}]}) == "items%5B%5D%5Bb%5D=1&items%5B%5D%5Ba%5D=2"

    def test_namespace(self) -> None:
        assert to_query({"name": "Ann"}, "user") == "user%5Bname%5D=Ann"

    def test_none_and_booleans(self) -> None:
        assert to_query({"x": None, "flag": True}) == "flag=true&x="

    def test_empty_collections_skipped(self) -> None:
        assert to_query({"e": [], "m": {}}) == ""
        assert to_query({}) == ""


class TestEscape:
    """Test escape() and escape_fragment()."""

    def test_escape(self) -> None:
        assert escape("p@ss word") == "p%40ss+word"
        assert escape(12) == "12"

    def test_escape_fragment(self) -> None:
        assert escape_fragment("sec 1") == "sec%201"
        assert escape_fragment("a/b?c:d@e") == "a/b?c:d@e"
        assert escape_fragment("a#b") == "a%23b"
