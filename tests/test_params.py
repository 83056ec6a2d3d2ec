"""Unit tests for QueryParams and HttpRequest."""

from __future__ import annotations

from restql.compile.base import HttpRequest, QueryParams


class TestQueryParams:
    def test_append_keeps_duplicates(self):
        params = QueryParams()
        params.append("id", "gt.1")
        params.append("id", "lt.9")
        assert params.get_all("id") == ["gt.1", "lt.9"]
        assert params.get("id") == "gt.1"

    def test_set_replaces_in_place(self):
        params = QueryParams([("a", "1"), ("b", "2"), ("a", "3")])
        params.set("a", "x")
        assert list(params) == [("a", "x"), ("b", "2")]

    def test_set_appends_new_key(self):
        params = QueryParams([("a", "1")])
        params.set("b", "2")
        assert list(params) == [("a", "1"), ("b", "2")]

    def test_delete(self):
        params = QueryParams([("a", "1"), ("b", "2"), ("a", "3")])
        params.delete("a")
        assert list(params) == [("b", "2")]

    def test_extend_appends_in_order(self):
        params = QueryParams([("a", "1")])
        params.extend([("b", "2"), ("a", "3")])
        assert list(params) == [("a", "1"), ("b", "2"), ("a", "3")]

    def test_missing_key(self):
        params = QueryParams()
        assert params.get("a") is None
        assert params.get_all("a") == []
        assert "a" not in params
        assert len(params) == 0

    def test_equality(self):
        assert QueryParams([("a", "1")]) == QueryParams([("a", "1")])
        assert QueryParams([("a", "1")]) != QueryParams([("a", "2")])


class TestHttpRequest:
    def test_defaults(self):
        request = HttpRequest(path="/books")
        assert request.method == "GET"
        assert request.full_path == "/books"

    def test_full_path_is_recomputed(self):
        request = HttpRequest(path="/books")
        request.params.set("limit", "1")
        assert request.full_path == "/books?limit=1"
        request.params.set("limit", "2")
        assert request.full_path == "/books?limit=2"
        request.params.delete("limit")
        assert request.full_path == "/books"

    def test_encoded_path_with_custom_whitelist(self):
        request = HttpRequest(path="/books", params=QueryParams([("or", "(a,b)")]))
        assert request.encoded_path(()) == "/books?or=%28a%2Cb%29"
