"""Tests for kyuko.http.query: immutable QueryParams."""

import pytest

from kyuko.http.query import QueryParams


class TestQueryParams:
    def test_getitem(self) -> None:
        q = QueryParams(b"q=hello&page=2")
        assert q["q"] == "hello"
        assert q["page"] == "2"

    def test_missing_key_raises(self) -> None:
        q = QueryParams(b"q=hello")
        with pytest.raises(KeyError):
            q["missing"]

    def test_len_and_iter(self) -> None:
        q = QueryParams(b"a=1&b=2&a=3")
        assert len(q) == 2
        assert list(q) == ["a", "b"]

    def test_duplicates(self) -> None:
        q = QueryParams(b"q=Query&q=QueryString")
        assert q["q"] == "Query"
        assert q.get_list("q") == ["Query", "QueryString"]

    def test_blank_values_kept(self) -> None:
        q = QueryParams(b"flag=&name=x")
        assert q["flag"] == ""

    def test_decoding(self) -> None:
        q = QueryParams(b"name=hello+world&city=New%20York")
        assert q["name"] == "hello world"
        assert q["city"] == "New York"

    def test_get(self) -> None:
        q = QueryParams(b"a=1")
        assert q.get("a") == "1"
        assert q.get("b") is None
        assert q.get("b", "x") == "x"

    def test_items_list_in_order(self) -> None:
        q = QueryParams(b"b=2&a=1&b=3")
        assert q.items_list() == [("b", "2"), ("a", "1"), ("b", "3")]

    def test_empty(self) -> None:
        q = QueryParams()
        assert len(q) == 0
        assert str(q) == ""
        assert q.raw == b""


class TestQueryParamsStr:
    @pytest.mark.parametrize(
        "query_string",
        [b"q=Query", b"q=Query&qs=QueryString", b"q=Query&q=QueryString"],
    )
    def test_round_trip(self, query_string: bytes) -> None:
        assert str(QueryParams(query_string)) == query_string.decode()

    def test_reencodes_spaces(self) -> None:
        assert str(QueryParams(b"name=a%20b")) == "name=a+b"
