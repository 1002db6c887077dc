"""Tests for kyuko.routing.segments: asymmetric slash handling."""

import pytest

from kyuko.routing.segments import is_wildcard, normalize_path, split_path_segments


class TestSplitPathSegments:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/", [""]),
            ("//", [""]),
            ("", [""]),
            ("/users", ["", "users"]),
            ("/users/:id", ["", "users", ":id"]),
            ("/users/:id/friends", ["", "users", ":id", "friends"]),
        ],
    )
    def test_basic_paths(self, path: str, expected: list[str]) -> None:
        assert split_path_segments(path) == expected

    def test_leading_slashes_collapse(self) -> None:
        assert split_path_segments("///users") == ["", "users"]
        assert split_path_segments("//////users/Alice") == ["", "users", "Alice"]

    def test_single_trailing_slash_dropped(self) -> None:
        assert split_path_segments("/users/") == ["", "users"]

    def test_only_one_trailing_slash_dropped(self) -> None:
        assert split_path_segments("/users//") == ["", "users", ""]
        assert split_path_segments("/users///") == ["", "users", "", ""]

    def test_mid_path_empty_segments_kept(self) -> None:
        assert split_path_segments("/users//friends") == ["", "users", "", "friends"]

    def test_route_and_url_paths_split_alike(self) -> None:
        assert split_path_segments("/users//:id") == ["", "users", "", ":id"]


class TestIsWildcard:
    def test_wildcard(self) -> None:
        assert is_wildcard(":id")
        assert is_wildcard(":")

    def test_literal(self) -> None:
        assert not is_wildcard("users")
        assert not is_wildcard("")
        assert not is_wildcard("a:b")


class TestNormalizePath:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/", "/"),
            ("//", "/"),
            ("/users", "/users"),
            ("/users/", "/users"),
            ("//about", "/about"),
            ("///users/:id/", "/users/:id"),
            ("/users//", "/users/"),
        ],
    )
    def test_normalize(self, path: str, expected: str) -> None:
        assert normalize_path(path) == expected
