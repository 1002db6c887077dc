"""Tests for kyuko.context: request-scoped ContextVar and g namespace."""

import pytest

from kyuko.app import App
from kyuko.context import g, get_request, request_var
from kyuko.http.request import Request
from kyuko.testing import TestClient


class TestRequestVar:
    def test_get_request_raises_outside_context(self) -> None:
        """get_request raises LookupError when no request is active."""
        with pytest.raises(LookupError):
            get_request()

    def test_set_and_get_request(self) -> None:
        scope = {
            "type": "http",
            "method": "GET",
            "path": "/test",
            "headers": [],
            "query_string": b"",
            "http_version": "1.1",
        }

        async def receive():
            return {"type": "http.request", "body": b"", "more_body": False}

        request = Request.from_asgi(scope, receive)
        token = request_var.set(request)
        try:
            assert get_request() is request
            assert get_request().path == "/test"
        finally:
            request_var.reset(token)


class TestRequestGlobals:
    def test_set_and_get_attribute(self) -> None:
        g.user = "alice"
        try:
            assert g.user == "alice"
            assert "user" in g
        finally:
            g._reset()

    def test_missing_attribute_names_the_value(self) -> None:
        with pytest.raises(AttributeError, match="no middleware set g.missing"):
            _ = g.missing

    def test_get_with_default(self) -> None:
        assert g.get("missing", 42) == 42
        g.present = "yes"
        try:
            assert g.get("present", "no") == "yes"
        finally:
            g._reset()

    def test_reset_drops_values(self) -> None:
        g.a = 1
        g._reset()
        assert "a" not in g
        assert g.get("a") is None


class TestContextInRequestPipeline:
    async def test_request_var_available_in_handler(self) -> None:
        app = App()

        @app.get("/ctx")
        def handler(request, response):
            assert get_request() is request
            response.send(f"path={get_request().path}")

        async with TestClient(app) as client:
            response = await client.get("/ctx")
            assert response.text == "path=/ctx"

    async def test_g_shared_by_middleware_and_handler(self) -> None:
        app = App()

        def set_user(request, response):
            g.user = "alice"

        app.use(set_user)

        @app.get("/whoami")
        def whoami(request, response):
            response.send(f"user={g.user}")

        async with TestClient(app) as client:
            response = await client.get("/whoami")
            assert response.text == "user=alice"

    async def test_g_is_isolated_per_request(self) -> None:
        app = App()

        @app.get("/count")
        def count(request, response):
            g.hits = g.get("hits", 0) + 1
            response.send(str(g.hits))

        async with TestClient(app) as client:
            assert (await client.get("/count")).text == "1"
            assert (await client.get("/count")).text == "1"

    async def test_request_var_reset_after_request(self) -> None:
        app = App()
        app.get("/", lambda request, response: response.send())

        async with TestClient(app) as client:
            await client.get("/")

        with pytest.raises(LookupError):
            get_request()
