"""Tests for static file serving middleware."""

import pytest

from kyuko.app import App
from kyuko.middleware.static import ServeStatic, serve_static
from kyuko.testing import TestClient


@pytest.fixture
def static_dir(tmp_path):
    """Create temporary static files for testing."""
    static = tmp_path / "static"
    static.mkdir()

    (static / "style.css").write_text("body { color: red; }")
    (static / "app.js").write_text("console.log('hello');")
    (static / "data.kyukotest").write_bytes(b"\x00\x01\x02\x03")
    (static / "index.html").write_text("<h1>Home</h1>")
    (static / "hello world.txt").write_text("spaced")

    docs = static / "docs"
    docs.mkdir()
    (docs / "index.html").write_text("<h1>Docs</h1>")

    (tmp_path / "secret.txt").write_text("top secret")
    return static


def _app(*middleware) -> App:
    app = App()
    for mw in middleware:
        app.use(mw)

    @app.get("/api/status")
    def status(request, response):
        response.send("ok")

    return app


# ------------------------------------------------------------------
# Root-level serving
# ------------------------------------------------------------------


class TestServeStaticRoot:
    async def test_serves_file(self, static_dir) -> None:
        async with TestClient(_app(ServeStatic(static_dir))) as client:
            response = await client.get("/style.css")
            assert response.status == 200
            assert response.text == "body { color: red; }"
            assert response.content_type == "text/css"
            assert response.headers["cache-control"] == "public, max-age=3600"

    async def test_javascript_type(self, static_dir) -> None:
        async with TestClient(_app(ServeStatic(static_dir))) as client:
            response = await client.get("/app.js")
            assert "javascript" in response.content_type

    async def test_unknown_type_falls_back(self, static_dir) -> None:
        async with TestClient(_app(ServeStatic(static_dir))) as client:
            response = await client.get("/data.kyukotest")
            assert response.content_type == "application/octet-stream"
            assert response.body == b"\x00\x01\x02\x03"

    async def test_root_index(self, static_dir) -> None:
        async with TestClient(_app(ServeStatic(static_dir))) as client:
            response = await client.get("/")
            assert response.status == 200
            assert response.text == "<h1>Home</h1>"

    async def test_directory_index(self, static_dir) -> None:
        async with TestClient(_app(ServeStatic(static_dir))) as client:
            response = await client.get("/docs/")
            assert response.text == "<h1>Docs</h1>"

    async def test_percent_encoded_name(self, static_dir) -> None:
        async with TestClient(_app(ServeStatic(static_dir))) as client:
            response = await client.get("/hello%20world.txt")
            assert response.text == "spaced"

    async def test_missing_file_falls_through_to_route(self, static_dir) -> None:
        async with TestClient(_app(ServeStatic(static_dir))) as client:
            response = await client.get("/api/status")
            assert response.status == 200
            assert response.text == "ok"

    async def test_nul_byte_falls_through_to_route(self, static_dir) -> None:
        app = _app(ServeStatic(static_dir))
        app.get("/:name", lambda request, response: response.send(request.params["name"]))

        async with TestClient(app) as client:
            response = await client.get("/a%00b")
            assert response.status == 200
            assert response.text == "a%00b"

    async def test_missing_file_without_route_is_404(self, static_dir) -> None:
        async with TestClient(_app(ServeStatic(static_dir))) as client:
            response = await client.get("/nope.css")
            assert response.status == 404

    async def test_head_request(self, static_dir) -> None:
        async with TestClient(_app(ServeStatic(static_dir))) as client:
            response = await client.head("/style.css")
            assert response.status == 200

    async def test_post_ignored(self, static_dir) -> None:
        async with TestClient(_app(ServeStatic(static_dir))) as client:
            response = await client.post("/style.css")
            assert response.status == 404


class TestServeStaticSecurity:
    async def test_traversal_forbidden(self, static_dir) -> None:
        async with TestClient(_app(ServeStatic(static_dir))) as client:
            response = await client.get("/../secret.txt")
            assert response.status == 403
            assert response.text == "Forbidden"

    async def test_encoded_traversal_forbidden(self, static_dir) -> None:
        async with TestClient(_app(ServeStatic(static_dir))) as client:
            response = await client.get("/%2e%2e/secret.txt")
            assert response.status == 403


# ------------------------------------------------------------------
# Prefix-based serving
# ------------------------------------------------------------------


class TestServeStaticPrefix:
    async def test_serves_under_prefix(self, static_dir) -> None:
        async with TestClient(_app(ServeStatic(static_dir, prefix="/static"))) as client:
            response = await client.get("/static/style.css")
            assert response.status == 200
            assert response.text == "body { color: red; }"

    async def test_prefix_trailing_slash_normalized(self, static_dir) -> None:
        async with TestClient(_app(ServeStatic(static_dir, prefix="/static/"))) as client:
            response = await client.get("/static/style.css")
            assert response.status == 200

    async def test_outside_prefix_ignored(self, static_dir) -> None:
        async with TestClient(_app(ServeStatic(static_dir, prefix="/static"))) as client:
            response = await client.get("/style.css")
            assert response.status == 404

    async def test_similar_prefix_ignored(self, static_dir) -> None:
        async with TestClient(_app(ServeStatic(static_dir, prefix="/static"))) as client:
            response = await client.get("/staticky/style.css")
            assert response.status == 404

    async def test_prefix_itself_serves_index(self, static_dir) -> None:
        async with TestClient(_app(ServeStatic(static_dir, prefix="/static"))) as client:
            response = await client.get("/static")
            assert response.text == "<h1>Home</h1>"


class TestServeStaticOptions:
    async def test_custom_cache_control(self, static_dir) -> None:
        mw = serve_static(static_dir, cache_control="no-cache")
        async with TestClient(_app(mw)) as client:
            response = await client.get("/style.css")
            assert response.headers["cache-control"] == "no-cache"

    async def test_custom_index(self, static_dir) -> None:
        (static_dir / "home.html").write_text("<h1>Custom</h1>")
        async with TestClient(_app(ServeStatic(static_dir, index="home.html"))) as client:
            response = await client.get("/")
            assert response.text == "<h1>Custom</h1>"

    async def test_already_sent_response_untouched(self, static_dir) -> None:
        def maintenance(request, response):
            response.status(503).send("maintenance")

        async with TestClient(_app(maintenance, ServeStatic(static_dir))) as client:
            response = await client.get("/style.css")
            assert response.status == 503
            assert response.text == "maintenance"
