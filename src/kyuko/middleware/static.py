"""Static file serving middleware.

Serves files from a directory for url paths under a prefix. Supports
root-level serving (``prefix="/"``, the default) with index file
resolution. Paths that don't resolve to a file are left for the route
handler.
"""

import mimetypes
from pathlib import Path
from urllib.parse import unquote

import anyio

from kyuko.http.request import Request
from kyuko.http.response import Response


class ServeStatic:
    """Middleware that serves static files from a directory.

    Security: resolves symlinks and verifies the final path is within the
    configured directory to prevent path traversal.

    Usage::

        # Static assets next to the app, served from the root
        app.use(ServeStatic(Path(__file__).parent / "public"))

        # Serve under a prefix
        app.use(ServeStatic("./static", prefix="/static"))
    """

    __slots__ = ("_cache_control", "_directory", "_index", "_prefix")

    def __init__(
        self,
        directory: str | Path,
        prefix: str = "/",
        *,
        index: str = "index.html",
        cache_control: str = "public, max-age=3600",
    ) -> None:
        self._directory = Path(directory).resolve()
        self._index = index
        self._cache_control = cache_control

        # Normalize prefix: ensure leading slash, strip trailing.
        # Root prefix "/" normalizes to "".
        stripped = "/" + prefix.strip("/")
        self._prefix = stripped if stripped != "/" else ""

    async def __call__(self, request: Request, response: Response) -> None:
        """Serve a static file, or leave the response untouched."""
        if response.was_sent() or request.method not in ("GET", "HEAD"):
            return

        path = unquote(request.path)
        if self._prefix:
            if not path.startswith(self._prefix + "/") and path != self._prefix:
                return
            relative = path[len(self._prefix) :].lstrip("/")
        else:
            relative = path.lstrip("/")

        try:
            file_path = (self._directory / relative).resolve() if relative else self._directory
        except ValueError:
            # Embedded NUL: not a file name, leave it to the routes
            return
        if not file_path.is_relative_to(self._directory):
            response.status(403).send("Forbidden")
            return

        if file_path.is_dir():
            file_path = file_path / self._index

        if not file_path.is_file():
            return

        await self._serve_file(file_path, response)

    async def _serve_file(self, file_path: Path, response: Response) -> None:
        """Read a file and send it."""
        content_type, _ = mimetypes.guess_type(file_path.name)
        if content_type is None:
            content_type = "application/octet-stream"

        body = await anyio.Path(file_path).read_bytes()

        response.headers.set("content-type", content_type)
        response.headers.set("cache-control", self._cache_control)
        response.status(200).send(body)


def serve_static(
    directory: str | Path,
    prefix: str = "/",
    *,
    index: str = "index.html",
    cache_control: str = "public, max-age=3600",
) -> ServeStatic:
    """Return a ``ServeStatic`` middleware for *directory*."""
    return ServeStatic(directory, prefix, index=index, cache_control=cache_control)
