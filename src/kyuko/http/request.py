"""HTTP request.

Frozen metadata with async body access. ``params`` is the one mutable
part: the pipeline fills it from the route match and middleware such as
``decode_params`` may rewrite its values.
"""

from __future__ import annotations

import json as json_module
import uuid as uuid_module
from collections.abc import AsyncGenerator
from dataclasses import dataclass, field
from typing import Any

from kyuko._internal.asgi import Receive, Scope
from kyuko.http.headers import Headers
from kyuko.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class Request:
    """An HTTP request.

    Metadata (method, path, headers, etc.) is frozen at creation.
    Body is accessed asynchronously via ``.body()``, ``.text()``, ``.json()``.

    ``path`` is the raw, percent-encoded url path without the query string.
    """

    method: str
    path: str
    headers: Headers
    query: QueryParams
    params: dict[str, str]
    uuid: str
    http_version: str
    server: tuple[str, int] | None
    client: tuple[str, int] | None

    # Private: ASGI receive callable for body streaming
    _receive: Receive

    # Private: mutable cache for the body
    # (dict contents are mutable even though the field reference is frozen)
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    # -- Computed properties --

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    @property
    def content_length(self) -> int | None:
        """The Content-Length header as int."""
        value = self.headers.get("content-length")
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            return None

    @property
    def url(self) -> str:
        """Request url path plus query string."""
        qs = self.query.raw
        if qs:
            return f"{self.path}?{qs.decode('latin-1')}"
        return self.path

    # -- Async body access --

    async def body(self) -> bytes:
        """Read the full request body.

        Result is cached. The ASGI receive is consumed once, then
        the same bytes are returned on subsequent calls.
        """
        if "_body" in self._cache:
            return self._cache["_body"]
        chunks = [chunk async for chunk in self.stream()]
        result = b"".join(chunks)
        self._cache["_body"] = result
        return result

    async def stream(self) -> AsyncGenerator[bytes]:
        """Stream the request body in chunks."""
        while True:
            message = await self._receive()
            body = message.get("body", b"")
            if body:
                yield body
            if not message.get("more_body", False):
                break

    async def json(self) -> Any:
        """Parse the body as JSON."""
        raw = await self.body()
        return json_module.loads(raw)

    async def text(self) -> str:
        """Read the body as text (UTF-8)."""
        raw = await self.body()
        return raw.decode("utf-8")

    # -- Factory --

    @classmethod
    def from_asgi(
        cls,
        scope: Scope,
        receive: Receive,
        params: dict[str, str] | None = None,
    ) -> Request:
        """Create a Request from an ASGI scope and receive callable.

        Prefers ``raw_path`` over the server-decoded ``path`` so that path
        parameters reach handlers undecoded.
        """
        raw_path: bytes = scope.get("raw_path") or b""
        if raw_path:
            path = raw_path.decode("latin-1").partition("?")[0]
        else:
            path = scope["path"]

        server = scope.get("server")
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=path,
            headers=Headers(tuple(scope.get("headers", ()))),
            query=QueryParams(scope.get("query_string", b"")),
            params=dict(params or {}),
            uuid=str(uuid_module.uuid4()),
            http_version=scope.get("http_version", "1.1"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
            _receive=receive,
        )
