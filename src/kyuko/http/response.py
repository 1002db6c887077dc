"""HTTP response built up by handlers and middleware, then sent once.

Handlers set ``status_code``, ``headers`` and ``body`` (directly or through
``status()``), then finish with exactly one of ``send()``, ``json()`` or
``redirect()``. The request pipeline translates the sent response into
ASGI messages.
"""

from __future__ import annotations

import json as json_module
from http import HTTPStatus
from typing import Any
from urllib.parse import quote

from kyuko.errors import ResponseAlreadySent
from kyuko.http.headers import MutableHeaders

# Characters encodeURI() leaves untouched, besides alphanumerics and "-_.~"
_URI_SAFE = ";,/?:@&=+$!*'()#"


def reason_phrase(status: int) -> str | None:
    """Standard reason phrase for *status*, or ``None`` if unknown."""
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return None


class Response:
    """The response to a single request.

    Usage::

        def handler(request, response):
            response.headers.append("x-powered-by", "kyuko")
            response.status(201).send("Created")

    ``send()`` may be called only once; a second send raises
    ``ResponseAlreadySent``. Use ``was_sent()`` to check first.
    """

    __slots__ = ("_sent", "body", "headers", "status_code", "status_text")

    def __init__(self) -> None:
        self.body: str | bytes | None = None
        self.status_code: int | None = None
        self.status_text: str | None = None
        self.headers = MutableHeaders()
        self._sent = False

    def __repr__(self) -> str:
        state = "sent" if self._sent else "pending"
        return f"<Response {self.status_code or 200} {state}>"

    # -- Building --

    def status(self, status: int) -> Response:
        """Set the status code (and its reason phrase), returning ``self``."""
        self.status_code = status
        phrase = reason_phrase(status)
        if phrase is not None:
            self.status_text = phrase
        return self

    # -- Sending --

    def send(self, body: str | bytes | None = None) -> None:
        """Finalize the response.

        *body*, when given, supersedes ``self.body``.
        """
        self._check_not_sent()
        if body is not None:
            self.body = body
        self._sent = True

    def json(self, obj: Any) -> None:
        """Send *obj* serialized as JSON."""
        self._check_not_sent()
        self.headers.append("content-type", "application/json; charset=UTF-8")
        self.send(json_module.dumps(obj))

    def redirect(self, address: str, status: int = 302) -> None:
        """Redirect to *address* (a relative url path or a full url)."""
        self._check_not_sent()
        self.status(status)
        self.headers.append("location", quote(address, safe=_URI_SAFE))
        self.send()

    def was_sent(self) -> bool:
        """Whether ``send()`` (or ``json()``/``redirect()``) was called."""
        return self._sent

    # -- Body helpers --

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes (empty when no body was set)."""
        if self.body is None:
            return b""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    def _check_not_sent(self) -> None:
        if self._sent:
            raise ResponseAlreadySent()
