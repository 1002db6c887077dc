"""JSON request body middleware.

Parses ``application/json`` request bodies and stores the result on the
request-scoped namespace::

    from kyuko.middleware.json_body import get_request_body, json_body

    app.use(json_body())

    @app.post("/")
    def echo(request, response):
        response.json(get_request_body())

The raw body stays readable via ``await request.body()`` (it is cached).
Malformed JSON raises, so the request goes to the error handlers.
"""

from typing import Any

from kyuko.context import g
from kyuko.http.request import Request
from kyuko.http.response import Response
from kyuko.middleware.protocol import Middleware


def get_request_body(default: Any = None) -> Any:
    """Return the JSON body parsed by ``json_body()``, or *default*."""
    return g.get("request_body", default)


def json_body() -> Middleware:
    """Return a middleware that parses JSON request bodies into ``g.request_body``."""

    async def json_body(request: Request, response: Response) -> None:
        content_type = request.content_type
        if content_type is not None and "application/json" in content_type:
            g.request_body = await request.json()

    return json_body
