"""Percent-decode path parameters.

Path parameters reach handlers raw (``/users/Alice%20Smith`` binds
``"Alice%20Smith"``). Add this middleware to decode them in place::

    app.use(decode_params())
"""

from urllib.parse import unquote

from kyuko.http.request import Request
from kyuko.http.response import Response
from kyuko.middleware.protocol import Middleware


def decode_params() -> Middleware:
    """Return a middleware that decodes the values of ``request.params``."""

    def decode_params(request: Request, response: Response) -> None:
        for name, encoded in request.params.items():
            request.params[name] = unquote(encoded)

    return decode_params
