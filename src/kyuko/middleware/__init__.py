"""Middleware: Protocol-based, no inheritance required.

A middleware is any callable matching:
    def mw(request: Request, response: Response) -> None  (or async def)

Built-in middleware:
    basic_auth -- HTTP Basic authentication (RFC 7617)
    decode_params -- Percent-decode path parameters
    json_body -- Parse JSON request bodies
    ServeStatic -- Serve static files from a directory
"""

from kyuko.middleware.basic_auth import BasicAuth, basic_auth, get_basic_auth
from kyuko.middleware.decode_params import decode_params
from kyuko.middleware.json_body import get_request_body, json_body
from kyuko.middleware.protocol import Middleware
from kyuko.middleware.static import ServeStatic, serve_static

__all__ = [
    "BasicAuth",
    "Middleware",
    "ServeStatic",
    "basic_auth",
    "decode_params",
    "get_basic_auth",
    "get_request_body",
    "json_body",
    "serve_static",
]
