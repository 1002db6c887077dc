"""Kyuko: a small, fast, Express-style web framework for ASGI.

Routes are matched by a segment trie: literal segments beat ``:param``
segments, and the first registered route wins among equals.

Basic usage::

    from kyuko import App

    app = App()

    @app.get("/users/:userId")
    def get_user(request, response):
        response.send(f"Hello, {request.params['userId']}!")

    app.listen()
"""

__version__ = "0.1.0-dev"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "KyukoError",
    "Middleware",
    "Request",
    "Response",
    "ResponseAlreadySent",
    "g",
    "get_request",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import kyuko`` fast while providing a clean top-level API.
    """
    if name == "App":
        from kyuko.app import App

        return App

    if name == "AppConfig":
        from kyuko.config import AppConfig

        return AppConfig

    if name == "Request":
        from kyuko.http.request import Request

        return Request

    if name == "Response":
        from kyuko.http.response import Response

        return Response

    if name == "Middleware":
        from kyuko.middleware.protocol import Middleware

        return Middleware

    if name in ("g", "get_request"):
        from kyuko import context as _ctx

        return getattr(_ctx, name)

    if name in ("ConfigurationError", "KyukoError", "ResponseAlreadySent"):
        from kyuko import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
