"""Per-request state shared between middleware and handlers.

Middleware and handlers only receive ``(request, response)``, so results
a middleware computes for later stages travel through ``g``:
``json_body()`` leaves ``g.request_body`` and ``basic_auth()`` leaves
``g.basic_auth``. ``get_request()`` gives code deeper in the call stack
the request being served.

The pipeline sets both before the first middleware runs and clears them
once the response is built.
"""

from contextvars import ContextVar
from typing import Any

from kyuko.http.request import Request

request_var: ContextVar[Request] = ContextVar("kyuko.request")

# Values handed from middleware to later middleware and the route handler
_handoff: ContextVar[dict[str, Any] | None] = ContextVar("kyuko.g", default=None)


def get_request() -> Request:
    """Return the request being served. ``LookupError`` outside a request."""
    return request_var.get()


def _values() -> dict[str, Any]:
    values = _handoff.get()
    if values is None:
        values = {}
        _handoff.set(values)
    return values


class _RequestGlobals:
    """Attribute access over the current request's handoff values.

    Usage::

        def load_user(request, response):
            g.user = find_user(request.headers.get("x-user"))

        @app.get("/me")
        def me(request, response):
            response.json({"name": g.user.name})
    """

    __slots__ = ()

    def __getattr__(self, name: str) -> Any:
        try:
            return _values()[name]
        except KeyError:
            msg = f"no middleware set g.{name} for this request"
            raise AttributeError(msg) from None

    def __setattr__(self, name: str, value: Any) -> None:
        _values()[name] = value

    def __contains__(self, name: str) -> bool:
        return name in _values()

    def get(self, name: str, default: Any = None) -> Any:
        return _values().get(name, default)

    def _reset(self) -> None:
        _handoff.set(None)


g = _RequestGlobals()
