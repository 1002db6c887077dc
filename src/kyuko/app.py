"""Kyuko application class.

Mutable during setup (route registration, middleware, error handlers).
Frozen at runtime when app.run() or __call__() is first invoked.
"""

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from kyuko._internal.asgi import Receive, Scope, Send
from kyuko._internal.invoke import invoke
from kyuko._internal.types import ErrorHandler, Handler, Hook
from kyuko.config import AppConfig
from kyuko.errors import ConfigurationError
from kyuko.http.request import Request
from kyuko.http.response import Response
from kyuko.middleware.protocol import Middleware
from kyuko.routing.route import Route
from kyuko.routing.router import Router
from kyuko.server.handler import handle_request

logger = logging.getLogger("kyuko.server")

# Methods bound by App.all()
ALL_METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "DELETE")


@dataclass(slots=True)
class _PendingRoute:
    """A route waiting to be compiled."""

    path: str
    handler: Handler
    methods: tuple[str, ...]


def _not_found(request: Request, response: Response) -> None:
    response.status(404).send()


def _ensure_callable(obj: object, what: str) -> None:
    if not callable(obj):
        msg = f"{what} must be callable, got {type(obj).__name__}"
        raise ConfigurationError(msg)


class App:
    """The kyuko application.

    Usage::

        app = App()

        @app.get("/users/:userId")
        def get_user(request, response):
            response.send(request.params["userId"])

        app.post("/users", create_user)
        app.use(json_body())
        app.listen(lambda: print("listening"))

    Mutable during setup (route registration, middleware, error handlers).
    Frozen at runtime when ``app.run()`` or ``__call__()`` is first invoked.

    Thread safety:
        The setup phase is single-threaded (decorators at import time).
        The freeze transition uses a Lock + double-check to ensure exactly
        one thread compiles the router, even when several ASGI workers call
        ``__call__()`` concurrently on first request.
    """

    __slots__ = (
        "_default_handler",
        "_error_handlers",
        "_freeze_lock",
        "_frozen",
        "_middleware",
        "_middleware_list",
        "_pending_routes",
        # Compiled state (populated by _freeze)
        "_router",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._pending_routes: list[_PendingRoute] = []
        self._middleware_list: list[Middleware] = []
        self._error_handlers: list[ErrorHandler] = []
        self._default_handler: Handler = _not_found
        self._startup_hooks: list[Hook] = []
        self._shutdown_hooks: list[Hook] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state, set during _freeze()
        self._router: Router | None = None
        self._middleware: tuple[Middleware, ...] = ()

    # -- Route registration --

    def route(
        self,
        path: str,
        *,
        methods: Iterable[str] | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Args:
            path: Route path. Segments starting with ``:`` are parameters,
                e.g. ``/users/:userId``.
            methods: HTTP methods. Defaults to ``["GET"]``.
        """
        methods = tuple(m.upper() for m in (methods or ("GET",)))

        def decorator(func: Handler) -> Handler:
            self._check_not_frozen()
            _ensure_callable(func, "Route handler")
            self._pending_routes.append(_PendingRoute(path, func, methods))
            return func

        return decorator

    def _register(self, path: str, handler: Handler | None, *methods: str) -> Any:
        decorator = self.route(path, methods=methods)
        if handler is None:
            return decorator
        return decorator(handler)

    def get(self, path: str, handler: Handler | None = None) -> Any:
        """Register a GET handler. Without *handler*, acts as a decorator."""
        return self._register(path, handler, "GET")

    def post(self, path: str, handler: Handler | None = None) -> Any:
        """Register a POST handler. Without *handler*, acts as a decorator."""
        return self._register(path, handler, "POST")

    def put(self, path: str, handler: Handler | None = None) -> Any:
        """Register a PUT handler. Without *handler*, acts as a decorator."""
        return self._register(path, handler, "PUT")

    def delete(self, path: str, handler: Handler | None = None) -> Any:
        """Register a DELETE handler. Without *handler*, acts as a decorator."""
        return self._register(path, handler, "DELETE")

    def patch(self, path: str, handler: Handler | None = None) -> Any:
        """Register a PATCH handler. Without *handler*, acts as a decorator."""
        return self._register(path, handler, "PATCH")

    def head(self, path: str, handler: Handler | None = None) -> Any:
        """Register a HEAD handler. Without *handler*, acts as a decorator."""
        return self._register(path, handler, "HEAD")

    def all(self, path: str, handler: Handler | None = None) -> Any:
        """Register *handler* for GET, POST, PUT and DELETE."""
        return self._register(path, handler, *ALL_METHODS)

    def default(self, handler: Handler) -> Handler:
        """Replace the handler for unmatched requests (a bare ``404`` by default).

        Also used when a route path matches but has no handler for the
        request method.
        """
        self._check_not_frozen()
        _ensure_callable(handler, "Default handler")
        self._default_handler = handler
        return handler

    # -- Middleware --

    def use(self, middleware: Middleware) -> Middleware:
        """Add a middleware to the pipeline.

        Middleware run in registration order before the route handler,
        each receiving ``(request, response)``.
        """
        self._check_not_frozen()
        _ensure_callable(middleware, "Middleware")
        self._middleware_list.append(middleware)
        return middleware

    # -- Error handlers --

    def error(self, handler: ErrorHandler) -> ErrorHandler:
        """Add an error handler, called with ``(exc, request, response)``.

        Error handlers run in registration order whenever a middleware or
        route handler raises. Usable as a decorator.
        """
        self._check_not_frozen()
        _ensure_callable(handler, "Error handler")
        self._error_handlers.append(handler)
        return handler

    # -- Lifecycle hooks --

    def on_startup(self, func: Hook) -> Hook:
        """Register an async or sync startup hook via decorator.

        Hooks run in registration order during ASGI lifespan startup,
        before the server begins accepting HTTP requests.
        """
        self._check_not_frozen()
        _ensure_callable(func, "Startup hook")
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Hook) -> Hook:
        """Register an async or sync shutdown hook via decorator."""
        self._check_not_frozen()
        _ensure_callable(func, "Shutdown hook")
        self._shutdown_hooks.append(func)
        return func

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start pounce and block until it shuts down.

        With ``config.debug`` a single worker reloads on file changes;
        otherwise ``config.workers`` workers serve without reload.

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        self._ensure_frozen()

        _host = host or self.config.host
        _port = port or self.config.port
        logger.info("Starting kyuko on %s:%d", _host, _port)

        from kyuko.server.runner import serve

        serve(self, _host, _port)

    def listen(
        self,
        callback: Hook | None = None,
        *,
        host: str | None = None,
        port: int | None = None,
    ) -> None:
        """Start serving; *callback* runs once the server has started up.

        Works on an app that has already been frozen (for example by a
        ``TestClient``): startup hooks are read at lifespan time, not
        compiled into the router.
        """
        if callback is not None:
            _ensure_callable(callback, "Listen callback")
            self._startup_hooks.append(callback)
        self.run(host, port)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles the lifespan scope directly, then delegates HTTP scopes to
        the request pipeline. Other scope types are ignored.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        if scope["type"] != "http":
            return

        self._ensure_frozen()

        assert self._router is not None

        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            middleware=self._middleware,
            error_handlers=tuple(self._error_handlers),
            default_handler=self._default_handler,
        )

    async def _handle_lifespan(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
    ) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup (before first HTTP request), then
        runs registered startup/shutdown hooks and signals completion
        back to the server.
        """
        self._ensure_frozen()

        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    for hook in self._startup_hooks:
                        await invoke(hook)
                except Exception as exc:
                    logger.exception("Startup hook failed")
                    await send(
                        {
                            "type": "lifespan.startup.failed",
                            "message": str(exc),
                        }
                    )
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                for hook in self._shutdown_hooks:
                    await invoke(hook)
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    @property
    def router(self) -> Router:
        """The compiled router. Freezes the app on first access."""
        self._ensure_frozen()
        assert self._router is not None
        return self._router

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        router = Router()
        for pending in self._pending_routes:
            router.add(Route(pending.path, pending.handler, frozenset(pending.methods)))
        router.compile()
        self._router = router

        self._middleware = tuple(self._middleware_list)
        self._frozen = True
        logger.debug(
            "App frozen: %d routes, %d middleware, %d error handlers",
            len(self._pending_routes),
            len(self._middleware),
            len(self._error_handlers),
        )

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes, middleware, and error handlers before calling app.run()."
            )
            raise RuntimeError(msg)
