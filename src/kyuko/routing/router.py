"""Compiled router: one route registry shared across all methods.

The registry only matches paths. Method dispatch is a per-method table
of ``normalized route path -> handler`` layered on top.
"""

import logging

from kyuko._internal.types import Handler
from kyuko.routing.params import create_path_params
from kyuko.routing.registry import RouteRegistry
from kyuko.routing.route import Route, RouteMatch
from kyuko.routing.segments import normalize_path

logger = logging.getLogger("kyuko.routing")


class Router:
    """Route table with trie-based path matching.

    Usage::

        router = Router()
        router.add(Route("/users", handler, frozenset({"GET"})))
        router.add(Route("/users/:id", handler, frozenset({"GET"})))
        router.compile()
        match = router.match("GET", "/users/42")
    """

    __slots__ = ("_compiled", "_handlers", "_registry", "_routes")

    def __init__(self) -> None:
        self._registry = RouteRegistry()
        # method -> route path -> handler
        self._handlers: dict[str, dict[str, Handler]] = {}
        self._routes: list[Route] = []
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile().

        Binding a handler to a (method, route path) pair that already has
        one replaces the earlier handler.
        """
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        route_path = self._registry.add_route_path(route.path)
        for method in route.methods:
            by_path = self._handlers.setdefault(method, {})
            if route_path in by_path:
                logger.debug("Replacing handler for %s %s", method, route_path)
            by_path[route_path] = route.handler
        self._routes.append(route)
        logger.debug("Registered %s %s", ",".join(sorted(route.methods)), route.path)

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in registration order."""
        return list(self._routes)

    @property
    def registry(self) -> RouteRegistry:
        return self._registry

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def allowed_methods(self, route_path: str) -> frozenset[str]:
        """Methods that have a handler bound to *route_path*."""
        route_path = normalize_path(route_path)
        return frozenset(
            method for method, by_path in self._handlers.items() if route_path in by_path
        )

    def match(self, method: str, path: str) -> RouteMatch | None:
        """Match a request method and url path.

        Returns ``None`` when no route path matches. Otherwise returns a
        ``RouteMatch`` whose ``handler`` is ``None`` if *method* has no
        handler bound to the matched route path.
        """
        route_path = self._registry.find_match(path)
        if route_path is None:
            return None

        handler = self._handlers.get(method, {}).get(route_path)
        return RouteMatch(
            route_path=route_path,
            path_params=create_path_params(route_path, path),
            handler=handler,
        )
