"""Route and RouteMatch frozen dataclasses."""

from dataclasses import dataclass

from kyuko._internal.types import Handler


@dataclass(frozen=True, slots=True)
class Route:
    """A route definition: a route path bound to a handler for some methods.

    Created during app setup, compiled into the router at freeze time.
    """

    path: str
    handler: Handler
    methods: frozenset[str]


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route path match.

    ``handler`` is ``None`` when the path matched a registered route path
    but no handler is bound for the request method.
    """

    route_path: str
    path_params: dict[str, str]
    handler: Handler | None = None
