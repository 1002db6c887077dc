"""Route path registry backed by a segment trie.

Stores registered route paths and matches url paths against them.
Registration happens during setup; afterwards the trie is only read,
so concurrent lookups need no locking.
"""

from kyuko.routing.node import RouteNode
from kyuko.routing.params import create_path_params
from kyuko.routing.segments import split_path_segments


class RouteRegistry:
    """Registered route paths and the matcher over them.

    Usage::

        registry = RouteRegistry()
        registry.add_route_path("/users/:userId")
        registry.find_match("/users/Alice")  # "/users/:userId"

    Matching prefers route paths with early exact (literal) segments over
    wildcards, and among equally specific route paths, the one registered
    earliest.
    """

    __slots__ = ("_root",)

    create_path_params = staticmethod(create_path_params)

    def __init__(self) -> None:
        self._root = RouteNode.create_root()

    @property
    def root(self) -> RouteNode:
        return self._root

    def add_route_path(self, route_path: str) -> str:
        """Add a route path such as ``"/"``, ``"/users"`` or ``"/users/:id"``.

        Returns the normalized route path, the value ``find_match`` reports
        for it (``"//about/"`` becomes ``"/about"``). Registering the same
        route path twice is harmless. Route paths are not validated;
        reserved characters give unspecified matches.
        """
        node = self._root
        for segment in split_path_segments(route_path):
            node = node.find_or_create_child(segment)
        node.is_terminal = True
        return node.full_path

    def find_match(self, url_path: str) -> str | None:
        """Return the route path matching *url_path*, or ``None``."""
        segments = split_path_segments(url_path)
        total = len(segments)
        frontier = [self._root]

        for i, segment in enumerate(segments):
            remaining = total - i - 1
            frontier = [
                child
                for node in frontier
                for child in node.find_matching_children(segment)
                # Subtree must be deep enough for the rest of the path
                if child.height >= remaining
            ]
            if not frontier:
                return None

        for node in frontier:
            if node.is_terminal:
                return node.full_path
        return None
