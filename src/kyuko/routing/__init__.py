"""Routing: a segment trie with literal-before-wildcard priority.

Routes are registered during setup and compiled into a read-only
lookup structure when the app freezes.
"""

from kyuko.routing.params import create_path_params
from kyuko.routing.registry import RouteRegistry
from kyuko.routing.route import Route, RouteMatch
from kyuko.routing.router import Router
from kyuko.routing.segments import split_path_segments

__all__ = [
    "Route",
    "RouteMatch",
    "RouteRegistry",
    "Router",
    "create_path_params",
    "split_path_segments",
]
