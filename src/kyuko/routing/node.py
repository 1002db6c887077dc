"""Route trie nodes.

Each segment of a registered route path is stored as a node. For example,
``["", "users", ":id"]`` are the segments of ``"/users/:id"``.
"""

from __future__ import annotations

from kyuko.routing.segments import ROOT_SEGMENT, is_wildcard


class RouteNode:
    """A node in the route trie. Mutable during registration only.

    ``full_path`` and ``height`` are caches maintained on insertion. Both can
    be recomputed from the tree shape: ``full_path`` from the chain of
    parents, ``height`` as the distance to the deepest descendant.
    """

    __slots__ = (
        "full_path",
        "height",
        "is_terminal",
        "literal_children",
        "parent",
        "value",
        "wildcard_children",
    )

    def __init__(self, value: str, parent: RouteNode | None) -> None:
        self.value = value
        self.parent = parent
        # Exact segment children: "users" -> node
        self.literal_children: dict[str, RouteNode] = {}
        # Wildcard children in registration order: ":id" -> node
        self.wildcard_children: dict[str, RouteNode] = {}
        # True iff some registered route path ends here
        self.is_terminal = False
        self.height = 0
        self.full_path = _build_full_path(value, parent)

    @classmethod
    def create_root(cls) -> RouteNode:
        """Return a new node that acts as the root of a trie."""
        return cls(ROOT_SEGMENT, None)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def find_or_create_child(self, segment: str) -> RouteNode:
        """Return the child holding exactly *segment*, creating it if absent."""
        container = self.wildcard_children if is_wildcard(segment) else self.literal_children
        child = container.get(segment)
        if child is not None:
            return child

        child = RouteNode(segment, self)
        container[segment] = child
        child._update_ancestor_heights()
        return child

    def find_matching_children(self, segment: str) -> list[RouteNode]:
        """Return children that match *segment*.

        The exact literal child (if any) comes first, followed by every
        wildcard child in registration order.
        """
        result: list[RouteNode] = []
        literal = self.literal_children.get(segment)
        if literal is not None:
            result.append(literal)
        result.extend(self.wildcard_children.values())
        return result

    def _update_ancestor_heights(self) -> None:
        """Propagate the height of a newly created leaf up the tree.

        Stops at the first ancestor that already has a taller child.
        """
        node = self
        while node.parent is not None:
            parent = node.parent
            if parent.height != node.height:
                return
            parent.height += 1
            node = parent

    def __repr__(self) -> str:
        marker = " terminal" if self.is_terminal else ""
        return f"<RouteNode {self.full_path!r} height={self.height}{marker}>"


def _build_full_path(value: str, parent: RouteNode | None) -> str:
    if parent is None:
        return ""
    if parent.value == ROOT_SEGMENT:
        return "/"
    if parent.full_path == "/":
        return f"/{value}"
    return f"{parent.full_path}/{value}"
