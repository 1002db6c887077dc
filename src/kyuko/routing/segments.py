"""Path segmentation shared by route paths and url paths.

Slash handling is deliberately asymmetric:

- Recurring leading slashes are merged and count as one slash.
- Recurring slashes mid-path produce empty segments.
- A single trailing slash is ignored (only one).
"""

# Segment value of the trie root. Not reachable from any real path.
ROOT_SEGMENT = "\0"

WILDCARD_PREFIX = ":"


def is_wildcard(segment: str) -> bool:
    """True if *segment* is a wildcard such as ``:id``."""
    return segment.startswith(WILDCARD_PREFIX)


def split_path_segments(path: str) -> list[str]:
    """Split a route or url path into segments.

    Note that ``"/".join(split_path_segments(path)) != path`` in general.

    Examples::

        "/"           -> [""]
        "//"          -> [""]
        "/users"      -> ["", "users"]
        "///users"    -> ["", "users"]
        "/users/"     -> ["", "users"]
        "/users//"    -> ["", "users", ""]
        "/users/:id"  -> ["", "users", ":id"]
        "/users//:id" -> ["", "users", "", ":id"]
    """
    segments = path.split("/")
    divider = next((i for i, seg in enumerate(segments) if seg != ""), None)
    if divider is None:
        return [""]

    # Keep exactly one leading empty segment (the root)
    del segments[: max(divider - 1, 0)]
    if segments[-1] == "":
        segments.pop()
    return segments


def normalize_path(path: str) -> str:
    """Rejoin the segments of *path*, e.g. ``"//users/"`` -> ``"/users"``.

    Two route paths are the same route exactly when they normalize to the
    same string.
    """
    return "/".join(split_path_segments(path)) or "/"
