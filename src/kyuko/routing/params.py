"""Path parameter extraction.

Pairs the segments of a matched route path with the segments of the url
path and collects the wildcard bindings.
"""

from kyuko.routing.segments import WILDCARD_PREFIX, is_wildcard, split_path_segments


def create_path_params(route_path: str, url_path: str) -> dict[str, str]:
    """Build the ``request.params`` mapping for a matched url path.

    Assumes *url_path* matches *route_path* (equal segment counts). Values
    are the raw url segments; percent-decoding is left to middleware.

    Example::

        create_path_params("/users/:userId/friends/:friendId", "/users/Alice/friends/Bob")
        # {"userId": "Alice", "friendId": "Bob"}
    """
    route_segments = split_path_segments(route_path)
    url_segments = split_path_segments(url_path)
    return {
        route_segment[len(WILDCARD_PREFIX) :]: url_segment
        for route_segment, url_segment in zip(route_segments, url_segments, strict=False)
        if is_wildcard(route_segment)
    }
