"""Kyuko exception hierarchy.

Shared across Router, App, the request pipeline, and middleware so every
module raises and catches the same types.
"""


class KyukoError(Exception):
    """Base for all kyuko-specific errors."""


class ConfigurationError(KyukoError):
    """Raised when app setup is invalid.

    Typically raised while registering routes, middleware, or error
    handlers, before the app serves its first request.
    """


class ResponseAlreadySent(KyukoError):  # noqa: N818
    """Raised when a response is sent more than once for a single request."""

    def __init__(self, detail: str = "Can't send multiple responses to a single request") -> None:
        super().__init__(detail)
