"""Middleware protocol.

A middleware is any callable matching::

    async def my_mw(request: Request, response: Response) -> None: ...

Plain ``def`` works too. No base class required. The framework checks the
shape, not the lineage.

Middleware run in the order they were added, before the route handler.
Each one may inspect or modify the request and response. Sending the
response (``response.send()``) stops the route handler from running;
later middleware still run and should check ``response.was_sent()``.
"""

from collections.abc import Awaitable
from typing import Protocol

from kyuko.http.request import Request
from kyuko.http.response import Response


class Middleware(Protocol):
    """Protocol for kyuko middleware.

    Accepts both functions and callable objects::

        # Function middleware
        def powered_by(request: Request, response: Response) -> None:
            response.headers.set("x-powered-by", "kyuko")

        # Class middleware
        class Maintenance:
            async def __call__(self, request: Request, response: Response) -> None:
                if not response.was_sent():
                    response.status(503).send()
    """

    def __call__(self, request: Request, response: Response) -> Awaitable[None] | None: ...
