"""Error handling pipeline for kyuko requests.

Runs the registered error handlers, in registration order, for an
exception raised by a middleware or route handler. Falls back to an
empty ``500`` when none of them sends a response.
"""

import logging
from collections.abc import Sequence

from kyuko._internal.invoke import invoke
from kyuko._internal.types import ErrorHandler
from kyuko.http.request import Request
from kyuko.http.response import Response

logger = logging.getLogger("kyuko.server")


async def handle_error(
    exc: Exception,
    request: Request,
    response: Response,
    error_handlers: Sequence[ErrorHandler],
) -> None:
    """Hand *exc* to each error handler, then make sure a response goes out.

    An exception inside an error handler is logged and stops the chain.
    Must be called from the ``except`` block that caught *exc*.
    """
    logger.exception("Error handling %s %s", request.method, request.path)

    try:
        for error_handler in error_handlers:
            await invoke(error_handler, exc, request, response)
    except Exception:
        logger.exception("Error in error handler: %s %s", request.method, request.path)

    if not response.was_sent():
        response.status(500).send()
