"""ASGI handler: translates ASGI scope/messages to kyuko types.

The only component that touches raw ASGI directly. Converts scope dicts
to typed Request objects, runs the middleware chain and the matched route
handler, and sends the Response back through ASGI send().
"""

import logging
from collections.abc import Sequence
from contextvars import Token

from kyuko._internal.asgi import Receive, Scope, Send
from kyuko._internal.invoke import invoke
from kyuko._internal.types import ErrorHandler, Handler
from kyuko.context import g, request_var
from kyuko.http.request import Request
from kyuko.http.response import Response
from kyuko.middleware.protocol import Middleware
from kyuko.routing.router import Router
from kyuko.server.errors import handle_error
from kyuko.server.sender import send_response

logger = logging.getLogger("kyuko.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    middleware: Sequence[Middleware],
    error_handlers: Sequence[ErrorHandler],
    default_handler: Handler,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)
    response = Response()

    match = router.match(request.method, request.path)
    handler = default_handler
    if match is not None:
        request.params.update(match.path_params)
        if match.handler is not None:
            handler = match.handler

    token: Token[Request] = request_var.set(request)
    try:
        await _dispatch(request, response, handler, middleware, error_handlers)
    finally:
        g._reset()
        request_var.reset(token)

    if not response.was_sent():
        logger.warning(
            "Handler for %s %s completed without sending a response",
            request.method,
            request.path,
        )
        response.status(500).send()

    await send_response(response, send)


async def _dispatch(
    request: Request,
    response: Response,
    handler: Handler,
    middleware: Sequence[Middleware],
    error_handlers: Sequence[ErrorHandler],
) -> None:
    """Run the middleware in order, then the route handler if nothing sent."""
    try:
        for mw in middleware:
            await invoke(mw, request, response)
    except Exception as exc:
        await handle_error(exc, request, response, error_handlers)

    if response.was_sent():
        return

    try:
        await invoke(handler, request, response)
    except Exception as exc:
        await handle_error(exc, request, response, error_handlers)
