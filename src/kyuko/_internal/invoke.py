"""Invoke helpers: call sync or async callables uniformly.

Handlers, middleware, error handlers and authenticators can all be
``def`` or ``async def``. This module keeps the sync/async check in
exactly one place.

Usage::

    from kyuko._internal.invoke import invoke

    result = await invoke(handler, request, response)
"""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it's awaitable."""
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
