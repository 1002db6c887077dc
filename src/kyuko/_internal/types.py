"""Shared type aliases used across kyuko modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: receives (request, response), sync or async
Handler: TypeAlias = Callable[..., Any]

# Error handler: receives (exc, request, response), sync or async
ErrorHandler: TypeAlias = Callable[..., Any]

# Lifecycle hook: no arguments, sync or async
Hook: TypeAlias = Callable[[], Any]
