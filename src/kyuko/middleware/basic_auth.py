"""HTTP Basic authentication middleware (RFC 7617).

Decodes ``Authorization: Basic <base64(user:password)>`` and asks an
authenticator whether the credentials are valid. The outcome is stored on
the request-scoped namespace and read with ``get_basic_auth()``::

    from kyuko.middleware.basic_auth import basic_auth, get_basic_auth

    def check(username: str, password: str) -> bool:
        return username == "admin" and password == "s3cr3t"

    app.use(basic_auth(check))

    @app.get("/secret")
    def secret(request, response):
        auth = get_basic_auth()
        if auth.authenticated:
            response.send(f"a secret message for {auth.user}")
        else:
            response.status(401).send()

With ``send_response=True`` the middleware answers failed attempts with
``401 Unauthorized`` itself, so the route handler never runs.
"""

import base64
import binascii
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from kyuko._internal.invoke import invoke
from kyuko.context import g
from kyuko.http.request import Request
from kyuko.http.response import Response
from kyuko.middleware.protocol import Middleware

# Returns True if the username and password are valid. Sync or async.
type Authenticator = Callable[[str, str], bool | Awaitable[bool]]

_SCHEME = "Basic "


@dataclass(frozen=True, slots=True)
class BasicAuth:
    """Result of basic authentication for the current request.

    Attributes:
        realm: The protection space announced to clients.
        authenticated: Whether the supplied credentials were accepted.
        user: The authenticated username, ``None`` otherwise.
    """

    realm: str
    authenticated: bool = False
    user: str | None = None


def get_basic_auth() -> BasicAuth:
    """Return the basic auth result for the current request.

    Raises ``LookupError`` if ``basic_auth()`` has not run for this request.
    """
    result = g.get("basic_auth")
    if result is None:
        msg = (
            "No basic auth context. Ensure basic_auth() is added "
            "with app.use() before reading the result."
        )
        raise LookupError(msg)
    return result


def parse_credentials(header: str | None) -> tuple[str, str] | None:
    """Extract ``(username, password)`` from an Authorization header.

    Returns ``None`` for missing headers, other schemes, and malformed
    credentials. The password may contain colons; the username may not.
    """
    if header is None or not header.startswith(_SCHEME):
        return None
    token = header[len(_SCHEME) :].strip()
    try:
        decoded = base64.b64decode(token, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    username, sep, password = decoded.partition(":")
    if not sep:
        return None
    return username, password


def basic_auth(
    authenticator: Authenticator,
    realm: str = "Access to app",
    send_response: bool = False,
) -> Middleware:
    """Return a middleware that handles basic authentication.

    Args:
        authenticator: Called with ``(username, password)``; returns ``True``
            (or an awaitable of ``True``) for valid credentials.
        realm: Defines a "protection space" that is announced to clients.
        send_response: Whether to send ``401 Unauthorized`` automatically
            on failed authentication.
    """

    def unauthenticated(response: Response) -> None:
        if response.was_sent():
            return
        response.headers.append("www-authenticate", f'Basic realm="{realm}", charset="UTF-8"')
        response.status(401).send()

    async def basic_auth(request: Request, response: Response) -> None:
        g.basic_auth = BasicAuth(realm=realm)

        credentials = parse_credentials(request.headers.get("authorization"))
        if credentials is None:
            if send_response:
                unauthenticated(response)
            return

        username, password = credentials
        if not await invoke(authenticator, username, password):
            if send_response:
                unauthenticated(response)
            return

        g.basic_auth = BasicAuth(realm=realm, authenticated=True, user=username)

    return basic_auth
