"""ASGI response sending: translates a sent kyuko Response to ASGI messages."""

from kyuko._internal.asgi import Send
from kyuko.http.response import Response

_DEFAULT_TEXT_TYPE = b"text/plain; charset=utf-8"


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


async def send_response(response: Response, send: Send) -> None:
    """Translate a kyuko Response into ASGI send() calls."""
    status = response.status_code or 200
    raw_headers = [
        (name, value) for name, value in response.headers.raw if name != b"content-length"
    ]

    if isinstance(response.body, str) and "content-type" not in response.headers:
        raw_headers.append((b"content-type", _DEFAULT_TEXT_TYPE))

    body = response.body_bytes if _body_allowed(status) else b""
    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )
