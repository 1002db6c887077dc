"""Middleware: bundled and custom middleware working together.

Demonstrates:
- A function middleware tagging every response with the request id
- A class middleware putting the app into maintenance mode
- ``decode_params()`` for percent-encoded path parameters
- ``json_body()`` for JSON request bodies

Try ``GET /Alice%20%26%20Bob`` or ``POST /`` with a JSON body.

Run:
    python app.py
"""

import json

from kyuko import App, Request, Response
from kyuko.middleware import decode_params, get_request_body, json_body

app = App()


def request_id(request: Request, response: Response) -> None:
    """Expose the per-request uuid as a response header."""
    response.headers.set("x-request-id", request.uuid)


class Maintenance:
    """Answer 503 to everything while enabled."""

    def __init__(self) -> None:
        self.enabled = False

    def __call__(self, request: Request, response: Response) -> None:
        if self.enabled and not response.was_sent():
            response.status(503).send("Down for maintenance")


maintenance = Maintenance()

app.use(request_id)
app.use(maintenance)
app.use(decode_params())
app.use(json_body())


@app.get("/:name")
def greet(request: Request, response: Response) -> None:
    response.send(f"Hello {request.params['name']}!")


@app.post("/")
def pretty(request: Request, response: Response) -> None:
    """Respond with a pretty version of the JSON request body."""
    response.send(json.dumps(get_request_body(), indent=2))


if __name__ == "__main__":
    app.listen()
