"""Error handling: error handlers, the default handler, and redirects.

Run:
    python app.py
"""

import logging

from kyuko import App

logger = logging.getLogger(__name__)

app = App()


class NotAllowed(Exception):
    pass


@app.get("/")
def index(request, response):
    raise RuntimeError("An intentional error occurred!")


@app.get("/admin")
def admin(request, response):
    raise NotAllowed("admins only")


@app.get("/old")
def old(request, response):
    response.redirect("/")


@app.error
def log_error(exc, request, response):
    logger.info("request %s failed: %s", request.uuid, exc)


@app.error
def not_allowed(exc, request, response):
    if isinstance(exc, NotAllowed) and not response.was_sent():
        response.status(403).send(str(exc))


@app.error
def fallback(exc, request, response):
    if not response.was_sent():
        response.send(str(exc))


@app.default
def not_found(request, response):
    response.status(404).send(f"Nothing at {request.path}")


if __name__ == "__main__":
    app.listen()
