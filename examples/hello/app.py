"""Hello World: the simplest kyuko app.

Demonstrates route registration, path parameters, and the default
404 handler.

Run:
    python app.py
"""

from kyuko import App, Request, Response

app = App()


@app.get("/")
def index(request: Request, response: Response) -> None:
    response.send("Hello World!")


@app.get("/:name")
def greet(request: Request, response: Response) -> None:
    response.send(f"Hello {request.params['name']}!")


@app.get("/api/status")
def status(request: Request, response: Response) -> None:
    response.json({"status": "ok"})


if __name__ == "__main__":
    app.listen(lambda: print("Listening on http://127.0.0.1:8000"))
