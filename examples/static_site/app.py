"""Static site: serve a directory of files.

Files under ``public/`` are served from the site root, with
``index.html`` answering directory requests. Anything that is not a
file falls through to the routes.

Try accessing index.html!

Run:
    python app.py
"""

from pathlib import Path

from kyuko import App
from kyuko.middleware import ServeStatic

PUBLIC_DIR = Path(__file__).parent / "public"

app = App()
app.use(ServeStatic(PUBLIC_DIR))


@app.get("/api/health")
def health(request, response):
    response.json({"ok": True})


if __name__ == "__main__":
    app.listen()
