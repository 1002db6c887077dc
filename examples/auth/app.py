"""Basic auth: protect routes with HTTP Basic authentication.

``/secret`` answers 401 with a ``WWW-Authenticate`` challenge until the
browser supplies ``admin`` / ``s3cr3t``. ``/profile`` stays public and
reads the outcome instead.

Run:
    python app.py
"""

import hmac

from kyuko import App
from kyuko.middleware import basic_auth, get_basic_auth

USERS = {"admin": "s3cr3t"}

app = App()


def check_password(username: str, password: str) -> bool:
    expected = USERS.get(username)
    return expected is not None and hmac.compare_digest(expected, password)


app.use(basic_auth(check_password, realm="Members"))


@app.get("/profile")
def profile(request, response):
    auth = get_basic_auth()
    response.send(f"Signed in as {auth.user}" if auth.authenticated else "Anonymous")


@app.get("/secret")
def secret(request, response):
    auth = get_basic_auth()
    if not auth.authenticated:
        response.headers.set("www-authenticate", f'Basic realm="{auth.realm}", charset="UTF-8"')
        response.status(401).send()
        return
    response.send(f"a secret message for {auth.user}")


if __name__ == "__main__":
    app.listen()
