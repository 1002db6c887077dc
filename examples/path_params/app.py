"""Path parameters: nested wildcard segments.

Run:
    python app.py
"""

from kyuko import App

app = App()


@app.get("/users/:userId")
def user(request, response):
    response.send(request.params["userId"])


@app.get("/users/:userId/friends/:friendId")
def friend(request, response):
    response.send(request.params["userId"] + "+" + request.params["friendId"])


if __name__ == "__main__":
    app.listen()
