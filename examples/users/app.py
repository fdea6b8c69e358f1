"""Users — one path, one handler per verb.

Demonstrates method declarations, override headers, and a host dispatch
loop that treats a gated-off route as "not this one" and moves on. The
loop and the 404/405 choice belong to the host; verbgate only answers
yes or no for each route.

Run:
    python app.py
"""

import logging

from verbgate import MethodGate, PathMatcher, Request, Route, delete, get, methods, post, put
from verbgate.testing import make_request, tunneled


@get
def show_user(user_id: str) -> str:
    return f"user {user_id}"


@post
@put
def save_user(user_id: str) -> str:
    return f"saved {user_id}"


@methods("DELETE")
def remove_user(user_id: str) -> str:
    return f"deleted {user_id}"


@delete
@methods("PURGE")
def purge_user(user_id: str) -> str:
    return f"purged {user_id}"


def ping() -> str:
    return "pong"


gates = [
    MethodGate(PathMatcher(Route.from_handler("/users/{id:int}", show_user))),
    MethodGate(PathMatcher(Route.from_handler("/users/{id:int}", save_user))),
    MethodGate(PathMatcher(Route.from_handler("/users/{id:int}", remove_user))),
    MethodGate(PathMatcher(Route.from_handler("/admin/users/{id:int}", purge_user))),
    MethodGate(PathMatcher(Route.from_handler("/ping", ping))),
]


def dispatch(request: Request) -> tuple[int, str]:
    """First gate that matches wins; a path hit with no verb hit is a 405."""
    path_hits = []
    for gate in gates:
        if gate.match(request):
            user_id = request.path.rstrip("/").rsplit("/", 1)[-1]
            handler = gate.inner.route.handler
            return 200, handler() if handler is ping else handler(user_id)
        if gate.inner.match(request):
            path_hits.append(gate)
    if path_hits:
        allowed = sorted({m for gate in path_hits for m in gate.describe()})
        return 405, ", ".join(allowed)
    return 404, "Not Found"


def routes() -> list[dict]:
    """Debug listing, one entry per route."""
    return [gate.list_extra_info() for gate in gates]


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    for request in (
        make_request("GET", "/users/1"),
        make_request("POST", "/users/1", tunneled("DELETE")),
        make_request("PATCH", "/users/1"),
        make_request("TRACE", "/ping"),
    ):
        print(request.method, request.path, dispatch(request))
    for info in routes():
        print(info)
