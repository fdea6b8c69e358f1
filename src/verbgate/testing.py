"""Test utilities for code that gates routes on HTTP methods.

Builds request snapshots without an ASGI server::

    from verbgate.testing import make_request, tunneled

    request = make_request("POST", "/users/1", tunneled("DELETE"))
    assert gate.match(request)
"""

from collections.abc import Iterable, Mapping

from verbgate.http.headers import Headers
from verbgate.http.request import Request


def make_request(
    method: str = "GET",
    path: str = "/",
    headers: Mapping[str, str] | Iterable[tuple[str, str]] = (),
) -> Request:
    """Build a ``Request`` from plain strings."""
    return Request(method=method, path=path, headers=Headers.from_mapping(headers))


def tunneled(method: str, header: str = "X-HTTP-Method-Override") -> dict[str, str]:
    """Headers that tunnel *method* through an override header.

    Defaults to the Google/GData header, the one most clients send.
    """
    return {header: method}
