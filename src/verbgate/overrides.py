"""Effective HTTP method resolution.

Browsers only send ``GET`` and ``POST`` from plain forms, and some proxies
drop anything else. Several vendors settled on a request header that
carries the verb the client meant to use. We honour the common ones:

- ``X-HTTP-Method`` (Microsoft)
- ``X-HTTP-Method-Override`` (Google/GData)
- ``X-METHOD-OVERRIDE`` (IBM)
- ``x-tunneled-method`` (used by many similar libraries)

Supporting these is about working with existing clients, not an
endorsement. Tunnelling ``DELETE`` through ``POST`` is reasonable;
overriding a ``GET`` is not something to build an API around.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from verbgate.http.request import Request

# Precedence is fixed; the first non-empty header wins.
OVERRIDE_HEADERS: tuple[str, ...] = (
    "X-HTTP-Method",
    "X-HTTP-Method-Override",
    "X-METHOD-OVERRIDE",
    "x-tunneled-method",
)


def override_source(
    request: Request,
    header_names: tuple[str, ...] = OVERRIDE_HEADERS,
) -> str | None:
    """Return the name of the header that supplies the method, if any.

    ``None`` means no override header carried a non-empty value and the
    wire method applies.
    """
    for name in header_names:
        if request.headers.get(name):
            return name
    return None


def resolve_method(
    request: Request,
    header_names: tuple[str, ...] = OVERRIDE_HEADERS,
) -> str:
    """Return the effective HTTP method for *request*.

    Checks *header_names* in order and returns the first non-empty value,
    falling back to ``request.method``. The value is passed through as-is:
    no case folding and no check that it is a legal method token.
    """
    name = override_source(request, header_names)
    if name is None:
        return request.method
    return request.headers[name]
