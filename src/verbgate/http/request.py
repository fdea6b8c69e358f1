"""Immutable HTTP request snapshot.

Only the parts the gate looks at: the wire method, the path and the
headers. Owned by the host; read-only here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from verbgate.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``method`` is the verb used on the wire. The effective method, after
    override headers are taken into account, comes from
    ``verbgate.overrides.resolve_method``.
    """

    method: str
    path: str = "/"
    headers: Headers = field(default_factory=Headers)

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        return cls(
            method=scope["method"],
            path=scope.get("path", "/"),
            headers=Headers.from_asgi(scope.get("headers", ())),
        )
