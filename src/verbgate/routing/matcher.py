"""Matcher protocol and a minimal path matcher.

A host route object is anything with ``match``, ``match_captures`` and
``list_extra_info``. No base class required. The gate checks the shape,
not the lineage.

``PathMatcher`` is the smallest useful implementation: it answers "does
this path fit this route" for a single route. Choosing between candidate
routes is the host's dispatch loop, not ours.
"""

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from verbgate.errors import ConfigurationError
from verbgate.http.request import Request
from verbgate.routing.params import CONVERTERS, param_pattern
from verbgate.routing.route import PathSegment, Route


@runtime_checkable
class Matcher(Protocol):
    """What a host route object must supply to be gated.

    ``match`` decides whether the route handles the request outright.
    ``match_captures`` decides whether the values captured by enclosing
    (chained) routes fit this route. ``list_extra_info`` returns the
    diagnostic key/value listing shown in debug output.
    """

    def match(self, request: Request) -> bool: ...
    def match_captures(self, request: Request, captures: Sequence[str]) -> bool: ...
    def list_extra_info(self) -> dict[str, Any]: ...


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path string into segments.

    Examples::

        "/users"             -> [PathSegment("users")]
        "/users/{id}"        -> [PathSegment("users"), PathSegment("{id}", is_param=True, ...)]
        "/users/{id:int}"    -> [..., PathSegment("{id:int}", is_param=True, param_type="int")]
        "/files/{path:path}" -> [..., PathSegment("{path:path}", is_param=True, param_type="path")]

    Raises ``ConfigurationError`` for ``<param>`` placeholders, unknown
    converters, and a ``path`` converter that is not the last segment.
    """
    segments: list[PathSegment] = []
    parts = [part for part in path.strip("/").split("/") if part]
    for index, part in enumerate(parts):
        if part.startswith("<") and part.endswith(">"):
            msg = (
                f"Route path {path!r} uses <param> syntax. "
                f"Use {{param}} instead, e.g. {{{part[1:-1]}}}."
            )
            raise ConfigurationError(msg)
        if part.startswith("{") and part.endswith("}"):
            inner = part[1:-1]
            if ":" in inner:
                param_name, param_type = inner.split(":", 1)
            else:
                param_name = inner
                param_type = "str"
            if param_type not in CONVERTERS:
                msg = f"Unknown converter {param_type!r} in route path {path!r}."
                raise ConfigurationError(msg)
            if param_type == "path" and index != len(parts) - 1:
                msg = f"The path converter must be the last segment in {path!r}."
                raise ConfigurationError(msg)
            segments.append(
                PathSegment(
                    value=part,
                    is_param=True,
                    param_name=param_name,
                    param_type=param_type,
                )
            )
        else:
            segments.append(PathSegment(value=part))
    return segments


class PathMatcher:
    """Match a single route's path pattern against a request path.

    Usage::

        matcher = PathMatcher(Route("/users/{id:int}", handler))
        matcher.match(request)  # True for /users/42, False for /users/bob
    """

    __slots__ = ("_params", "_segments", "route")

    def __init__(self, route: Route) -> None:
        self.route = route
        self._segments = parse_path(route.path)
        self._params = [seg for seg in self._segments if seg.is_param]

    def match(self, request: Request) -> bool:
        parts = [p for p in request.path.strip("/").split("/") if p]
        for index, seg in enumerate(self._segments):
            if seg.is_param and seg.param_type == "path":
                # Catch-all: consumes the rest, needs at least one part
                return index < len(parts)
            if index >= len(parts):
                return False
            part = parts[index]
            if seg.is_param:
                if not param_pattern(seg.param_type).match(part):
                    return False
            elif part != seg.value:
                return False
        return len(parts) == len(self._segments)

    def match_captures(self, request: Request, captures: Sequence[str]) -> bool:
        if len(captures) != len(self._params):
            return False
        return all(
            param_pattern(seg.param_type).match(value)
            for seg, value in zip(self._params, captures, strict=True)
        )

    def list_extra_info(self) -> dict[str, Any]:
        info: dict[str, Any] = {"Path": self.route.path, "Args": len(self._params)}
        if self.route.name:
            info["Name"] = self.route.name
        return info

    def __repr__(self) -> str:
        return f"PathMatcher({self.route.path!r})"
