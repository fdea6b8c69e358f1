"""Route and PathSegment frozen dataclasses."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from verbgate.routing.declare import declared_methods, normalize_methods


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:  ``/users``  (is_param=False)
    Param:   ``/{id}``   (is_param=True, param_name="id")
    Typed:   ``/{id:int}`` (is_param=True, param_name="id", param_type="int")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    ``allowed_methods`` is fixed at registration time, validated and
    de-duplicated in declaration order. An empty tuple means the route
    accepts any method.
    """

    path: str
    handler: Callable[..., Any]
    allowed_methods: tuple[str, ...] = ()
    name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "allowed_methods", normalize_methods(self.allowed_methods))

    @classmethod
    def from_handler(
        cls,
        path: str,
        handler: Callable[..., Any],
        name: str | None = None,
    ) -> Route:
        """Build a route whose allow-list comes from the handler's decorators."""
        return cls(
            path=path,
            handler=handler,
            allowed_methods=declared_methods(handler),
            name=name,
        )
