"""Method gate — restrict a matcher to a declared set of HTTP methods.

Wraps any ``Matcher`` and is one itself, so the host can drop it in
wherever it keeps route objects::

    route = Route.from_handler("/users/{id:int}", delete_user)
    gate = MethodGate(PathMatcher(route))

    gate.match(request)        # False unless the effective method is DELETE
    gate.list_extra_info()     # {"Path": ..., "Args": 1, "HTTP_METHODS": ["DELETE"]}

The effective method honours the override headers listed in
``verbgate.overrides``. An empty allow-list means the route takes any
method. Nothing here raises while a request is being matched.
"""

import logging
from collections.abc import Sequence
from typing import Any

from verbgate.config import GateConfig
from verbgate.http.request import Request
from verbgate.overrides import override_source, resolve_method
from verbgate.routing.declare import normalize_methods
from verbgate.routing.matcher import Matcher

logger = logging.getLogger("verbgate.routing")

_DEFAULT_CONFIG = GateConfig()


class MethodGate:
    """A ``Matcher`` that only lets allowed HTTP methods through.

    *allowed* defaults to the ``allowed_methods`` of the inner matcher's
    ``route`` attribute, when it has one. A bare string or a blank name
    raises ``ConfigurationError``.
    """

    __slots__ = ("_allowed", "_allowed_lower", "config", "inner")

    def __init__(
        self,
        inner: Matcher,
        allowed: Sequence[str] | None = None,
        config: GateConfig | None = None,
    ) -> None:
        if allowed is None:
            route = getattr(inner, "route", None)
            allowed = getattr(route, "allowed_methods", ())
        self.inner = inner
        self.config = config or _DEFAULT_CONFIG
        self._allowed = normalize_methods(allowed)
        self._allowed_lower = frozenset(m.lower() for m in self._allowed)

    def allowed_methods(self) -> tuple[str, ...]:
        """The declared methods in declaration order, or ``()``."""
        return self._allowed

    def resolve(self, request: Request) -> str:
        """The method this request should be matched as."""
        if not self.config.honor_overrides:
            return request.method
        return resolve_method(request, self.config.override_headers)

    def is_permitted(self, request: Request) -> bool:
        """True if the effective method is allowed, or nothing is declared."""
        if not self._allowed:
            return True
        expected = self.resolve(request)
        if expected.lower() in self._allowed_lower:
            return True
        if logger.isEnabledFor(logging.DEBUG):
            source = None
            if self.config.honor_overrides:
                source = override_source(request, self.config.override_headers)
            logger.debug(
                "%s %s rejected by %r: effective method %r (from %s) not in %s",
                request.method,
                request.path,
                self.inner,
                expected,
                source or "request line",
                list(self._allowed),
            )
        return False

    def match(self, request: Request) -> bool:
        if not self.is_permitted(request):
            return False
        return self.inner.match(request)

    def match_captures(self, request: Request, captures: Sequence[str]) -> bool:
        if not self.is_permitted(request):
            return False
        return self.inner.match_captures(request, captures)

    def describe(self) -> list[str]:
        """The allow-list sorted for display."""
        return sorted(self._allowed)

    def list_extra_info(self) -> dict[str, Any]:
        """The inner listing plus the sorted allow-list."""
        return {**self.inner.list_extra_info(), self.config.extra_info_key: self.describe()}

    def __repr__(self) -> str:
        return f"MethodGate({self.inner!r}, allowed={list(self._allowed)!r})"
