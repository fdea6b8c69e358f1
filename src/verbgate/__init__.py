"""verbgate — gate route matching on the request's effective HTTP method.

Routes declare the verbs they answer to. A ``MethodGate`` wraps the
host's matcher and turns every other verb away, after honouring the
override headers that clients use to tunnel ``PUT``, ``PATCH`` and
``DELETE`` through ``POST``.

Basic usage::

    from verbgate import MethodGate, PathMatcher, Route, delete

    @delete
    def remove_user(user_id): ...

    gate = MethodGate(PathMatcher(Route.from_handler("/users/{id:int}", remove_user)))
    gate.match(request)
"""

from importlib import import_module

__version__ = "0.1.0"
__all__ = [
    "OVERRIDE_HEADERS",
    "ConfigurationError",
    "GateConfig",
    "Headers",
    "Matcher",
    "MethodGate",
    "PathMatcher",
    "Request",
    "Route",
    "VerbgateError",
    "declared_methods",
    "delete",
    "get",
    "head",
    "methods",
    "options",
    "patch",
    "post",
    "put",
    "resolve_method",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "OVERRIDE_HEADERS": "verbgate.overrides",
    "ConfigurationError": "verbgate.errors",
    "GateConfig": "verbgate.config",
    "Headers": "verbgate.http.headers",
    "Matcher": "verbgate.routing.matcher",
    "MethodGate": "verbgate.routing.gate",
    "PathMatcher": "verbgate.routing.matcher",
    "Request": "verbgate.http.request",
    "Route": "verbgate.routing.route",
    "VerbgateError": "verbgate.errors",
    "declared_methods": "verbgate.routing.declare",
    "delete": "verbgate.routing.declare",
    "get": "verbgate.routing.declare",
    "head": "verbgate.routing.declare",
    "methods": "verbgate.routing.declare",
    "options": "verbgate.routing.declare",
    "patch": "verbgate.routing.declare",
    "post": "verbgate.routing.declare",
    "put": "verbgate.routing.declare",
    "resolve_method": "verbgate.overrides",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import verbgate`` cheap while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_name), name)
