"""Method declaration decorators — @get, @post, @methods(...).

Tags a handler with the HTTP methods its route accepts. Tags stack, so a
handler can answer to several verbs::

    from verbgate.routing.declare import methods, post, put

    @post
    @put
    def save_user(user_id): ...

    @methods("DELETE")
    def remove_user(user_id): ...

Names are stored as written. Matching is case-insensitive, so ``"get"``
and ``"GET"`` behave the same on the wire.
"""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from verbgate.errors import ConfigurationError

F = TypeVar("F", bound=Callable[..., Any])

_ATTR = "__http_methods__"


def _check_name(name: object) -> str:
    if not isinstance(name, str):
        msg = f"HTTP method names must be strings, got {type(name).__name__}: {name!r}"
        raise ConfigurationError(msg)
    if not name.strip():
        msg = "HTTP method names must not be blank."
        raise ConfigurationError(msg)
    return name


def normalize_methods(names: Iterable[str]) -> tuple[str, ...]:
    """Validate an allow-list and return it as an ordered, de-duplicated tuple.

    A bare string is refused rather than split into letters: write
    ``("GET",)``, not ``"GET"``.
    """
    if isinstance(names, str):
        msg = f"Allowed methods must be a sequence of names, not the string {names!r}."
        raise ConfigurationError(msg)
    return tuple(dict.fromkeys(_check_name(n) for n in names))


def methods(*names: str) -> Callable[[F], F]:
    """Tag a handler with one or more allowed HTTP methods.

    Raises ``ConfigurationError`` if no names are given or a name is blank
    or not a string.
    """
    if not names:
        msg = "methods() needs at least one HTTP method name."
        raise ConfigurationError(msg)
    checked = normalize_methods(names)

    def decorator(handler: F) -> F:
        # Decorators apply bottom-up; prepend so the outermost reads first.
        existing: tuple[str, ...] = getattr(handler, _ATTR, ())
        merged = tuple(dict.fromkeys(checked + existing))
        setattr(handler, _ATTR, merged)
        return handler

    return decorator


def declared_methods(handler: Callable[..., Any]) -> tuple[str, ...]:
    """Return the methods declared on *handler*, or ``()`` when untagged."""
    return tuple(getattr(handler, _ATTR, ()))


get = methods("GET")
post = methods("POST")
put = methods("PUT")
delete = methods("DELETE")
head = methods("HEAD")
options = methods("OPTIONS")
patch = methods("PATCH")
