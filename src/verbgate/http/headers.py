"""Immutable, case-insensitive HTTP headers.

Names are folded to lowercase once, when the headers are built, so a
lookup is a plain string comparison. Only the first value of a repeated
name is ever returned.
"""

from collections.abc import Iterable, Iterator, Mapping


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive HTTP headers.

    Build with ``from_mapping`` (strings) or ``from_asgi`` (the byte pairs
    of an ASGI scope).
    """

    __slots__ = ("_items",)

    def __init__(self, items: tuple[tuple[str, str], ...] = ()) -> None:
        object.__setattr__(self, "_items", tuple((name.lower(), value) for name, value in items))

    @classmethod
    def from_mapping(cls, items: Mapping[str, str] | Iterable[tuple[str, str]]) -> "Headers":
        """Build headers from a mapping or from ``(name, value)`` string pairs."""
        pairs = items.items() if isinstance(items, Mapping) else items
        return cls(tuple(pairs))

    @classmethod
    def from_asgi(cls, raw: Iterable[tuple[bytes, bytes]]) -> "Headers":
        """Build headers from ASGI byte pairs, decoded as latin-1."""
        return cls(tuple((name.decode("latin-1"), value.decode("latin-1")) for name, value in raw))

    def __getitem__(self, key: str) -> str:
        key_lower = key.lower()
        for name, value in self._items:
            if name == key_lower:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key_lower = key.lower()
        return any(name == key_lower for name, _ in self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(dict.fromkeys(name for name, _ in self._items))

    def __len__(self) -> int:
        return len(set(self))
