"""Collection types for mal.

``List`` and ``Vector`` share the shape of a Python list but carry distinct
tags so that ``()`` and ``[]`` survive a read/print round trip. ``Map`` keeps
insertion order and compares keys structurally.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from mal import Expr
from mal.types.nil import Nil


class List(list):
    """Evaluation form / list value, written ``( )``."""

    def __repr__(self) -> str:
        return f"List({list.__repr__(self)})"


class Vector(list):
    """Literal sequence, written ``[ ]``."""

    def __repr__(self) -> str:
        return f"Vector({list.__repr__(self)})"


class Map:
    """Insertion-ordered associative collection written ``{ }``.

    Keys are compared structurally: numbers and strings by value, symbols by
    identity and collections element-wise. Rebinding an existing key keeps
    its original position.
    """

    __slots__ = ("_entries",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, pairs: Iterable[tuple[Expr, Expr]] = ()):
        self._entries: dict[object, tuple[Expr, Expr]] = {}
        for key, value in pairs:
            self.set(key, value)

    @classmethod
    def from_items(cls, items: list[Expr]) -> Map:
        """Pair consecutive items; a trailing unpaired key is bound to nil."""
        m = cls()
        for i in range(0, len(items), 2):
            value = items[i + 1] if i + 1 < len(items) else Nil
            m.set(items[i], value)
        return m

    def set(self, key: Expr, value: Expr) -> None:
        from mal.types.equality import map_key
        k = map_key(key)
        existing = self._entries.get(k)
        # keep the first spelling of the key, replace only the value
        self._entries[k] = (existing[0] if existing else key, value)

    def get(self, key: Expr, default: Expr = Nil) -> Expr:
        from mal.types.equality import map_key
        entry = self._entries.get(map_key(key))
        return default if entry is None else entry[1]

    def items(self) -> list[tuple[Expr, Expr]]:
        return list(self._entries.values())

    def keys(self) -> list[Expr]:
        return [k for k, _ in self._entries.values()]

    def values(self) -> list[Expr]:
        return [v for _, v in self._entries.values()]

    def __contains__(self, key: Expr) -> bool:
        from mal.types.equality import map_key
        return map_key(key) in self._entries

    def __iter__(self) -> Iterator[Expr]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Map):
            return NotImplemented
        from mal.types.equality import equals
        return equals(self, other)

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"Map({{{body}}})"
