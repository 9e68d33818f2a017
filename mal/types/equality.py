from __future__ import annotations

from mal import Expr
from mal.types.symbol import Symbol
from mal.types.collections import List, Vector, Map


def is_number(value: Expr) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def equals(a: Expr, b: Expr) -> bool:
    """Structural equality used by ``=`` and by Map keys.

    Numbers and strings compare by value, symbols by identity, sequences
    element-wise regardless of List/Vector tag, maps by their entry sequence.
    """
    if a is b:
        return True
    if isinstance(a, Symbol) or isinstance(b, Symbol):
        return False
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if isinstance(a, (List, Vector)) and isinstance(b, (List, Vector)):
        if len(a) != len(b):
            return False
        return all(equals(x, y) for x, y in zip(a, b))
    if isinstance(a, Map) and isinstance(b, Map):
        if len(a) != len(b):
            return False
        return all(
            equals(ka, kb) and equals(va, vb)
            for (ka, va), (kb, vb) in zip(a.items(), b.items())
        )
    return False


def map_key(value: Expr) -> object:
    """Hashable stand-in for `value` that agrees with `equals`."""
    if isinstance(value, (List, Vector)):
        return ("seq", tuple(map_key(x) for x in value))
    if isinstance(value, Map):
        return ("map", tuple((map_key(k), map_key(v)) for k, v in value.items()))
    # numbers, strings, symbols and callables hash as themselves
    return value
