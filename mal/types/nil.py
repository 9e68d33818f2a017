from __future__ import annotations

from mal.types.symbol import Symbol

# nil, true and false are ordinary interned symbols that evaluate to themselves.
Nil = Symbol("nil")
TRUE = Symbol("true")
FALSE = Symbol("false")

SELF_EVALUATING = frozenset((Nil, TRUE, FALSE))


def is_truthy(value) -> bool:
    """Everything except nil and false is true, including 0 and empty collections."""
    return value is not Nil and value is not FALSE


def to_bool(flag: bool) -> Symbol:
    return TRUE if flag else FALSE
