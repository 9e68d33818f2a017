"""Printer: render mal values back to text.

`pr_str(expr, readable=True)` is the inverse of the reader for literal
forms. In readable mode strings are quoted and re-escaped; in display mode
they are emitted verbatim.
"""

from __future__ import annotations

from mal import Expr
from mal.types.symbol import Symbol
from mal.types.collections import List, Vector, Map
from mal.types.equality import is_number
from mal.types.functions import Closure, Builtin
from mal.types.number import format_int


def _escape(s: str) -> str:
    return s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def _number(n: int | float) -> str:
    if isinstance(n, float) and n.is_integer():
        n = int(n)
    if isinstance(n, int):
        return format_int(n)
    return str(n)


def pr_str(expr: Expr, readable: bool = True) -> str:
    match expr:
        case Symbol():
            return expr.name
        case str():
            return f'"{_escape(expr)}"' if readable else expr
        case List():
            return "(" + " ".join(pr_str(e, readable) for e in expr) + ")"
        case Vector():
            return "[" + " ".join(pr_str(e, readable) for e in expr) + "]"
        case Map():
            flat = [pr_str(x, readable) for pair in expr.items() for x in pair]
            return "{" + " ".join(flat) + "}"
        case Closure():
            return "#<function>"
        case Builtin():
            return f"#<builtin {expr.name}>"
    if is_number(expr):
        return _number(expr)
    raise TypeError(f"Invalid expression {expr!r}")


def join(exprs: list[Expr], readable: bool, sep: str) -> str:
    return sep.join(pr_str(e, readable) for e in exprs)
