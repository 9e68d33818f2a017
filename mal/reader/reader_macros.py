from __future__ import annotations

from typing import NamedTuple, TYPE_CHECKING

from mal import Expr
from mal.errors import ReadError
from mal.types.collections import List
from mal.types.symbol import Symbol

if TYPE_CHECKING:
    from mal.reader.parser import Token, TokenStream


class ReaderMacro(NamedTuple):
    """Prefix syntax expanding into ``(symbol operand...)``.

    A negative arity reads ``abs(arity)`` operands and emits them reversed,
    so ``^m x`` becomes ``(with-meta x m)``.
    """
    symbol: Symbol
    arity: int


class ReaderMacros:
    """Registry of prefix reader macros keyed by their token text."""

    def __init__(self):
        self.macros: dict[str, ReaderMacro] = {}

    def define(self, text: str, name: str, arity: int) -> None:
        self.macros[text] = ReaderMacro(Symbol(name), arity)

    def is_macro(self, text: str) -> bool:
        return text in self.macros

    def dispatch(self, token: Token, stream: TokenStream) -> Expr:
        """Read the macro's operands from `stream` and build the expansion."""
        macro = self.macros.get(token.value)
        if macro is None:
            raise ReadError(token.pos, f"Unsupported syntax {token.value}")
        operands = [stream.parse_expr() for _ in range(abs(macro.arity))]
        if macro.arity < 0:
            operands.reverse()
        return List([macro.symbol, *operands])


# -------------------------
# Single global instance
# -------------------------
reader_macros: ReaderMacros = ReaderMacros()

SPECIAL_SYNTAX: dict[str, tuple[str, int]] = {
    "'": ("quote", 1),
    "`": ("quasiquote", 1),
    "~": ("unquote", 1),
    "~@": ("splice-unquote", 1),
    "@": ("deref", 1),
    "^": ("with-meta", -2),
}

for _text, (_name, _arity) in SPECIAL_SYNTAX.items():
    reader_macros.define(_text, _name, _arity)
