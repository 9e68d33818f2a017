from __future__ import annotations

"""
Line-based indexer for mal documents.

Source is line oriented, like the REPL: every non-blank line holds exactly
one expression. Each line is read (never evaluated) to collect:
- read errors, with the column the reader reported
- top-level definitions: (def! name value ...)
"""

from dataclasses import dataclass, field
from typing import Dict, List

from mal.errors import ReadError
from mal.reader.parser import lex, read, TokenKind
from mal.types.collections import List as MalList
from mal.types.environment import Environment
from mal.types.symbol import Symbol
from mal.builtin.env_builtin import register
from mal.completion import candidates
from mal.evaluation.special_forms import SpecialForm

DEF = SpecialForm.DEF.symbol
FN = SpecialForm.FN.symbol


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class LineError:
    line: int
    col: int
    message: str


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    errors: List[LineError] = field(default_factory=list)


def _is_blank(line: str) -> bool:
    # whitespace, commas and comments only
    return next(lex(line)).kind is TokenKind.END


def _definition_kind(value) -> str:
    if isinstance(value, MalList) and value and value[0] is FN:
        return "function"
    return "var"


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    for lineno, line in enumerate(text.splitlines()):
        try:
            if _is_blank(line):
                continue
            expr = read(line)
        except ReadError as ex:
            idx.errors.append(LineError(lineno, min(ex.position, len(line)), str(ex)))
            continue

        if not (isinstance(expr, MalList) and expr and expr[0] is DEF):
            continue
        pairs = expr[1:]
        for name, value in zip(pairs[::2], pairs[1::2]):
            if isinstance(name, Symbol):
                col = max(line.find(name.name), 0)
                idx.symbols[name.name] = SymbolDef(name.name, _definition_kind(value), lineno, col)
    return idx


_BUILTIN_ENV: Environment | None = None


def builtin_env() -> Environment:
    """Root environment with builtins only, shared by all documents."""
    global _BUILTIN_ENV
    if _BUILTIN_ENV is None:
        _BUILTIN_ENV = Environment()
        register(_BUILTIN_ENV)
    return _BUILTIN_ENV


def completion_names(idx: DocumentIndex, prefix: str = "") -> list[str]:
    """Builtins, special forms and document definitions starting with `prefix`."""
    env = builtin_env().extend()
    for name in idx.symbols:
        env.define(Symbol(name), None)
    return candidates(prefix, env, at_head=True)
