"""Runtime environment for mal.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Frames are only ever written through their
own `define`; a child never mutates its ancestors.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from mal import Expr
from mal.errors import MalTypeError, UnboundSymbolError
from mal.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to mal values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, Expr] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: Expr) -> Expr:
        """Bind `name` to `value` in this frame and return `value`.

        Raises MalTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise MalTypeError(f"Cannot bind non-symbol {name!r}")
        self.vars[name] = value
        return value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> Expr:
        """Look up the value bound to `name`, walking outward.

        Raises UnboundSymbolError if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundSymbolError(str(name))
        return env.vars[name]

    def extend(self) -> Environment:
        """Create a child frame whose parent is this one."""
        return Environment(outer=self)

    def update(self, mapping: dict[Symbol, Expr]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def names(self) -> list[str]:
        """Names bound anywhere in the chain, innermost first, without duplicates."""
        seen: dict[str, None] = {}
        env: Optional[Environment] = self
        while env is not None:
            for sym in env.vars:
                seen.setdefault(sym.name, None)
            env = env.outer
        return list(seen)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                frame = StringIO()
                env._write_vars(frame)
                chain.append(frame.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
