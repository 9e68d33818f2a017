from __future__ import annotations


class Symbol:
    """Interned identifier.

    ``Symbol(name)`` always returns the single instance registered for that
    spelling, so symbols compare (and hash) by identity.
    """

    __slots__ = ("id", "name", "__weakref__")

    def __new__(cls, name: str) -> Symbol:
        return SYMBOLS.intern(name)

    @classmethod
    def _create(cls, ident: int, name: str) -> Symbol:
        sym = object.__new__(cls)
        sym.id = ident
        sym.name = name
        return sym

    def is_keyword(self) -> bool:
        return self.name.startswith(":")

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class SymbolTable:
    """Process-wide string <-> Symbol interner."""

    def __init__(self):
        self._by_name: dict[str, Symbol] = {}
        self._by_id: list[Symbol] = []

    def intern(self, name: str) -> Symbol:
        if not isinstance(name, str):
            raise TypeError(f"Symbol name must be a str, got {type(name).__name__}")
        sym = self._by_name.get(name)
        if sym is None:
            sym = Symbol._create(len(self._by_id), name)
            self._by_name[name] = sym
            self._by_id.append(sym)
        return sym

    def name_of(self, ident: int) -> str:
        return self._by_id[ident].name

    def __contains__(self, name: str) -> bool:
        return name in self._by_name


# Single global instance
SYMBOLS: SymbolTable = SymbolTable()
