from mal.types.symbol import Symbol, SymbolTable, SYMBOLS
from mal.types.nil import Nil, TRUE, FALSE, is_truthy, to_bool
from mal.types.collections import List, Vector, Map
from mal.types.equality import equals, is_number
from mal.types.environment import Environment
from mal.types.functions import Closure, Builtin

__all__ = [
    "Symbol",
    "SymbolTable",
    "SYMBOLS",
    "Nil",
    "TRUE",
    "FALSE",
    "is_truthy",
    "to_bool",
    "List",
    "Vector",
    "Map",
    "equals",
    "is_number",
    "Environment",
    "Closure",
    "Builtin",
]
