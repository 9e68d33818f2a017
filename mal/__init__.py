# Core type aliases for mal's data model.
# Forms and runtime values share one representation: int for numbers, str for
# strings, interned Symbol objects, and the List/Vector/Map/Closure/Builtin
# classes from mal.types. The reader produces Expr values and the evaluator
# returns them.

from typing import Any, Callable

# Runtime value alias
Expr = Any

# Evaluator function type used by special forms and apply
EvaluatorFn = Callable[..., Expr]
