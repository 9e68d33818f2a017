"""Built-in functions for the mal root environment.

Arithmetic, chained comparison, structural equality, list helpers,
predicates and the print family. Every builtin takes ``(env, args)`` with
already-evaluated arguments and checks arity and types before computing.
"""
from __future__ import annotations

from functools import wraps
from typing import Callable

from mal import Expr
from mal.errors import ArityError, EvalError, MalTypeError
from mal.printer import pr_str, join
from mal.types.collections import List, Vector, Map
from mal.types.environment import Environment
from mal.types.equality import equals as is_equal, is_number
from mal.types.functions import Builtin
from mal.types.nil import Nil, to_bool, is_truthy
from mal.types.symbol import Symbol

BuiltinFn = Callable[[Environment, list[Expr]], Expr]


# -------------------------------
# Argument checks
# -------------------------------
def _expect_arity(name: str, args: list[Expr], minimum: int, maximum: int | None = None) -> None:
    n = len(args)
    if maximum is not None and minimum == maximum and n != minimum:
        raise ArityError(f"{name} requires exactly {minimum} argument(s), got {n}")
    if n < minimum:
        raise ArityError(f"{name} requires at least {minimum} argument(s), got {n}")
    if maximum is not None and n > maximum:
        raise ArityError(f"{name} accepts at most {maximum} argument(s), got {n}")


def _expect_numbers(name: str, args: list[Expr]) -> list[int | float]:
    for i, arg in enumerate(args):
        if not is_number(arg):
            raise MalTypeError(f"{name}: argument {i} must be a number, got {pr_str(arg)}")
    return args


def _normalize(n: int | float) -> int | float:
    # one numeric type: integral results of division stay integers
    if isinstance(n, float) and n.is_integer():
        return int(n)
    return n


def _in_range(name: str) -> Callable[[BuiltinFn], BuiltinFn]:
    """Report float overflow from mixed int/float arithmetic as an EvalError."""
    def wrap(fn: BuiltinFn) -> BuiltinFn:
        @wraps(fn)
        def guarded(env: Environment, args: list[Expr]) -> Expr:
            try:
                return fn(env, args)
            except OverflowError:
                raise EvalError(f"{name}: result out of range") from None
        return guarded
    return wrap


# -------------------------------
# Arithmetic
# -------------------------------
@_in_range("+")
def add(env: Environment, args: list[Expr]) -> Expr:
    """Return the sum of all arguments (0 with none)."""
    result = 0
    for x in _expect_numbers("+", args):
        result += x
    return result


@_in_range("-")
def sub(env: Environment, args: list[Expr]) -> Expr:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    _expect_arity("-", args, 1)
    nums = _expect_numbers("-", args)
    if len(nums) == 1:
        return -nums[0]
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return result


@_in_range("*")
def mul(env: Environment, args: list[Expr]) -> Expr:
    """Return the product of all arguments (1 with none)."""
    result = 1
    for x in _expect_numbers("*", args):
        result *= x
    return result


@_in_range("/")
def div(env: Environment, args: list[Expr]) -> Expr:
    """Divide the first number by each following one; reciprocal for one arg."""
    _expect_arity("/", args, 1)
    nums = _expect_numbers("/", args)
    if len(nums) == 1:
        nums = [1, nums[0]]
    result = nums[0]
    for x in nums[1:]:
        if x == 0:
            raise EvalError("Division by zero")
        if isinstance(result, int) and isinstance(x, int) and result % x == 0:
            result = result // x
        else:
            result = _normalize(result / x)
    return result


# -------------------------------
# Comparison
# -------------------------------
def _chain(name: str, op: Callable[[Expr, Expr], bool]) -> BuiltinFn:
    def compare(env: Environment, args: list[Expr]) -> Expr:
        _expect_arity(name, args, 2)
        nums = _expect_numbers(name, args)
        return to_bool(all(op(a, b) for a, b in zip(nums, nums[1:])))
    compare.__name__ = f"compare_{name}"
    return compare


lt = _chain("<", lambda a, b: a < b)
lte = _chain("<=", lambda a, b: a <= b)
gt = _chain(">", lambda a, b: a > b)
gte = _chain(">=", lambda a, b: a >= b)


def equals(env: Environment, args: list[Expr]) -> Expr:
    """true if every adjacent pair of arguments is structurally equal."""
    _expect_arity("=", args, 2)
    return to_bool(all(is_equal(a, b) for a, b in zip(args, args[1:])))


# -------------------------------
# Lists and predicates
# -------------------------------
def list_builtin(env: Environment, args: list[Expr]) -> Expr:
    return List(args)


def is_list(env: Environment, args: list[Expr]) -> Expr:
    _expect_arity("list?", args, 1, 1)
    return to_bool(isinstance(args[0], List))


def _size(value: Expr) -> int:
    if isinstance(value, (List, Vector, Map)):
        return len(value)
    if value is Nil:
        return 0
    return 1


def count(env: Environment, args: list[Expr]) -> Expr:
    """Size of a sequence or map; 0 for nil and 1 for any other value."""
    _expect_arity("count", args, 1, 1)
    return _size(args[0])


def is_empty(env: Environment, args: list[Expr]) -> Expr:
    _expect_arity("empty?", args, 1, 1)
    return to_bool(_size(args[0]) == 0)


def logical_not(env: Environment, args: list[Expr]) -> Expr:
    _expect_arity("not", args, 1, 1)
    return to_bool(not is_truthy(args[0]))


# -------------------------------
# Printing
# -------------------------------
def pr_str_builtin(env: Environment, args: list[Expr]) -> Expr:
    """Readable renderings joined by a space."""
    return join(args, readable=True, sep=" ")


def str_builtin(env: Environment, args: list[Expr]) -> Expr:
    """Display renderings concatenated."""
    return join(args, readable=False, sep="")


def prn(env: Environment, args: list[Expr]) -> Expr:
    print(join(args, readable=True, sep=" "))
    return Nil


def println(env: Environment, args: list[Expr]) -> Expr:
    print(join(args, readable=False, sep=" "))
    return Nil


BUILTINS: dict[str, BuiltinFn] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "=": equals,
    "list": list_builtin,
    "list?": is_list,
    "count": count,
    "empty?": is_empty,
    "not": logical_not,
    "pr-str": pr_str_builtin,
    "str": str_builtin,
    "prn": prn,
    "println": println,
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
