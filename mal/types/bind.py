from __future__ import annotations

from typing import Optional

from mal import Expr
from mal.errors import ArityError, MalTypeError
from mal.types.collections import List, Vector
from mal.types.environment import Environment
from mal.types.symbol import Symbol

REST_MARKER = Symbol("&")


def bind_symbol(env: Environment, name: Expr, value: Expr) -> Expr:
    """Shared binding step for def!, let* and closure parameters."""
    if not isinstance(name, Symbol):
        raise MalTypeError(f"Expected a symbol to bind, got {name!r}")
    return env.define(name, value)


def parse_parameters(params: Expr) -> tuple[list[Symbol], Optional[Symbol]]:
    """
    Split an fn* parameter list into fixed parameters and an optional rest name.

    The rest marker is only accepted as ``& name`` at the very end of the list.
    """
    if not isinstance(params, (List, Vector)):
        raise MalTypeError(f"fn* parameters must be a list or vector, got {params!r}")
    fixed: list[Symbol] = []
    rest: Symbol | None = None
    for i, param in enumerate(params):
        if not isinstance(param, Symbol):
            raise MalTypeError(f"fn* parameter must be a symbol, got {param!r}")
        if param is REST_MARKER:
            if i != len(params) - 2:
                raise ArityError("fn* '&' must be followed by exactly one parameter name")
            rest = params[i + 1]
            if not isinstance(rest, Symbol) or rest is REST_MARKER:
                raise ArityError("fn* '&' must be followed by exactly one parameter name")
            break
        fixed.append(param)
    return fixed, rest


def bind_arguments(
    params: list[Symbol],
    rest: Optional[Symbol],
    supplied_args: list[Expr],
    closure_env: Environment,
) -> Environment:
    """
    Bind supplied values to a closure's parameters.

    Returns a new Environment whose outer is `closure_env`. Without a rest
    parameter the argument count must match exactly; with one, it is a
    minimum and the surplus is collected into a List.
    """
    provided = len(supplied_args)
    arity = len(params)
    if rest is None and provided != arity:
        raise ArityError(f"Expected {arity} argument(s), got {provided}")
    if rest is not None and provided < arity:
        raise ArityError(f"Expected at least {arity} argument(s), got {provided}")

    local_env = closure_env.extend()
    for name, value in zip(params, supplied_args):
        bind_symbol(local_env, name, value)
    if rest is not None:
        bind_symbol(local_env, rest, List(supplied_args[arity:]))
    return local_env
