"""Callable values: user closures and native builtins."""

from __future__ import annotations

from typing import Callable, Optional

from mal import Expr
from mal.types.environment import Environment
from mal.types.symbol import Symbol


class Closure:
    """A user function: parameters, body forms and the captured defining env."""

    __slots__ = ("params", "rest", "body", "env")

    def __init__(
        self,
        params: list[Symbol],
        rest: Optional[Symbol],
        body: list[Expr],
        env: Environment,
    ):
        self.params: list[Symbol] = params
        self.rest: Symbol | None = rest
        self.body: list[Expr] = body
        self.env: Environment = env

    def extend_env(self, args: list[Expr]) -> Environment:
        """Bind `args` in a fresh child of the captured environment."""
        from mal.types.bind import bind_arguments
        return bind_arguments(self.params, self.rest, args, self.env)

    def __repr__(self) -> str:
        formals = [str(p) for p in self.params]
        if self.rest is not None:
            formals += ["&", str(self.rest)]
        return f"Closure([{' '.join(formals)}])"


class Builtin:
    """A native function called as ``fn(env, args)``."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[Environment, list[Expr]], Expr]):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[Expr]) -> Expr:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"Builtin({self.name!r})"
