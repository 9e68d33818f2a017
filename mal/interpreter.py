from __future__ import annotations

from mal import Expr
from mal.reader.parser import read
from mal.printer import pr_str
from mal.types.environment import Environment
from mal.builtin.env_builtin import register
from mal.evaluation.evaluator import evaluate


class Interpreter:
    """
    Read-eval-print over a persistent global environment.

    Builtins live in `root`; user definitions go into `env`, a child of the
    root, and survive across calls (and across failed lines).
    """

    def __init__(self):
        self.root: Environment = Environment()
        register(self.root)
        self.env: Environment = self.root.extend()

    def read(self, code: str) -> Expr:
        return read(code)

    def eval(self, code: str) -> Expr:
        """Read exactly one expression from `code` and evaluate it."""
        return evaluate(read(code), self.env)

    def print(self, value: Expr, readable: bool = True) -> str:
        return pr_str(value, readable)

    def rep(self, line: str) -> str:
        return self.print(self.eval(line))
