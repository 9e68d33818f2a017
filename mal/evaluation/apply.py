"""Application engine for mal.

Closures run their body as an implicit ``do`` in a fresh child of the
environment they captured; builtins are called with the caller's env and the
evaluated argument list. Anything else is not callable.
"""

from mal import Expr, EvaluatorFn
from mal.errors import NotCallableError
from mal.types.environment import Environment
from mal.types.functions import Closure, Builtin
from mal.evaluation.special_forms.do_form import do_form
from mal.printer import pr_str


def apply_closure(fn: Closure, args: list[Expr], evaluate_fn: EvaluatorFn) -> Expr:
    """Bind `args` (checking arity) and evaluate the closure body."""
    local_env = fn.extend_env(list(args))
    return do_form(fn.body, local_env, evaluate_fn)


def apply(
    head: Expr,
    args: list[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expr:
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    if isinstance(head, Builtin):
        return head(env, args)
    raise NotCallableError(f"{pr_str(head)} is not callable")
