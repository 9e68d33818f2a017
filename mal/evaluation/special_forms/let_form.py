from mal import EvaluatorFn
from mal import Expr
from mal.errors import SpecialFormError
from mal.types.bind import bind_symbol
from mal.types.collections import List, Vector
from mal.types.environment import Environment
from mal.evaluation.special_forms.do_form import do_form


def let_form(
    tail: list[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expr:
    """
    (let* [name value ...] body...)
    Bindings are made one at a time in a new child frame; the body runs there.
    """
    if len(tail) < 2:
        raise SpecialFormError("let* expects a binding list and a body: (let* [name value ...] body...)")

    bindings, body = tail[0], tail[1:]
    if not isinstance(bindings, (List, Vector)) or len(bindings) % 2 != 0:
        raise SpecialFormError("let* bindings must be a list or vector of symbol/value pairs")

    local_env = env.extend()
    for name, val_expr in zip(bindings[::2], bindings[1::2]):
        bind_symbol(local_env, name, evaluate_fn(val_expr, local_env))
    return do_form(body, local_env, evaluate_fn)
