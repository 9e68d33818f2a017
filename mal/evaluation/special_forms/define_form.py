from mal import EvaluatorFn
from mal import Expr
from mal.errors import SpecialFormError
from mal.types.bind import bind_symbol
from mal.types.environment import Environment


def define_form(
    tail: list[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expr:
    """
    (def! name value [name value ...])
    Each value is evaluated and bound in the current frame before the next
    pair, so later values can see earlier names. Returns the last value.
    """
    if not tail or len(tail) % 2 != 0:
        raise SpecialFormError("def! expects symbol/value pairs: (def! name value ...)")

    value: Expr = None
    for name, val_expr in zip(tail[::2], tail[1::2]):
        value = bind_symbol(env, name, evaluate_fn(val_expr, env))
    return value
