from mal import EvaluatorFn
from mal import Expr
from mal.errors import SpecialFormError
from mal.types.nil import Nil, is_truthy
from mal.types.environment import Environment


def if_form(
    tail: list[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expr:
    """
    (if cond then [cond then ...] [else])
    The first truthy condition selects its branch. With an odd argument count
    the last argument is the else branch; otherwise no match yields nil.
    """
    if len(tail) < 2:
        raise SpecialFormError("if requires a condition and a then-expression")

    for cond, then in zip(tail[0::2], tail[1::2]):
        if is_truthy(evaluate_fn(cond, env)):
            return evaluate_fn(then, env)
    if len(tail) % 2 == 1:
        return evaluate_fn(tail[-1], env)
    return Nil
