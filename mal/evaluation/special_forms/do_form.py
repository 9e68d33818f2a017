from mal import EvaluatorFn
from mal import Expr
from mal.types.environment import Environment
from mal.types.nil import Nil


def do_form(
    tail: list[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expr:
    result: Expr = Nil
    for e in tail:
        result = evaluate_fn(e, env)
    return result
