from mal import EvaluatorFn
from mal import Expr
from mal.errors import SpecialFormError
from mal.types.bind import parse_parameters
from mal.types.environment import Environment
from mal.types.functions import Closure


def fn_form(
    tail: list[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expr:
    # (fn* [params] body...): zero or more body forms, run as an implicit do.
    # The closure keeps `env`, the defining environment, not the caller's.
    if not tail:
        raise SpecialFormError("fn* requires a parameter list: (fn* [params] body...)")

    params, rest = parse_parameters(tail[0])
    return Closure(params, rest, list(tail[1:]), env)
