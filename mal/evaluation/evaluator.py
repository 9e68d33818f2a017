"""Core evaluator for the mal interpreter.

Recursive tree walk: maps and vectors evaluate their members, non-empty lists
are special forms or applications, symbols resolve through the environment
and everything else evaluates to itself. Calls recurse on the Python stack.
"""

from __future__ import annotations

from mal import Expr
from mal.types.collections import List, Vector, Map
from mal.types.environment import Environment
from mal.types.nil import SELF_EVALUATING
from mal.types.symbol import Symbol
from mal.evaluation.apply import apply
from mal.evaluation.special_forms import SPECIAL_FORMS, SpecialForm


def evaluate(expr: Expr, env: Environment) -> Expr:
    match expr:
        case Map():
            return Map((evaluate(k, env), evaluate(v, env)) for k, v in expr.items())

        case Vector():
            return Vector(evaluate(e, env) for e in expr)

        case List() if expr:
            head, *tail_args = expr
            if isinstance(head, Symbol):
                form = SpecialForm.for_symbol(head)
                if form is not None:
                    return SPECIAL_FORMS[form](tail_args, env, evaluate)
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, env, evaluate)

        case Symbol():
            # nil/true/false and keywords (:name) are self-evaluating
            if expr in SELF_EVALUATING or expr.is_keyword():
                return expr
            return env.lookup(expr)

    # --- Atoms and the empty list return as-is ---
    return expr
