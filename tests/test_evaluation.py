import pytest

from mal.errors import (
    EvalError,
    UnboundSymbolError,
    NotCallableError,
    SpecialFormError,
    MalTypeError,
)
from mal.evaluation.evaluator import evaluate
from mal.reader.parser import read
from mal.types.collections import List, Vector, Map
from mal.types.nil import Nil, TRUE, FALSE
from mal.types.symbol import Symbol


def run(env, source):
    return evaluate(read(source), env)


# -----------------------------------------------------
# Atoms and collections
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert run(env, "1") == 1
    assert run(env, '"hello"') == "hello"
    assert run(env, "nil") is Nil
    assert run(env, "true") is TRUE
    assert run(env, "false") is FALSE
    assert run(env, ":kw") is Symbol(":kw")


def test_empty_list_evaluates_to_itself(env):
    result = run(env, "()")
    assert isinstance(result, List)
    assert result == []


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42)
    assert run(env, "x") == 42
    with pytest.raises(UnboundSymbolError):
        run(env, "z")


def test_vector_elements_are_evaluated(env):
    result = run(env, "[1 (+ 1 1) [(* 3 1)]]")
    assert isinstance(result, Vector)
    assert result == Vector([1, 2, Vector([3])])


def test_map_keys_and_values_are_evaluated(env):
    env.define(Symbol("k"), "key")
    result = run(env, '{k (+ 1 2) "b" [(- 1)]}')
    assert isinstance(result, Map)
    assert result.items() == [("key", 3), ("b", Vector([-1]))]


def test_application_evaluates_head(env):
    assert run(env, "((fn* [a b] (+ a b)) 2 3)") == 5


# -----------------------------------------------------
# Special forms
# -----------------------------------------------------

def test_define_and_lookup(env):
    assert run(env, "(def! y 100)") == 100
    assert run(env, "y") == 100


def test_define_multiple_pairs_sequentially(env):
    assert run(env, "(def! a 1 b (+ a 1))") == 2
    assert run(env, "a") == 1
    assert run(env, "b") == 2


@pytest.mark.parametrize("source", ["(def!)", "(def! a)", "(def! a 1 b)"])
def test_define_requires_pairs(env, source):
    with pytest.raises(SpecialFormError):
        run(env, source)


def test_define_requires_symbol(env):
    with pytest.raises(MalTypeError):
        run(env, "(def! 1 2)")


def test_let_binds_sequentially(env):
    assert run(env, "(let* [a 1 b (+ a 1)] b)") == 2
    assert run(env, "(let* (a 5) a)") == 5


def test_let_evaluates_body_in_order(env):
    assert run(env, "(let* [a 1] (def! inner 10) (+ a inner))") == 11
    # the def! landed in the let* frame, not the global one
    with pytest.raises(UnboundSymbolError):
        run(env, "inner")


@pytest.mark.parametrize(
    "source",
    ["(let*)", "(let* [x 1])", "(let* [x] x)", "(let* x 1)"],
)
def test_let_shape_errors(env, source):
    with pytest.raises(SpecialFormError):
        run(env, source)


def test_let_shadowing(env):
    assert run(env, "(let* [x 1] (let* [x 2] x))") == 2
    assert run(env, "(let* [x 1] (do (let* [x 2] x) x))") == 1


def test_let_does_not_touch_global(env):
    run(env, "(def! x 1)")
    assert run(env, "(let* [x 2] x)") == 2
    assert run(env, "x") == 1


def test_do_sequencing(env):
    assert run(env, "(do (def! a 10) (def! b 20) (+ a b))") == 30
    assert run(env, "(do)") is Nil


@pytest.mark.parametrize(
    "source,expected",
    [
        ('(if 0 "yes" "no")', "yes"),
        ('(if false "yes" "no")', "no"),
        ('(if nil "yes" "no")', "no"),
        ('(if (list) "yes" "no")', "yes"),
        ('(if "" "yes" "no")', "yes"),
        ("(if true 1)", 1),
        ("(if false 1 true 2 3)", 2),
        ("(if false 1 false 2 3)", 3),
    ],
)
def test_if_truthiness(env, source, expected):
    assert run(env, source) == expected


def test_if_without_match_returns_nil(env):
    assert run(env, "(if false 1)") is Nil
    assert run(env, "(if false 1 nil 2)") is Nil


def test_if_short_circuits(env):
    assert run(env, "(if true 1 (undefined-thing))") == 1
    assert run(env, "(if false (undefined-thing) 2)") == 2


def test_if_requires_condition_and_branch(env):
    with pytest.raises(SpecialFormError):
        run(env, "(if true)")


def test_recursive_function(env):
    run(env, "(def! fact (fn* [n] (if (<= n 1) 1 (* n (fact (- n 1))))))")
    assert run(env, "(fact 5)") == 120


# -----------------------------------------------------
# Errors
# -----------------------------------------------------

def test_undefined_function(env):
    with pytest.raises(UnboundSymbolError) as exc:
        run(env, "(undefined-symbol)")
    assert "undefined-symbol" in str(exc.value)


@pytest.mark.parametrize(
    "source,message",
    [
        ("(1 2)", "1 is not callable"),
        ('("s")', '"s" is not callable'),
        ("([1] 2)", "[1] is not callable"),
        ("(nil)", "nil is not callable"),
    ],
)
def test_non_callable_application(env, source, message):
    with pytest.raises(NotCallableError) as exc:
        run(env, source)
    assert isinstance(exc.value, EvalError)
    assert message in str(exc.value)


def test_arguments_evaluate_left_to_right(env, capsys):
    run(env, '(list (prn 1) (prn 2) (prn 3))')
    assert capsys.readouterr().out == "1\n2\n3\n"


def test_failed_definition_keeps_earlier_bindings(env):
    run(env, "(def! x 1)")
    with pytest.raises(EvalError):
        run(env, "(def! x (undefined))")
    assert run(env, "x") == 1
