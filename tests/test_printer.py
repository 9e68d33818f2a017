import pytest
from hypothesis import given, strategies as st

from mal.printer import pr_str
from mal.reader.parser import read
from mal.types.collections import List, Vector, Map
from mal.types.environment import Environment
from mal.types.functions import Closure, Builtin
from mal.types.nil import Nil, TRUE
from mal.types.symbol import Symbol


@pytest.mark.parametrize(
    "source",
    [
        "42",
        "-5",
        '"hello world"',
        "abc",
        ":keyword",
        "nil",
        "()",
        "(1 2 (3 4))",
        "[1 [2 3] ()]",
        '{"a" 1 :b [2 3]}',
        "{}",
        '(def! f (fn* [a & rest] (list a rest)))',
    ],
)
def test_round_trip(source):
    assert pr_str(read(source)) == source


def test_round_trip_normalizes_whitespace():
    assert pr_str(read("(  1,2\n  [ 3 ]  )")) == "(1 2 [3])"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("'a", "(quote a)"),
        ("`(a ~b ~@c)", "(quasiquote (a (unquote b) (splice-unquote c)))"),
        ("@a", "(deref a)"),
        ("^{:m 1} [x]", "(with-meta [x] {:m 1})"),
        ('{"a" 1 "b"}', '{"a" 1 "b" nil}'),
    ],
)
def test_shorthand_prints_canonical_form(source, expected):
    assert pr_str(read(source)) == expected


def test_strings_readable_and_display():
    s = 'a "quoted"\\path\nnext'
    assert pr_str(s) == '"a \\"quoted\\"\\\\path\\nnext"'
    assert pr_str(s, readable=False) == s


def test_readable_flag_propagates_into_collections():
    value = List(["a", Vector(["b"]), Map([("k", "v")])])
    assert pr_str(value) == '("a" ["b"] {"k" "v"})'
    assert pr_str(value, readable=False) == "(a [b] {k v})"


def test_numbers():
    assert pr_str(0) == "0"
    assert pr_str(0.5) == "0.5"
    assert pr_str(2.0) == "2"


def test_callables_are_opaque():
    closure = Closure([Symbol("x")], None, [Symbol("x")], Environment())
    assert pr_str(closure) == "#<function>"
    assert pr_str(Builtin("+", lambda env, args: 0)) == "#<builtin +>"


def test_symbols_print_by_name():
    assert pr_str(Nil) == "nil"
    assert pr_str(TRUE) == "true"


def test_invalid_value_is_fatal():
    with pytest.raises(TypeError):
        pr_str(object())
    with pytest.raises(TypeError):
        pr_str(None)


@given(st.integers())
def test_integer_round_trip(n):
    assert pr_str(read(str(n))) == str(n)


@given(st.text())
def test_string_round_trip(s):
    assert read(pr_str(s)) == s


@given(st.from_regex(r"[a-z*!?<>=+][a-z0-9*!?<>=+\-]*", fullmatch=True))
def test_symbol_round_trip(name):
    sym = read(name)
    assert sym is Symbol(name)
    assert pr_str(sym) == name


@pytest.mark.parametrize(
    "value,text",
    [
        (10 ** 5000, "1" + "0" * 5000),
        (-(10 ** 2500) - 7, "-1" + "0" * 2499 + "7"),
        (10 ** 2000 + 1, "1" + "0" * 1999 + "1"),
        (10 ** 1000, "1" + "0" * 1000),
    ],
    ids=["1e5000", "neg-1e2500-7", "1e2000+1", "1e1000"],
)
def test_large_integers(value, text):
    assert pr_str(value) == text
    assert read(text) == value
