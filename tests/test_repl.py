import io

import pytest

from mal import config
from mal.__main__ import main, build_parser
from mal.interpreter import Interpreter
from mal.repl import Repl
from mal.types.symbol import Symbol


@pytest.fixture
def streams():
    return io.StringIO(), io.StringIO()


@pytest.fixture
def repl(streams):
    out, err = streams
    return Repl(Interpreter(), stdout=out, stderr=err, history_file=None)


def test_rep_prints_readably(interp):
    assert interp.rep('(str "a" "b")') == '"ab"'
    assert interp.rep("[1 (+ 1 1)]") == "[1 2]"


def test_interpreter_keeps_global_bindings(interp):
    interp.eval("(def! counter 1)")
    interp.eval("(def! counter (+ counter 1))")
    assert interp.eval("counter") == 2
    # builtins live in the root, user bindings in the global child
    assert Symbol("counter") in interp.env.vars
    assert Symbol("counter") not in interp.root.vars


def test_global_can_shadow_builtin_without_touching_root(interp):
    interp.eval("(def! + -)")
    assert interp.eval("(+ 5 2)") == 3
    assert interp.root.lookup(Symbol("+")).name == "+"


def test_lexical_closure_across_lines(rep):
    rep("(def! f (let* [x 1] (fn* [] x)))")
    assert rep("(let* [x 2] (f))") == "1"


def test_handle_line_writes_result(repl, streams):
    out, err = streams
    repl.handle_line("(def! x 10)")
    repl.handle_line("(+ x 1)")
    assert out.getvalue() == "10\n11\n"
    assert err.getvalue() == ""


def test_eval_error_is_reported_and_loop_continues(repl, streams):
    out, err = streams
    repl.handle_line("(def! x 1)")
    repl.handle_line("(undefined-symbol)")
    repl.handle_line("x")
    assert err.getvalue() == "EvalError : 'undefined-symbol' not found\n"
    assert out.getvalue() == "1\n1\n"


def test_large_results_are_printed(repl, streams):
    out, err = streams
    repl.handle_line("(def! sq (fn* [n k] (if (= k 0) n (sq (* n n) (- k 1)))))")
    repl.handle_line("(sq 10 14)")
    repl.handle_line("(+ 1 1)")
    assert err.getvalue() == ""
    assert out.getvalue().splitlines()[1:] == ["1" + "0" * 2 ** 14, "2"]


def test_overflow_is_reported_and_loop_continues(repl, streams):
    out, err = streams
    repl.handle_line("(/ " + "1" * 400 + " 7)")
    repl.handle_line("(+ 1 1)")
    assert err.getvalue() == "EvalError : /: result out of range\n"
    assert out.getvalue() == "2\n"


def test_read_error_is_reported(repl, streams):
    _, err = streams
    repl.handle_line("(1 2")
    assert err.getvalue() == "ReadError : Expected ), got end of input at position 4\n"


def test_trailing_input_is_a_read_error(repl, streams):
    out, err = streams
    repl.handle_line("1 2")
    assert out.getvalue() == ""
    assert err.getvalue().startswith("ReadError : Expected end of input, got 2")


def test_blank_lines_are_skipped(repl, streams):
    out, err = streams
    repl.handle_line("   ")
    repl.handle_line("")
    assert out.getvalue() == ""
    assert err.getvalue() == ""


def test_run_reads_piped_input(streams):
    out, err = streams
    stdin = io.StringIO("(def! a 1)\n(+ a 1)\n(a)\n\"done\"\n")
    code = Repl(stdin=stdin, stdout=out, stderr=err).run()
    assert code == 0
    assert out.getvalue() == '1\n2\n"done"\n'
    assert err.getvalue() == "EvalError : 1 is not callable\n"


def test_main_runs_repl_over_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(prn :hi)\n(* 6 7)\n"))
    assert main(["--no-history"]) == 0
    assert capsys.readouterr().out == ":hi\nnil\n42\n"


def test_cli_options():
    args = build_parser().parse_args(["--prompt", "> ", "-v"])
    assert args.prompt == "> "
    assert args.verbose
    assert not args.no_history


def test_config_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("MAL_HISTORY_FILE", str(tmp_path / "hist"))
    monkeypatch.setenv("MAL_HISTORY_SIZE", "7")
    monkeypatch.setenv("MAL_PROMPT", "mal> ")
    assert config.get_history_file() == tmp_path / "hist"
    assert config.get_history_size() == 7
    assert config.get_prompt() == "mal> "


def test_config_defaults(monkeypatch, tmp_path):
    for var in ("MAL_HISTORY_FILE", "MAL_HISTORY_SIZE", "MAL_PROMPT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    assert config.get_history_file() == tmp_path / ".mal-history"
    assert config.get_history_size() == 100
    assert config.get_prompt() == "user> "
    monkeypatch.setenv("MAL_HISTORY_SIZE", "lots")
    assert config.get_history_size() == 100
