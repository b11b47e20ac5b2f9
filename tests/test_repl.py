import io

from lis import repl as repl_module
from lis.config import EvalOptions
from lis.interpreter import Interpreter


def _feed(lines, interrupt=EOFError):
    it = iter(lines)
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise interrupt
    return fake_input, prompts


def _run(lines, **kwargs):
    out, err = io.StringIO(), io.StringIO()
    interp = Interpreter(options=EvalOptions())
    fake_input, prompts = _feed(lines, **kwargs)
    repl_module.repl(interp, input_fn=fake_input, out=out, err=err, prompt="lis> ")
    return out.getvalue(), err.getvalue(), prompts, interp


def test_repl_prints_results():
    out, err, prompts, _ = _run(["(define x 10)", "(+ x 5)", "(+ 1 2.0)"])
    assert out == "10\n15\n3.0\n\n"
    assert err == ""
    assert prompts == ["lis> "] * 4


def test_repl_reports_errors_and_continues():
    out, err, _, interp = _run(["(define y 4)", "(+ y z)", ")", "(+ 1 2", "(/ 1 0)", "(+ y 1)"])
    assert "Error: Unbound variable: z" in err
    assert "Error: unexpected )" in err
    assert "Error: unexpected EOF while reading" in err
    assert "Error: integer division by zero" in err
    assert out.splitlines()[:2] == ["4", "5"]
    assert interp.eval("y") == 4


def test_repl_skips_blank_lines():
    out, err, _, _ = _run(["", "   ", "1"])
    assert out == "1\n\n"
    assert err == ""


def test_repl_stops_on_keyboard_interrupt():
    out, _, prompts, _ = _run(["(+ 1 1)"], interrupt=KeyboardInterrupt)
    assert out == "2\n\n"
    assert len(prompts) == 2


def test_repl_reports_runaway_recursion():
    out, err, _, _ = _run(["(define-func loop (n) (loop n))", "(loop 1)", "(+ 1 1)"])
    assert "Error:" in err
    assert out.endswith("2\n\n")


def test_main_uses_environment_config(monkeypatch):
    monkeypatch.delenv("LIS_CLOSURES", raising=False)
    monkeypatch.setenv("LIS_EVAL_SET", "1")
    seen = {}

    def fake_repl(interpreter):
        seen["options"] = interpreter.options

    monkeypatch.setattr(repl_module, "repl", fake_repl)
    repl_module.main()
    assert seen["options"] == EvalOptions(closures=False, evaluate_set=True)
