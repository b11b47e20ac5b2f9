from __future__ import annotations

from lis import LispValue
from lis.builtins import register
from lis.config import EvalOptions
from lis.evaluation.evaluator import evaluate
from lis.printer import sexpr
from lis.reader.parser import parse
from lis.types.environment import Environment


class Interpreter:
    """
    Owns the root Environment for a session and evaluates one form per call.
    Bindings persist across calls, including those made before a failure.
    """

    def __init__(self, options: EvalOptions | None = None, env: Environment | None = None):
        self.options: EvalOptions = options if options is not None else EvalOptions.from_env()
        if env is None:
            env = Environment()
            register(env)
        self.env: Environment = env

    def eval(self, code: str) -> LispValue:
        """Parse the first form in `code` and evaluate it in the root env."""
        return evaluate(parse(code), self.env, self.options)

    def eval_to_string(self, code: str) -> str:
        return sexpr(self.eval(code))
