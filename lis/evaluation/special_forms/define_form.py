from lis import EvaluatorFn
from lis import SExpression, LispValue
from lis.config import EvalOptions
from lis.errors import LisArityError, LisTypeError
from lis.types.environment import Environment
from lis.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame only and returns the bound value.
    """
    if len(tail) != 2:
        raise LisArityError("define requires exactly 2 arguments: (define var expr)")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise LisTypeError(f"define first argument must be a symbol, got {name!r}")
    value = evaluate_fn(val_expr, env, options)
    env.define(name, value)
    return value
