from lis import EvaluatorFn
from lis import SExpression, LispValue
from lis.config import EvalOptions
from lis.errors import LisArityError, LisTypeError
from lis.types.environment import Environment
from lis.types.symbol import Symbol


def set_form(
    tail: list[SExpression],
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (set! var expr)
    Overwrites an existing binding wherever it lives in the chain. Unless
    options.evaluate_set is on, the raw `expr` form is stored and returned
    without being evaluated.
    """
    if len(tail) != 2:
        raise LisArityError("set! requires exactly 2 arguments: (set! var expr)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise LisTypeError(f"set! first argument must be a symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr, env, options) if options.evaluate_set else val_expr
    env.set(var_sym, value)

    return value
