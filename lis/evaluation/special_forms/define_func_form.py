from lis import EvaluatorFn
from lis import SExpression, LispValue
from lis.config import EvalOptions
from lis.errors import LisArityError, LisTypeError
from lis.types.environment import Environment
from lis.types.symbol import Symbol
from lis.types.user_procedure import UserProcedure


def define_func_form(
    tail: list[SExpression],
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define-func name (param ...) body ...)
    The body forms are stored unevaluated; calls evaluate them in order and
    return the value of the last one.
    """
    if len(tail) < 3:
        raise LisArityError(
            "define-func requires a name, a parameter list and at least one body form"
        )

    name, params, *body = tail
    if not isinstance(name, Symbol):
        raise LisTypeError(f"define-func name must be a symbol, got {name!r}")
    if not isinstance(params, list):
        raise LisTypeError(f"define-func parameters must be a list, got {params!r}")
    for param in params:
        if not isinstance(param, Symbol):
            raise LisTypeError(f"define-func parameter must be a symbol, got {param!r}")

    proc = UserProcedure(
        name.name,
        [p.name for p in params],
        list(body),
        env if options.closures else None,
    )
    env.define(name, proc)
    return proc
