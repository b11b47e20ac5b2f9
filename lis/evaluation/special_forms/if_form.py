from lis import EvaluatorFn
from lis import SExpression, LispValue
from lis.config import EvalOptions
from lis.errors import LisArityError, LisTypeError
from lis.printer import sexpr
from lis.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if test conseq alt)
    Only the selected branch is evaluated.
    """
    if len(tail) != 3:
        raise LisArityError("if requires a test, a consequent and an alternative")

    test, conseq, alt = tail
    cond = evaluate_fn(test, env, options)
    # No truthiness: the test must produce a boolean
    if not isinstance(cond, bool):
        raise LisTypeError(f"if test must be a boolean, got {sexpr(cond)}")

    return evaluate_fn(conseq if cond else alt, env, options)
