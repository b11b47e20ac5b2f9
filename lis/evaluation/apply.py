"""Application engine for lis.

Centralizes how an evaluated head is applied to evaluated arguments:
- UserProcedure: bind parameters in a fresh child env, run the body forms
  in order, return the last value.
- Builtin (a Python callable taking (env, args)): call it with a fresh
  child env of the caller.
- Anything else is not callable.
"""

import logging

from lis import LispValue, EvaluatorFn
from lis.config import EvalOptions
from lis.errors import LisNotCallable
from lis.printer import sexpr
from lis.types.environment import Environment
from lis.types.user_procedure import UserProcedure

logger = logging.getLogger(__name__)


def apply_user_procedure(
    fn: UserProcedure,
    args: list[LispValue],
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a UserProcedure.

    Parameters:
    - fn: The procedure being applied.
    - args: The already-evaluated argument values.
    - env: The caller's environment; the call frame's parent unless the
      procedure captured its own env.
    - options: Evaluation options, passed through to the body.
    - evaluate_fn: Evaluator used for the body forms.
    """
    logger.debug("call %s with %d argument(s)", fn.name, len(args))
    call_env = fn.extend_env(args, env)
    result: LispValue = []
    for form in fn.body:
        result = evaluate_fn(form, call_env, options)
    return result


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a UserProcedure or a builtin, else raise LisNotCallable."""
    if isinstance(head, UserProcedure):
        return apply_user_procedure(head, args, env, options, evaluate_fn)
    elif callable(head):
        return head(Environment(outer=env), args)
    else:
        raise LisNotCallable(f"Cannot apply non-procedure {sexpr(head)}")
