"""Core evaluator for the lis interpreter.

Dispatches on the kind of expression: symbols are looked up, atoms and
procedures evaluate to themselves, and non-empty lists are either special
forms or applications.
"""

from __future__ import annotations

from lis import SExpression, LispValue
from lis.config import EvalOptions, DEFAULT_OPTIONS
from lis.errors import LisTypeError
from lis.evaluation.apply import apply
from lis.evaluation.special_forms import SPECIAL_FORMS
from lis.types.environment import Environment
from lis.types.symbol import Symbol
from lis.types.user_procedure import UserProcedure


def evaluate(
    expr: SExpression, env: Environment, options: EvalOptions | None = None
) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    if options is None:
        options = DEFAULT_OPTIONS

    match expr:
        case Symbol():
            return env.lookup(expr)

        case bool() | int() | float() | UserProcedure():
            return expr

        case []:
            return []

        case [head, *tail_args] if isinstance(expr, list):
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, options, evaluate)

            proc = evaluate(head, env, options)
            args = [evaluate(arg, env, options) for arg in tail_args]
            return apply(proc, args, env, options, evaluate)

        case _ if callable(expr):
            # builtin procedure value
            return expr

    raise LisTypeError(f"Cannot evaluate {expr!r}")
