# Core type aliases for the lis data model.
# Plain Python types represent both code (forms) and runtime values:
# int, float, bool, list and Symbol. Procedures are Python callables
# (builtins) or UserProcedure instances.
#
# Naming guidance:
# - SExpression: reader/special form code, denotes syntactic forms.
# - LispValue:  evaluator/runtime code, denotes evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type, handed to special forms
EvaluatorFn = Callable[..., LispValue]
