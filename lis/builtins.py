"""Built-in procedures for the lis root environment.

Every builtin takes exactly two numeric arguments. If either argument is a
float both are treated as floats; otherwise both are integers. Comparisons
always compare as floats and return a bool.
"""
from __future__ import annotations

import math
import operator
from typing import Callable

from lis import LispValue
from lis.errors import LisArityError, LisTypeError
from lis.printer import sexpr
from lis.types.environment import Environment
from lis.types.symbol import Symbol


def wrap_int64(n: int) -> int:
    """Reduce `n` to a signed 64-bit integer with two's complement wrap-around."""
    return ((n + 2**63) % 2**64) - 2**63


def _is_number(value: LispValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _operands(name: str, args: list[LispValue]) -> tuple[LispValue, LispValue]:
    if len(args) != 2:
        raise LisArityError(f"{name} requires exactly 2 arguments, got {len(args)}")
    a, b = args
    for arg in (a, b):
        if not _is_number(arg):
            raise LisTypeError(f"All arguments to {name} must be numbers, got {sexpr(arg)}")
    return a, b


def _is_float(*values: LispValue) -> bool:
    return any(isinstance(v, float) for v in values)


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> LispValue:
    a, b = _operands("+", args)
    if _is_float(a, b):
        return float(a) + float(b)
    return wrap_int64(a + b)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    a, b = _operands("-", args)
    if _is_float(a, b):
        return float(a) - float(b)
    return wrap_int64(a - b)


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    a, b = _operands("*", args)
    if _is_float(a, b):
        return float(a) * float(b)
    return wrap_int64(a * b)


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Float division follows IEEE 754; integer division truncates toward zero.

    Integer division by zero raises ZeroDivisionError.
    """
    a, b = _operands("/", args)
    if _is_float(a, b):
        x, y = float(a), float(b)
        if y == 0.0:
            if x == 0.0 or math.isnan(x):
                return math.nan
            return math.copysign(math.inf, x) * math.copysign(1.0, y)
        return x / y
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    q = abs(a) // abs(b)
    return wrap_int64(q if (a < 0) == (b < 0) else -q)


# -------------------------------
# Comparison
# -------------------------------
def _comparison(name: str, op: Callable[[float, float], bool]):
    def compare(env: Environment, args: list[LispValue]) -> bool:
        a, b = _operands(name, args)
        return op(float(a), float(b))

    compare.__name__ = f"compare_{op.__name__}"
    return compare


gt = _comparison(">", operator.gt)
lt = _comparison("<", operator.lt)
eq = _comparison("==", operator.eq)


# -------------------------------
# Registration
# -------------------------------
BUILTINS = {
    Symbol('+'): add,
    Symbol('-'): sub,
    Symbol('*'): mul,
    Symbol('/'): div,
    Symbol('>'): gt,
    Symbol('<'): lt,
    Symbol('=='): eq,
}


def register(env: Environment) -> None:
    env.update(BUILTINS)
