import math

import pytest

from lis.builtins import add
from lis.printer import sexpr
from lis.reader.parser import parse
from lis.types.symbol import Symbol
from lis.types.user_procedure import UserProcedure


@pytest.mark.parametrize(
    "value,expected",
    [
        (3, "3"),
        (-12, "-12"),
        (3.0, "3.0"),
        (0.5, "0.5"),
        (math.inf, "inf"),
        (True, "true"),
        (False, "false"),
        (Symbol("x"), "x"),
        ([], "()"),
        ([Symbol("+"), 1, [Symbol("*"), 2.5, True]], "(+ 1 (* 2.5 true))"),
    ]
)
def test_sexpr(value, expected):
    assert sexpr(value) == expected


def test_procedures_render_as_placeholders():
    assert sexpr(add) == "function"
    assert sexpr(UserProcedure("sq", ["n"], [Symbol("n")])) == "user-function:sq"


@pytest.mark.parametrize("source", ["(a (b c) () 1 2.5 false)", "()", "(())"])
def test_rendered_lists_read_back(source):
    assert parse(sexpr(parse(source))) == parse(source)
