import pytest

from lis.errors import LisTypeError, LisUnboundVariable
from lis.types.environment import Environment
from lis.types.symbol import Symbol


def test_define_and_lookup():
    env = Environment()
    env.define(Symbol("a"), 1)
    assert env.lookup(Symbol("a")) == 1


def test_last_write_wins():
    env = Environment()
    env.define(Symbol("a"), 1)
    env.define(Symbol("a"), 2)
    assert env.lookup(Symbol("a")) == 2
    assert len(env.vars) == 1


def test_lookup_walks_parents():
    root = Environment()
    root.define(Symbol("a"), 1)
    child = Environment(outer=Environment(outer=root))
    assert child.lookup(Symbol("a")) == 1
    assert child.find(Symbol("a")) is root


def test_child_define_shadows_without_touching_parent():
    root = Environment()
    root.define(Symbol("a"), 1)
    child = Environment(outer=root)
    child.define(Symbol("a"), 2)
    assert child.lookup(Symbol("a")) == 2
    assert root.lookup(Symbol("a")) == 1


def test_set_updates_owning_frame():
    root = Environment()
    root.define(Symbol("a"), 1)
    child = Environment(outer=root)
    child.set(Symbol("a"), 5)
    assert root.vars[Symbol("a")] == 5
    assert Symbol("a") not in child.vars


def test_unbound():
    env = Environment(outer=Environment())
    with pytest.raises(LisUnboundVariable):
        env.lookup(Symbol("missing"))
    with pytest.raises(LisUnboundVariable):
        env.set(Symbol("missing"), 1)
    assert env.find(Symbol("missing")) is None


def test_define_requires_symbol():
    with pytest.raises(LisTypeError):
        Environment().define("a", 1)


def test_update_defines_each_binding_in_current_frame():
    root = Environment()
    env = Environment(outer=root)
    env.update({Symbol("a"): 1, Symbol("b"): 2})
    assert env.vars == {Symbol("a"): 1, Symbol("b"): 2}
    assert root.vars == {}


def test_symbols_are_interned_and_hashable():
    assert Symbol("x") == Symbol("x")
    assert Symbol("x") != "x"
    assert hash(Symbol("x")) == hash(Symbol("x"))
    assert repr(Symbol("x")) == "Symbol('x')"


def test_symbol_name_is_interned():
    a = Symbol("".join(["lo", "ng-name"]))
    b = Symbol("long-name")
    assert a.name == "long-name"
    assert a.name is b.name
    assert str(a) == "long-name"
