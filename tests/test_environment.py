import pytest

from mallet.errors import MalletArityError, MalletUnboundSymbol
from mallet.types import Environment, Symbol


def test_set_and_get():
    env = Environment()
    assert env.set(Symbol("x"), 1) == 1
    assert env.get(Symbol("x")) == 1
    assert env.get("x") == 1


def test_inner_scope_shadows_outer():
    outer = Environment()
    outer.set(Symbol("x"), 1)
    inner = Environment(outer)
    inner.set(Symbol("x"), 2)
    assert inner.get(Symbol("x")) == 2
    assert outer.get(Symbol("x")) == 1


def test_lookup_walks_outward():
    root = Environment()
    root.set(Symbol("y"), "root")
    child = Environment(Environment(root))
    assert child.get(Symbol("y")) == "root"
    assert child.find(Symbol("y")) is root
    assert child.root() is root


def test_find_missing_returns_none():
    assert Environment().find(Symbol("nope")) is None


def test_get_unbound_raises():
    with pytest.raises(MalletUnboundSymbol, match="'nope' not found"):
        Environment().get(Symbol("nope"))


def test_binds_and_exprs():
    env = Environment(None, [Symbol("a"), Symbol("b")], [1, 2])
    assert env.get(Symbol("a")) == 1
    assert env.get(Symbol("b")) == 2


def test_binds_and_exprs_must_match():
    with pytest.raises(MalletArityError):
        Environment(None, [Symbol("a")], [])


def test_update_bulk_defines():
    env = Environment()
    env.update({"a": 1, Symbol("b"): 2})
    assert env.get("a") == 1
    assert env.get(Symbol("b")) == 2


def test_str_and_repr():
    root = Environment()
    root.set("a", 1)
    child = Environment(root)
    child.set("b", 2)
    assert str(child) == "{b: 2} -> ..."
    assert repr(child) == "<Environment chain: {b: 2} -> <root>>"
