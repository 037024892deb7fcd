"""Atoms, metadata, symbols/keywords, throw and time builtins."""
from __future__ import annotations

import time

from mallet import LispValue
from mallet.builtin.env_builtin import single
from mallet.errors import MalletArityError, MalletThrow, MalletTypeError
from mallet.evaluation.evaluator import call_function
from mallet.types.atom import Atom
from mallet.types.containers import HashMap, List, Vector
from mallet.types.environment import Environment
from mallet.types.error import Error
from mallet.types.function import Function, native_functions
from mallet.types.symbol import Keyword, Symbol


def _atom(value: LispValue, name: str) -> Atom:
    if not isinstance(value, Atom):
        raise MalletTypeError(f"{name} expects an atom, got {value!r}")
    return value


# -------------------------------
# Atoms
# -------------------------------
def atom(expr: list[LispValue]) -> Atom:
    return Atom(single(expr, "atom"))


def deref(expr: list[LispValue]) -> LispValue:
    return _atom(single(expr, "deref"), "deref").value


def reset(expr: list[LispValue]) -> LispValue:
    if len(expr) != 2:
        raise MalletArityError("reset! requires exactly 2 arguments")
    return _atom(expr[0], "reset!").reset(expr[1])


def swap(expr: list[LispValue]) -> LispValue:
    """(swap! a f args...): set a to (f @a args...) and return the new value.

    A failing f leaves the atom unchanged and its Error is returned.
    """
    if len(expr) < 2:
        raise MalletArityError("swap! requires an atom and a function")
    a = _atom(expr[0], "swap!")
    fn = expr[1]
    if not isinstance(fn, Function):
        raise MalletTypeError(f"swap! expects a function, got {fn!r}")
    value = call_function(fn, [a.value, *expr[2:]])
    if isinstance(value, Error):
        return value
    return a.reset(value)


# -------------------------------
# Metadata
# -------------------------------
_META_CARRIERS = (List, Vector, HashMap, Function)


def meta(expr: list[LispValue]) -> LispValue:
    value = single(expr, "meta")
    if not isinstance(value, _META_CARRIERS):
        raise MalletTypeError(f"meta not supported on {value!r}")
    return value.meta


def with_meta(expr: list[LispValue]) -> LispValue:
    if len(expr) != 2:
        raise MalletArityError("with-meta requires exactly 2 arguments")
    value, m = expr
    if not isinstance(value, _META_CARRIERS):
        raise MalletTypeError(f"with-meta not supported on {value!r}")
    return value.with_meta(m)


# -------------------------------
# Symbols, keywords, throw, time
# -------------------------------
def symbol(expr: list[LispValue]) -> Symbol:
    name = single(expr, "symbol")
    if not isinstance(name, str):
        raise MalletTypeError("symbol expects a string")
    return Symbol(name)


def keyword(expr: list[LispValue]) -> Keyword:
    name = single(expr, "keyword")
    if isinstance(name, Keyword):
        return name
    if not isinstance(name, str):
        raise MalletTypeError("keyword expects a string")
    return Keyword(name)


def throw(expr: list[LispValue]) -> LispValue:
    """(throw value): unwind to the nearest try*/catch* with value as payload."""
    raise MalletThrow(single(expr, "throw"))


def time_ms(expr: list[LispValue]) -> int:
    if expr:
        raise MalletArityError("time-ms takes no arguments")
    return int(time.time() * 1000)


def register(env: Environment) -> None:
    env.update(native_functions({
        'atom': atom,
        'deref': deref,
        'reset!': reset,
        'swap!': swap,
        'meta': meta,
        'with-meta': with_meta,
        'symbol': symbol,
        'keyword': keyword,
        'throw': throw,
        'time-ms': time_ms,
    }))
