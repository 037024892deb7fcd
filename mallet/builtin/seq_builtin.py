"""Sequence builtins: construction, access, cons/concat and higher-order helpers."""
from __future__ import annotations

from mallet import LispValue
from mallet.errors import MalletArityError, MalletIndexError, MalletTypeError
from mallet.builtin.env_builtin import single
from mallet.evaluation.apply import apply_function
from mallet.evaluation.evaluator import call_function
from mallet.types.containers import List, Vector
from mallet.types.environment import Environment
from mallet.types.error import Error
from mallet.types.function import Function, native_functions
from mallet.types.nil import Nil
from mallet.types.predicates import is_sequential
from mallet.types.tail_call import TailCall


def _as_sequence(value: LispValue, name: str) -> list[LispValue]:
    """Elements of a list, vector or nil (treated as empty)."""
    if value is Nil:
        return []
    if not is_sequential(value):
        raise MalletTypeError(f"{name} expects a list or vector, got {value!r}")
    return value


def _function(value: LispValue, name: str) -> Function:
    if not isinstance(value, Function):
        raise MalletTypeError(f"{name} expects a function, got {value!r}")
    return value


def list_builtin(expr: list[LispValue]) -> List:
    return List(expr)


def vector(expr: list[LispValue]) -> Vector:
    return Vector(expr)


def vec(expr: list[LispValue]) -> Vector:
    return Vector(_as_sequence(single(expr, "vec"), "vec"))


def cons(expr: list[LispValue]) -> List:
    if len(expr) != 2:
        raise MalletArityError("cons requires exactly 2 arguments")
    head, tail = expr
    return List([head, *_as_sequence(tail, "cons")])


def concat(expr: list[LispValue]) -> List:
    result = List()
    for seq in expr:
        result.extend(_as_sequence(seq, "concat"))
    return result


def nth(expr: list[LispValue]) -> LispValue:
    if len(expr) != 2:
        raise MalletArityError("nth requires exactly 2 arguments")
    seq, idx = _as_sequence(expr[0], "nth"), expr[1]
    if not isinstance(idx, int) or isinstance(idx, bool):
        raise MalletTypeError("nth index must be a number")
    if not 0 <= idx < len(seq):
        raise MalletIndexError("nth: index out of range")
    return seq[idx]


def first(expr: list[LispValue]) -> LispValue:
    seq = _as_sequence(single(expr, "first"), "first")
    return seq[0] if seq else Nil


def rest(expr: list[LispValue]) -> List:
    seq = _as_sequence(single(expr, "rest"), "rest")
    return List(seq[1:])


def conj(expr: list[LispValue]) -> LispValue:
    """(conj coll x...): prepend to lists (in reverse order), append to vectors."""
    if not expr:
        raise MalletArityError("conj requires at least 1 argument")
    coll, items = expr[0], expr[1:]
    if isinstance(coll, Vector):
        return Vector([*coll, *items], coll.meta)
    if isinstance(coll, List) or coll is Nil:
        return List([*reversed(items), *_as_sequence(coll, "conj")])
    raise MalletTypeError(f"conj expects a list or vector, got {coll!r}")


def seq(expr: list[LispValue]) -> LispValue:
    """(seq x): a list of the elements of x, or nil when x is empty."""
    value = single(expr, "seq")
    if isinstance(value, str):
        return List(value) if value else Nil
    items = _as_sequence(value, "seq")
    return List(items) if items else Nil


def apply(expr: list[LispValue]) -> LispValue | TailCall:
    """(apply f a b... seq): call f with the middle arguments followed by seq's elements."""
    if len(expr) < 2:
        raise MalletArityError("apply requires at least 2 arguments: func and list of args")
    fn = _function(expr[0], "apply")
    args = [*expr[1:-1], *_as_sequence(expr[-1], "apply")]
    return apply_function(fn, args)


def map_builtin(expr: list[LispValue]) -> LispValue:
    """(map f seq): a list of f applied to each element; stops at the first Error."""
    if len(expr) != 2:
        raise MalletArityError("map requires exactly 2 arguments")
    fn = _function(expr[0], "map")
    result = List()
    for item in _as_sequence(expr[1], "map"):
        value = call_function(fn, [item])
        if isinstance(value, Error):
            return value
        result.append(value)
    return result


def register(env: Environment) -> None:
    env.update(native_functions({
        'list': list_builtin,
        'vector': vector,
        'vec': vec,
        'cons': cons,
        'concat': concat,
        'nth': nth,
        'first': first,
        'rest': rest,
        'conj': conj,
        'seq': seq,
        'apply': apply,
        'map': map_builtin,
    }))
