"""Hash-map builtins."""
from __future__ import annotations

from mallet import LispValue
from mallet.errors import MalletArityError, MalletTypeError
from mallet.types.containers import HashMap, List
from mallet.types.environment import Environment
from mallet.types.function import native_functions
from mallet.types.nil import Nil


def _hash_map(value: LispValue, name: str) -> HashMap:
    if not isinstance(value, HashMap):
        raise MalletTypeError(f"{name} expects a hash-map, got {value!r}")
    return value


def hash_map(expr: list[LispValue]) -> HashMap:
    return HashMap.from_flat(expr)


def assoc(expr: list[LispValue]) -> HashMap:
    if not expr:
        raise MalletArityError("assoc requires a hash-map")
    hm, kvs = _hash_map(expr[0], "assoc"), expr[1:]
    return hm.assoc(HashMap.from_flat(kvs).items())


def dissoc(expr: list[LispValue]) -> HashMap:
    if not expr:
        raise MalletArityError("dissoc requires a hash-map")
    return _hash_map(expr[0], "dissoc").dissoc(expr[1:])


def get(expr: list[LispValue]) -> LispValue:
    """(get m k): the value for k, or nil when m is nil or lacks k."""
    if len(expr) != 2:
        raise MalletArityError("get requires exactly 2 arguments")
    hm, key = expr
    if hm is Nil:
        return Nil
    return _hash_map(hm, "get").lookup(key)


def contains(expr: list[LispValue]) -> bool:
    if len(expr) != 2:
        raise MalletArityError("contains? requires exactly 2 arguments")
    hm, key = expr
    if hm is Nil:
        return False
    try:
        return key in _hash_map(hm, "contains?")
    except TypeError:
        return False


def keys(expr: list[LispValue]) -> List:
    if len(expr) != 1:
        raise MalletArityError("keys requires exactly 1 argument")
    return List(_hash_map(expr[0], "keys").keys())


def vals(expr: list[LispValue]) -> List:
    if len(expr) != 1:
        raise MalletArityError("vals requires exactly 1 argument")
    return List(_hash_map(expr[0], "vals").values())


def register(env: Environment) -> None:
    env.update(native_functions({
        'hash-map': hash_map,
        'assoc': assoc,
        'dissoc': dissoc,
        'get': get,
        'contains?': contains,
        'keys': keys,
        'vals': vals,
    }))
