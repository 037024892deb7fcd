"""Value-kind predicates and structural equality shared by the evaluator and builtins."""

from __future__ import annotations

from mallet import LispValue
from mallet.types.containers import HashMap, List, Vector
from mallet.types.nil import Nil


def is_truthy(value: LispValue) -> bool:
    """Only `nil` and `false` are falsy."""
    return not (value is Nil or value is False)


def is_sequential(value: LispValue) -> bool:
    return isinstance(value, (List, Vector))


def is_number(value: LispValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def values_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality for Lisp values.

    Lists and vectors compare element-wise with each other; hash-maps compare
    their key and value sequences; booleans never equal numbers; atoms and
    functions compare by identity.
    """
    if a is b:
        return True
    if is_sequential(a) and is_sequential(b):
        if len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, HashMap) and isinstance(b, HashMap):
        if len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(a.keys(), b.keys())) and all(
            values_equal(x, y) for x, y in zip(a.values(), b.values())
        )
    if type(a) != type(b):
        return False
    return a == b
