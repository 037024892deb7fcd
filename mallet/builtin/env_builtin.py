"""Built-in functions for the Mallet runtime environment.

This module defines integer arithmetic, comparison, equality and the
value-kind predicates exposed to Lisp code.
"""
from __future__ import annotations

from mallet import LispValue
from mallet.errors import MalletArityError, MalletTypeError, MalletZeroDivisionError
from mallet.types.atom import Atom
from mallet.types.containers import HashMap, List, Vector
from mallet.types.environment import Environment
from mallet.types.function import Function, native_functions
from mallet.types.nil import Nil
from mallet.types.predicates import is_number, is_sequential, values_equal
from mallet.types.symbol import Keyword, Symbol


def _numbers(expr: list[LispValue], name: str) -> list[int]:
    if not all(is_number(x) for x in expr):
        raise MalletTypeError(f"All arguments to {name} must be numbers")
    return expr


def single(expr: list[LispValue], name: str) -> LispValue:
    """The sole argument of a one-argument builtin."""
    if len(expr) != 1:
        raise MalletArityError(f"{name} requires exactly 1 argument")
    return expr[0]


# -------------------------------
# Equality
# -------------------------------
def equals(expr: list[LispValue]) -> bool:
    """True if all arguments are structurally equal (or zero/one arg)."""
    return all(values_equal(a, b) for a, b in zip(expr, expr[1:]))


# -------------------------------
# Arithmetic
# -------------------------------
def add(expr: list[LispValue]) -> int:
    """Return the sum of all arguments."""
    return sum(_numbers(expr, "+"))


def sub(expr: list[LispValue]) -> int:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not expr:
        raise MalletArityError("- requires at least 1 argument")
    numbers = _numbers(expr, "-")
    if len(numbers) == 1:
        return -numbers[0]
    result = numbers[0]
    for x in numbers[1:]:
        result -= x
    return result


def mul(expr: list[LispValue]) -> int:
    """Return the product of all arguments."""
    result = 1
    for x in _numbers(expr, "*"):
        result *= x
    return result


def _truncating_div(n: int, d: int) -> int:
    # Integer division rounds toward zero, not toward negative infinity.
    if d == 0:
        raise MalletZeroDivisionError("Division by zero")
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


def div(expr: list[LispValue]) -> int:
    """Divide left-to-right; with one arg returns the truncated reciprocal."""
    if not expr:
        raise MalletArityError("/ requires at least 1 argument")
    numbers = _numbers(expr, "/")
    if len(numbers) == 1:
        return _truncating_div(1, numbers[0])
    result = numbers[0]
    for x in numbers[1:]:
        result = _truncating_div(result, x)
    return result


# -------------------------------
# Comparison
# -------------------------------
def lt(expr: list[LispValue]) -> bool:
    """Chainable less-than: true if a0 < a1 < a2 ... holds for all pairs."""
    numbers = _numbers(expr, "<")
    return all(a < b for a, b in zip(numbers, numbers[1:]))


def lte(expr: list[LispValue]) -> bool:
    numbers = _numbers(expr, "<=")
    return all(a <= b for a, b in zip(numbers, numbers[1:]))


def gt(expr: list[LispValue]) -> bool:
    numbers = _numbers(expr, ">")
    return all(a > b for a, b in zip(numbers, numbers[1:]))


def gte(expr: list[LispValue]) -> bool:
    numbers = _numbers(expr, ">=")
    return all(a >= b for a, b in zip(numbers, numbers[1:]))


# -------------------------------
# Predicates
# -------------------------------
def _predicate(name: str, test):
    def check(expr: list[LispValue]) -> bool:
        return bool(test(single(expr, name)))
    check.__name__ = name
    check.__doc__ = f"({name} x)"
    return check


PREDICATES = {
    "nil?": lambda x: x is Nil,
    "true?": lambda x: x is True,
    "false?": lambda x: x is False,
    "symbol?": lambda x: isinstance(x, Symbol),
    "keyword?": lambda x: isinstance(x, Keyword),
    "string?": lambda x: isinstance(x, str),
    "number?": is_number,
    "fn?": lambda x: isinstance(x, Function) and not x.is_macro,
    "macro?": lambda x: isinstance(x, Function) and x.is_macro,
    "list?": lambda x: isinstance(x, List),
    "vector?": lambda x: isinstance(x, Vector),
    "sequential?": is_sequential,
    "map?": lambda x: isinstance(x, HashMap),
    "atom?": lambda x: isinstance(x, Atom),
}


def is_empty(expr: list[LispValue]) -> bool:
    """(empty? seq): true for an empty sequence or map, and for nil."""
    value = single(expr, "empty?")
    if value is Nil:
        return True
    if is_sequential(value) or isinstance(value, HashMap):
        return len(value) == 0
    return False


def count(expr: list[LispValue]) -> int:
    """(count seq): number of elements; 0 for nil and for non-collections."""
    value = single(expr, "count")
    if is_sequential(value) or isinstance(value, HashMap):
        return len(value)
    return 0


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    env.update(native_functions({
        '+': add,
        '-': sub,
        '*': mul,
        '/': div,
        '=': equals,
        '<': lt,
        '<=': lte,
        '>': gt,
        '>=': gte,
        'empty?': is_empty,
        'count': count,
        **{name: _predicate(name, test) for name, test in PREDICATES.items()},
    }))
