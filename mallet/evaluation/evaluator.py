"""Core evaluator and trampoline for the Mallet interpreter.

`evaluate` is a loop: each `evaluate_step` either returns a final value or a
TailCall naming the next expression and environment. Special forms in tail
position and closure applications return TailCalls, so tail recursion runs in
constant Python stack.
"""

from __future__ import annotations

import logging

from mallet import SExpression, LispValue
from mallet.errors import MalletError, MalletUnboundSymbol
from mallet.evaluation.apply import apply_function, call_function as _call_function
from mallet.evaluation.macros import expand_1, macro_for
from mallet.evaluation.special_forms import SPECIAL_FORMS
from mallet.printer import pr_str
from mallet.types.containers import HashMap, List, Vector
from mallet.types.environment import Environment
from mallet.types.error import Error
from mallet.types.function import Function
from mallet.types.symbol import Symbol
from mallet.types.tail_call import TailCall

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Trampoline evaluator: tail-call aware evaluation.
    """
    result = evaluate_step(expr, env)
    while isinstance(result, TailCall):
        result = evaluate_step(result.expr, result.env)
    return result


def evaluate_step(expr: SExpression, env: Environment) -> LispValue | TailCall:
    """
    Core evaluator: a single step. Returns either a value or a TailCall.
    """
    match expr:
        case Symbol():
            try:
                return env.get(expr)
            except MalletUnboundSymbol as exc:
                return Error.from_exception(exc)

        case List() if expr:
            return evaluate_list(expr, env)

        case Vector():
            values = evaluate_elements(expr, env)
            return values if isinstance(values, Error) else Vector(values)

        case HashMap():
            values = evaluate_elements(expr.values(), env)
            if isinstance(values, Error):
                return values
            return HashMap(zip(expr.keys(), values))

    # --- Atoms (and the empty list) evaluate to themselves ---
    return expr


def evaluate_list(expr: List, env: Environment) -> LispValue | TailCall:
    head = expr[0]

    # --- Special forms handling ---
    if isinstance(head, Symbol) and head in SPECIAL_FORMS:
        try:
            return SPECIAL_FORMS[head](list(expr[1:]), env, evaluate)
        except MalletError as exc:
            logger.debug("special form %s failed: %s", head, exc)
            return Error.from_exception(exc)

    # --- Head-position macros expand before any argument is evaluated ---
    macro = macro_for(expr, env)
    if macro is not None:
        expanded = expand_1(macro, expr, evaluate)
        if isinstance(expanded, Error):
            return expanded
        return TailCall(expanded, env)

    values = evaluate_elements(expr, env)
    if isinstance(values, Error):
        return values

    fn, *args = values
    if not isinstance(fn, Function):
        return Error(f"{pr_str(fn)} is not a function")
    return apply_function(fn, args)


def evaluate_elements(items, env: Environment) -> list[LispValue] | Error:
    """Evaluate each item in order, stopping at the first Error."""
    values = []
    for item in items:
        value = evaluate(item, env)
        if isinstance(value, Error):
            return value
        values.append(value)
    return values


def call_function(fn: Function, args: list[LispValue]) -> LispValue:
    """Apply `fn` to already-evaluated `args` and return the final value."""
    return _call_function(fn, args, evaluate)
