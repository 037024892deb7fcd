"""Special forms: def! and defmacro!.

Both bind in the *current* scope only, and neither binds when evaluating the
value produced an Error; the Error is returned instead.
"""

from mallet import EvaluatorFn, SExpression, LispValue
from mallet.errors import MalletArityError, MalletTypeError
from mallet.types.environment import Environment
from mallet.types.error import Error
from mallet.types.function import Closure
from mallet.types.symbol import Symbol


def _name_and_value(form: str, tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn):
    if len(tail) != 2:
        raise MalletArityError(f"{form} requires exactly 2 arguments")
    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MalletTypeError(f"First argument to {form} must be a symbol")
    return name, evaluate_fn(val_expr, env)


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def! name value)
    Returns the bound value.
    """
    name, value = _name_and_value("def!", tail, env, evaluate_fn)
    if isinstance(value, Error):
        return value
    return env.set(name, value)


def defmacro_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defmacro! name fn-expr)
    The value must be a closure; a copy flagged as a macro is bound, so the
    original function stays callable as a function.
    """
    name, value = _name_and_value("defmacro!", tail, env, evaluate_fn)
    if isinstance(value, Error):
        return value
    if not isinstance(value, Closure):
        raise MalletTypeError("defmacro! requires a function defined with fn*")
    return env.set(name, value.as_macro())
