from __future__ import annotations

from typing import Optional

from mallet import LispValue, SExpression
from mallet.errors import MalletArityError, MalletTypeError
from mallet.types.containers import List, Vector
from mallet.types.environment import Environment
from mallet.types.symbol import Symbol

VARIADIC_MARKER = Symbol("&")


def parse_parameters(params: SExpression) -> tuple[list[Symbol], Optional[Symbol]]:
    """
    Split an `fn*` parameter list into positional names and the optional
    variadic name that follows `&`.

    (a b)        -> [a, b], None
    (a & rest)   -> [a], rest
    [& xs]       -> [], xs
    """
    if not isinstance(params, (List, Vector)):
        raise MalletTypeError("fn* parameters must be a list or vector")
    if not all(isinstance(p, Symbol) for p in params):
        raise MalletTypeError("fn* parameters must be symbols")

    params = list(params)
    if VARIADIC_MARKER not in params:
        return params, None

    idx = params.index(VARIADIC_MARKER)
    rest = params[idx + 1:]
    if len(rest) != 1 or rest[0] == VARIADIC_MARKER:
        raise MalletTypeError("'&' must be followed by exactly one parameter name")
    return params[:idx], rest[0]


def bind_arguments(
    names: list[Symbol],
    variadic: Optional[Symbol],
    supplied_args: list[LispValue],
    closure_env: Environment,
) -> Environment:
    """
    Single source of truth for closure argument binding.

    Returns a new Environment whose outer is the closure_env. Positional names
    require an exact match unless a variadic name absorbs the remainder as a
    List (empty when nothing remains).
    """
    supplied = list(supplied_args)
    if len(supplied) < len(names):
        raise MalletArityError("too few arguments given")
    if variadic is None and len(supplied) > len(names):
        raise MalletArityError("too many arguments given")

    local_env = Environment(closure_env, names, supplied[:len(names)])
    if variadic is not None:
        local_env.set(variadic, List(supplied[len(names):]))
    return local_env
