# try*/catch* handling
# Usage:
#
#   (try* (throw "boom") (catch* e e))          ; => "boom"
#   (try* (nth [] 1) (catch* e (str "got " e))) ; => "got nth: index out of range"
#
# Both channels are caught: a MalletThrow raised by `throw`, and an Error value
# returned by a failing host operation. The handler runs in a child scope with
# the payload bound, in tail position.

import logging

from mallet import EvaluatorFn
from mallet import SExpression, LispValue
from mallet.errors import MalletArityError, MalletThrow, MalletTypeError
from mallet.types.containers import List
from mallet.types.environment import Environment
from mallet.types.error import Error
from mallet.types.symbol import Symbol
from mallet.types.tail_call import TailCall

logger = logging.getLogger(__name__)

CATCH = Symbol("catch*")


def _parse_catch(clause: SExpression) -> tuple[Symbol, SExpression]:
    if not (isinstance(clause, List) and len(clause) == 3 and clause[0] == CATCH):
        raise MalletTypeError("try* expects a (catch* name handler) clause")
    name = clause[1]
    if not isinstance(name, Symbol):
        raise MalletTypeError("catch* binding must be a symbol")
    return name, clause[2]


def try_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    if len(tail) not in (1, 2):
        raise MalletArityError("try* requires an expression and an optional catch* clause")

    body_expr = tail[0]
    if len(tail) == 1:
        return TailCall(body_expr, env)

    name, handler = _parse_catch(tail[1])
    try:
        result = evaluate_fn(body_expr, env)
    except MalletThrow as ex:
        payload = ex.value
    else:
        if not isinstance(result, Error):
            return result
        payload = result.payload()

    logger.debug("catch* %s caught %r", name, payload)
    handler_env = Environment(outer=env)
    handler_env.set(name, payload)
    return TailCall(handler, handler_env)
