from mallet import EvaluatorFn
from mallet import SExpression, LispValue
from mallet.errors import MalletArityError
from mallet.types.environment import Environment
from mallet.types.error import Error
from mallet.types.nil import Nil
from mallet.types.predicates import is_truthy
from mallet.types.tail_call import TailCall


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    if len(tail) not in (2, 3):
        raise MalletArityError("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(tail[0], env)
    if isinstance(cond, Error):
        return cond

    if is_truthy(cond):
        return TailCall(tail[1], env)
    elif len(tail) > 2:
        return TailCall(tail[2], env)
    else:
        return Nil
