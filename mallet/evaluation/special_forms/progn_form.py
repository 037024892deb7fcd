from mallet import EvaluatorFn
from mallet import SExpression, LispValue
from mallet.types.containers import List
from mallet.types.environment import Environment
from mallet.types.error import Error
from mallet.types.nil import Nil
from mallet.types.symbol import Symbol
from mallet.types.tail_call import TailCall

DO = Symbol("do")


def implicit_do(forms: list[SExpression]) -> SExpression:
    """Body of several forms: nil for none, the form itself for one, else (do ...)."""
    if not forms:
        return Nil
    if len(forms) == 1:
        return forms[0]
    return List([DO, *forms])


def do_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    if not tail:
        return Nil
    for e in tail[:-1]:
        result = evaluate_fn(e, env)
        if isinstance(result, Error):
            return result
    return TailCall(tail[-1], env)
