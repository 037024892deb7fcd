from mallet import EvaluatorFn
from mallet import SExpression, LispValue
from mallet.errors import MalletArityError
from mallet.evaluation.special_forms.progn_form import implicit_do
from mallet.types.bind import parse_parameters
from mallet.types.environment import Environment
from mallet.types.function import Closure


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (fn* (params) body...): several body forms are an implicit do, none is nil.
    if not tail:
        raise MalletArityError("fn* requires at least a parameter list")

    names, variadic = parse_parameters(tail[0])
    return Closure(names, variadic, implicit_do(tail[1:]), env)
