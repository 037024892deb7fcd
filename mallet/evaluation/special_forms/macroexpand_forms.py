"""Special form exposing the macro expander to Lisp code.

(macroexpand form): expand head-position macro calls to a fixpoint and return
the expansion without evaluating it. The argument itself is not evaluated.
"""

from mallet import SExpression, EvaluatorFn
from mallet.errors import MalletArityError
from mallet.evaluation.macros import macroexpand
from mallet.types.environment import Environment


def macroexpand_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
):
    if len(tail) != 1:
        raise MalletArityError("macroexpand expects exactly 1 argument")
    return macroexpand(tail[0], env, evaluate_fn)
