from mallet import EvaluatorFn
from mallet import SExpression, LispValue
from mallet.errors import MalletArityError, MalletTypeError
from mallet.evaluation.special_forms.progn_form import implicit_do
from mallet.types.containers import List, Vector
from mallet.types.environment import Environment
from mallet.types.error import Error
from mallet.types.symbol import Symbol
from mallet.types.tail_call import TailCall


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    """
    (let* (name1 expr1 name2 expr2 ...) body...)
    Bindings are evaluated in order inside the new scope, so each expression
    sees the names bound before it.
    """
    if not tail:
        raise MalletArityError("let* requires a binding list")

    bindings = tail[0]
    if not isinstance(bindings, (List, Vector)):
        raise MalletTypeError("let* bindings must be a list or vector")
    if len(bindings) % 2 != 0:
        raise MalletArityError("let* requires an even number of binding forms")

    let_env = Environment(outer=env)
    for name, val_expr in zip(bindings[::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise MalletTypeError(f"let* binding name must be a symbol, got {name!r}")
        value = evaluate_fn(val_expr, let_env)
        if isinstance(value, Error):
            return value
        let_env.set(name, value)

    return TailCall(implicit_do(tail[1:]), let_env)
