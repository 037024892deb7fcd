"""Special forms: quote, quasiquote and quasiquoteexpand.

Quasiquote is expanded into ordinary code built from `cons`, `concat` and
`quote`; evaluating that code rebuilds the template with the unquoted and
spliced pieces substituted.

    `(1 ~x ~@ys 4)
    => (cons (quote 1) (cons x (concat ys (cons (quote 4) (quote ())))))
"""

from mallet import SExpression, LispValue, EvaluatorFn
from mallet.errors import MalletArityError
from mallet.types.containers import List
from mallet.types.environment import Environment
from mallet.types.predicates import is_sequential
from mallet.types.symbol import Symbol
from mallet.types.tail_call import TailCall

QUOTE = Symbol("quote")
UNQUOTE = Symbol("unquote")
SPLICE_UNQUOTE = Symbol("splice-unquote")
CONS = Symbol("cons")
CONCAT = Symbol("concat")


def _is_pair(expr: SExpression) -> bool:
    return is_sequential(expr) and len(expr) > 0


def quasiquote(expr: SExpression) -> SExpression:
    if not _is_pair(expr):
        return List([QUOTE, expr])

    head = expr[0]
    rest = List(expr[1:])
    if isinstance(expr, List) and head == UNQUOTE:
        if len(expr) != 2:
            raise MalletArityError("unquote expects exactly 1 argument")
        return expr[1]
    if _is_pair(head) and head[0] == SPLICE_UNQUOTE:
        if len(head) != 2:
            raise MalletArityError("splice-unquote expects exactly 1 argument")
        return List([CONCAT, head[1], quasiquote(rest)])
    return List([CONS, quasiquote(head), quasiquote(rest)])


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise MalletArityError("quote expects exactly 1 argument")
    return tail[0]


def quasiquote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> TailCall:
    if len(tail) != 1:
        raise MalletArityError("quasiquote expects exactly 1 argument")
    return TailCall(quasiquote(tail[0]), env)


def quasiquoteexpand_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise MalletArityError("quasiquoteexpand expects exactly 1 argument")
    return quasiquote(tail[0])
