from mallet import SExpression
from mallet.types.environment import Environment


class TailCall:
    """A pending evaluation step: evaluate `expr` under `env` next.

    Returned by special forms in tail position and by closures; consumed by
    the trampoline in mallet.evaluation.evaluator.
    """

    __slots__ = ("expr", "env")

    def __init__(self, expr: SExpression, env: Environment):
        self.expr = expr
        self.env = env

    def __repr__(self):
        return f"TailCall({self.expr!r})"
