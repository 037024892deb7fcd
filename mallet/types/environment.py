"""Runtime environment for Mallet.

The Environment stores bindings of symbol names to evaluated Lisp values and
supports nested lexical scopes via an `outer` link. Closures keep the
Environment they were defined in alive; `let*` and function calls create child
scopes chained to it.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator, Mapping, Optional

from mallet import LispValue
from mallet.errors import MalletArityError, MalletUnboundSymbol
from mallet.types.symbol import Symbol


def _key(name: Symbol | str) -> str:
    return name.name if isinstance(name, Symbol) else name


class Environment:
    """Hierarchical mapping from symbol names to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        binds: Optional[Iterable[Symbol | str]] = None,
        exprs: Optional[Iterable[LispValue]] = None,
    ):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

        binds = list(binds or ())
        exprs = list(exprs or ())
        if len(binds) != len(exprs):
            raise MalletArityError(
                f"Cannot bind {len(binds)} names to {len(exprs)} values"
            )
        for name, value in zip(binds, exprs):
            self.set(name, value)

    def set(self, name: Symbol | str, value: LispValue) -> LispValue:
        """Bind `name` to `value` in this scope only; outer scopes are untouched."""
        self.vars[_key(name)] = value
        return value

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        key = _key(name)
        return next((env for env in self.frames() if key in env.vars), None)

    def get(self, name: Symbol | str) -> LispValue:
        """Look up the value bound to `name`, walking outward through the chain.

        Raises MalletUnboundSymbol if no scope binds it.
        """
        env = self.find(name)
        if env is None:
            raise MalletUnboundSymbol(f"'{_key(name)}' not found")
        return env.vars[_key(name)]

    def update(self, mapping: Mapping[Symbol | str, LispValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.set(k, v)

    def root(self) -> Environment:
        *_, last = self.frames()
        return last

    def frames(self) -> Iterator[Environment]:
        """This scope followed by each enclosing scope, innermost first."""
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def _frame_text(self) -> str:
        with StringIO() as out:
            out.write("{")
            out.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
            out.write("}")
            return out.getvalue()

    def __str__(self) -> str:
        text = self._frame_text()
        return text if self.outer is None else text + " -> ..."

    def __repr__(self) -> str:
        # The global frame holds every builtin; show it as a marker instead.
        parts = [
            "<root>" if env.outer is None and env is not self else env._frame_text()
            for env in self.frames()
        ]
        return f"<Environment chain: {' -> '.join(parts)}>"
