"""Function values: host-level natives and user-defined closures.

Both implement the same application protocol, `invoke(args)`, which returns
either a final value or a TailCall for the trampoline. Natives return values
(a hosted `eval` may hand back a TailCall); closures always return a TailCall
so user recursion in tail position never grows the Python stack.
"""

from __future__ import annotations

import copy
from typing import Callable, Mapping, Optional

from mallet import LispValue, SExpression
from mallet.types.bind import bind_arguments
from mallet.types.environment import Environment
from mallet.types.nil import Nil
from mallet.types.symbol import Symbol
from mallet.types.tail_call import TailCall

NativeFn = Callable[[list[LispValue]], LispValue]


class Function:
    """Base class of every callable value."""

    __slots__ = ("is_macro", "meta")

    def __init__(self):
        self.is_macro: bool = False
        self.meta: LispValue = Nil

    def invoke(self, args: list[LispValue]) -> LispValue | TailCall:
        raise NotImplementedError

    def with_meta(self, meta: LispValue) -> Function:
        fn = copy.copy(self)
        fn.meta = meta
        return fn

    def as_macro(self) -> Function:
        fn = copy.copy(self)
        fn.is_macro = True
        return fn


class NativeFunction(Function):
    __slots__ = ("fn", "name")

    def __init__(self, fn: NativeFn, name: str = ""):
        super().__init__()
        self.fn = fn
        self.name = name or getattr(fn, "__name__", "native")

    def invoke(self, args: list[LispValue]) -> LispValue | TailCall:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<native {self.name}>"


class Closure(Function):
    """A user function capturing its parameters, body and defining environment."""

    __slots__ = ("params", "variadic", "body", "env")

    def __init__(
        self,
        params: list[Symbol],
        variadic: Optional[Symbol],
        body: SExpression,
        env: Environment,
    ):
        super().__init__()
        self.params = params
        self.variadic = variadic
        self.body = body
        self.env = env

    def invoke(self, args: list[LispValue]) -> TailCall:
        return TailCall(self.body, bind_arguments(self.params, self.variadic, args, self.env))

    def __repr__(self) -> str:
        names = " ".join(str(p) for p in self.params)
        if self.variadic is not None:
            names = f"{names} & {self.variadic}".strip()
        kind = "macro" if self.is_macro else "fn*"
        return f"<{kind} ({names})>"


def native_functions(mapping: Mapping[str, NativeFn]) -> dict[str, NativeFunction]:
    """Wrap a name -> Python callable table for registration in an Environment."""
    return {name: NativeFunction(fn, name) for name, fn in mapping.items()}
