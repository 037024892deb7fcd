"""Application engine for Mallet.

Every callable goes through `apply_function`, the single place where host
errors raised during an application become Error values:

- NativeFunction: the Python callable runs now; its value is returned.
- Closure: arguments are bound in a child of the closure's environment and a
  TailCall into the body is returned for the trampoline.

`call_function` drives one application all the way to a value. Natives that
call back into user code (swap!, map, macro expansion) use it; the evaluator
itself never does, so tail calls stay flat.
"""

from __future__ import annotations

import logging

from mallet import LispValue, EvaluatorFn
from mallet.errors import MalletError, MalletTypeError
from mallet.types.error import Error
from mallet.types.function import Function
from mallet.types.tail_call import TailCall

logger = logging.getLogger(__name__)


def apply_function(fn: Function, args: list[LispValue]) -> LispValue | TailCall:
    """Invoke `fn` under the uniform protocol: a value or a TailCall."""
    try:
        if not isinstance(fn, Function):
            raise MalletTypeError(f"Cannot apply non-function {fn!r}")
        return fn.invoke(args)
    except MalletError as exc:
        logger.debug("application of %r failed: %s", fn, exc)
        return Error.from_exception(exc)


def call_function(fn: Function, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply `fn` and resolve any TailCall to a final value."""
    result = apply_function(fn, args)
    if isinstance(result, TailCall):
        return evaluate_fn(result.expr, result.env)
    return result
