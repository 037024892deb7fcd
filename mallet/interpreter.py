"""Interpreter: owns a global environment and the read/eval/print entry points."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from mallet import LispValue, SExpression
from mallet.builtin import register
from mallet.config import get_prelude_path, get_recursion_limit
from mallet.errors import MalletArityError, MalletError, MalletThrow
from mallet.evaluation.evaluator import evaluate
from mallet.printer import pr_str
from mallet.reader.parser import read_forms
from mallet.types.containers import List
from mallet.types.environment import Environment
from mallet.types.error import Error
from mallet.types.function import NativeFunction
from mallet.types.nil import Nil
from mallet.types.tail_call import TailCall

logger = logging.getLogger(__name__)

HOST_LANGUAGE = "python"
ERROR_PREFIX = "Error: "


def eval_source(source: str, env: Environment) -> LispValue:
    """Evaluate every form in `source`; return the last value, or the first Error."""
    forms = read_forms(source)
    if isinstance(forms, Error):
        return forms
    return eval_forms(forms, env)


def eval_forms(forms: list[SExpression], env: Environment) -> LispValue:
    result: LispValue = Nil
    for form in forms:
        result = evaluate(form, env)
        if isinstance(result, Error):
            return result
    return result


def load_prelude(env: Environment, path: Optional[Path] = None) -> None:
    path = path or get_prelude_path()
    logger.debug("loading prelude from %s", path)
    result = eval_source(path.read_text(encoding="utf-8"), env)
    if isinstance(result, Error):
        raise MalletError(f"prelude {path} failed: {result.message}")


def build_global_env(argv: Iterable[str] = (), prelude: bool = True) -> Environment:
    """
    Build the global environment: builtins, `eval`, host bindings and the
    self-hosted prelude.
    """
    env = Environment()
    register(env)

    def eval_builtin(expr: list[LispValue]) -> TailCall:
        if len(expr) != 1:
            raise MalletArityError("eval requires exactly 1 argument")
        return TailCall(expr[0], env)

    env.set("eval", NativeFunction(eval_builtin, "eval"))
    env.set("*host-language*", HOST_LANGUAGE)
    env.set("*ARGV*", List(argv))

    if prelude:
        load_prelude(env)
    return env


class Interpreter:
    """
    A line-oriented interpreter for Mallet source.
    Keeps one global environment alive so definitions persist across calls.
    """
    def __init__(self, argv: Iterable[str] = (), prelude: bool = True):
        # Each non-tail Lisp call nests a handful of Python frames.
        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)
        self.env = build_global_env(argv, prelude)

    def read(self, code: str) -> list[SExpression] | Error:
        return read_forms(code)

    def eval(self, code: str) -> LispValue:
        """Evaluate all forms in `code` and return the last result.

        Error values are returned; an uncaught `throw` propagates as MalletThrow.
        """
        return eval_source(code, self.env)

    def rep(self, code: str) -> str:
        """Read, evaluate and print; failures are rendered as text, never raised."""
        forms = self.read(code)
        if isinstance(forms, Error):
            return ERROR_PREFIX + pr_str(forms, True)
        if not forms:
            return ""
        try:
            result = eval_forms(forms, self.env)
        except MalletThrow as ex:
            logger.debug("uncaught throw: %r", ex.value)
            result = Error("uncaught exception", cause=ex.value)
        except RecursionError:
            result = Error("maximum recursion depth exceeded")
        if isinstance(result, Error):
            return ERROR_PREFIX + pr_str(result, True)
        return pr_str(result, True)

    def load_file(self, path: str | Path) -> str:
        return self.rep(f"(load-file {pr_str(str(path), True)})")
