"""String and IO builtins: printing, reading and file access.

These bridge values and text through the same reader and printer the REPL
uses, so `(read-string (pr-str x))` reads back an equal value.
"""
from __future__ import annotations

import logging
from pathlib import Path

from mallet import LispValue
from mallet.builtin.env_builtin import single
from mallet.errors import MalletIOError, MalletTypeError
from mallet.printer import join_printed
from mallet.reader.parser import read_str
from mallet.types.environment import Environment
from mallet.types.function import native_functions
from mallet.types.nil import Nil

logger = logging.getLogger(__name__)


def _string(value: LispValue, name: str) -> str:
    if not isinstance(value, str):
        raise MalletTypeError(f"{name} expects a string, got {value!r}")
    return value


def pr_str_builtin(expr: list[LispValue]) -> str:
    """(pr-str x...): readable forms joined by spaces."""
    return join_printed(expr, True, " ")


def str_builtin(expr: list[LispValue]) -> str:
    """(str x...): human-readable forms concatenated."""
    return join_printed(expr, False, "")


def prn(expr: list[LispValue]) -> LispValue:
    print(join_printed(expr, True, " "))
    return Nil


def println(expr: list[LispValue]) -> LispValue:
    print(join_printed(expr, False, " "))
    return Nil


def read_string(expr: list[LispValue]) -> LispValue:
    """(read-string s): the last form read from s; reader failures are Error values."""
    return read_str(_string(single(expr, "read-string"), "read-string"))


def slurp(expr: list[LispValue]) -> str:
    path = Path(_string(single(expr, "slurp"), "slurp"))
    logger.debug("slurp %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MalletIOError(f"slurp: cannot read {path}: {exc.strerror}")


def readline(expr: list[LispValue]) -> LispValue:
    """(readline prompt): a line from standard input, or nil at end of input."""
    prompt = _string(single(expr, "readline"), "readline")
    try:
        return input(prompt)
    except EOFError:
        return Nil


def register(env: Environment) -> None:
    env.update(native_functions({
        'pr-str': pr_str_builtin,
        'str': str_builtin,
        'prn': prn,
        'println': println,
        'read-string': read_string,
        'slurp': slurp,
        'readline': readline,
    }))
