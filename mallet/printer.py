"""Printer: serialize values back to text.

`readable=True` produces text the reader can read back (strings quoted and
escaped); `readable=False` is the human form used by `str` and `println`.
"""

from __future__ import annotations

from mallet import LispValue
from mallet.types.atom import Atom
from mallet.types.containers import HashMap, List, Vector
from mallet.types.error import Error
from mallet.types.function import Function
from mallet.types.nil import NilType
from mallet.types.symbol import Keyword, Symbol


def escape(s: str) -> str:
    """Inverse of the reader's unescaping: backslash, quote and newline."""
    s = s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{s}"'


def pr_str(value: LispValue, readable: bool = True) -> str:
    match value:
        case NilType():
            return "nil"
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case str():
            return escape(value) if readable else value
        case Symbol() | Keyword():
            return str(value)
        case List():
            return "(" + join_printed(value, readable) + ")"
        case Vector():
            return "[" + join_printed(value, readable) + "]"
        case HashMap():
            return "{" + ", ".join(
                f"{pr_str(k, readable)} {pr_str(v, readable)}" for k, v in value.items()
            ) + "}"
        case Atom():
            return f"(atom {pr_str(value.value, readable)})"
        case Function():
            return "#<macro>" if value.is_macro else "#<function>"
        case Error():
            if value.has_cause:
                return pr_str(value.cause, readable)
            return value.message
    return repr(value)


def join_printed(items: list, readable: bool, sep: str = " ") -> str:
    """Print each item and join with `sep`; used by pr-str, str, prn and println."""
    return sep.join(pr_str(item, readable) for item in items)
