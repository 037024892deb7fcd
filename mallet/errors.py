"""Exception hierarchy for the Mallet interpreter.

Host-level failures are raised as MalletError subclasses inside the
implementation and surface to Lisp code as Error values: the evaluator converts
them when a special form or a function application fails. MalletThrow is the
only exception that unwinds through user code; it carries the value given to
`throw` and is caught by `try*`/`catch*`.
"""

from typing import Any


class MalletError(Exception):
    """ Base class for all Mallet host errors"""
    pass

class MalletSyntaxError(MalletError):
    """ Raised by the reader for malformed or unterminated input"""

class MalletUnboundSymbol(MalletError):
    """ Raised when a symbol is looked up before it is bound"""

class MalletArityError(MalletError):
    """ Raised when the number of arguments passed to a function or form is incorrect"""

class MalletTypeError(MalletError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class MalletIndexError(MalletError):
    """ Raised when a sequence index is out of range"""

class MalletZeroDivisionError(MalletError):
    """ Raised on integer division by zero"""

class MalletIOError(MalletError):
    """ Raised when a file or console operation fails"""


class MalletThrow(Exception):
    """User-level non-local exit raised by `throw`, caught by `try*`/`catch*`."""

    def __init__(self, value: Any):
        super().__init__(f"MalletThrow(value={value!r})")
        self.value: Any = value
