from __future__ import annotations

from typing import Any, Optional

from mallet import LispValue


class Error:
    """A failure carried as data through the normal result channel.

    `cause` optionally wraps an arbitrary Lisp value (for example the payload
    of an uncaught `throw`). Python's None marks "no cause" since nil is a
    legitimate payload.
    """

    __slots__ = ("message", "cause")

    def __init__(self, message: str, cause: Optional[Any] = None):
        self.message = message
        self.cause = cause

    @classmethod
    def from_exception(cls, exc: Exception) -> Error:
        return cls(str(exc))

    @property
    def has_cause(self) -> bool:
        return self.cause is not None

    def payload(self) -> LispValue:
        """The value `catch*` binds: the wrapped cause, else the message."""
        return self.cause if self.has_cause else self.message

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Error) and self.message == other.message and self.cause == other.cause

    def __hash__(self) -> int:
        return hash(self.message)

    def __repr__(self):
        if self.has_cause:
            return f"Error({self.message!r}, cause={self.cause!r})"
        return f"Error({self.message!r})"
