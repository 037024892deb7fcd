from __future__ import annotations

from mallet import LispValue


class Atom:
    """A shared, mutable single-slot cell; the only mutable value.

    Identity, not content, decides equality: two atoms holding equal values
    are still distinct.
    """

    __slots__ = ("value",)

    def __init__(self, value: LispValue):
        self.value = value

    def reset(self, value: LispValue) -> LispValue:
        self.value = value
        return value

    def __repr__(self):
        return f"Atom({self.value!r})"
