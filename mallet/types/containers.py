"""Sequence and mapping values: List, Vector and HashMap.

List and Vector are both `list` subclasses so they share iteration, indexing
and slicing; they differ only in how they print and in a few predicates.
Neither is mutated after construction. Each carries a `meta` slot read by the
`meta` builtin; `with_meta` returns a copy.
"""

from __future__ import annotations

from typing import Hashable, Iterable, Iterator

from mallet import LispValue
from mallet.errors import MalletArityError, MalletTypeError
from mallet.types.nil import Nil


class List(list):
    __slots__ = ("meta",)

    def __init__(self, items: Iterable[LispValue] = (), meta: LispValue = Nil):
        super().__init__(items)
        self.meta = meta

    def with_meta(self, meta: LispValue) -> List:
        return type(self)(self, meta)

    def __repr__(self) -> str:
        return f"List({list.__repr__(self)})"


class Vector(list):
    __slots__ = ("meta",)

    def __init__(self, items: Iterable[LispValue] = (), meta: LispValue = Nil):
        super().__init__(items)
        self.meta = meta

    def with_meta(self, meta: LispValue) -> Vector:
        return type(self)(self, meta)

    def __repr__(self) -> str:
        return f"Vector({list.__repr__(self)})"


def _slot(key: LispValue) -> Hashable:
    # True == 1 and False == 0 in Python, so booleans get a tagged slot.
    return (bool, key) if isinstance(key, bool) else key


def _unslot(slot: Hashable) -> LispValue:
    return slot[1] if isinstance(slot, tuple) else slot


class HashMap(dict):
    """Insertion-ordered mapping from hashable atoms to values.

    Keys are stored under `_slot(key)`; every accessor translates, so callers
    only ever see the original Lisp keys.
    """

    __slots__ = ("meta",)

    def __init__(self, pairs: Iterable[tuple[LispValue, LispValue]] = (), meta: LispValue = Nil):
        super().__init__()
        self.meta = meta
        for key, value in pairs:
            self.put(key, value)

    @classmethod
    def from_flat(cls, items: list[LispValue]) -> HashMap:
        """Build a map from alternating keys and values."""
        if len(items) % 2 != 0:
            raise MalletArityError("hash-map requires an even number of elements")
        return cls(zip(items[::2], items[1::2]))

    def __getitem__(self, key: LispValue) -> LispValue:
        return dict.__getitem__(self, _slot(key))

    def __setitem__(self, key: LispValue, value: LispValue) -> None:
        dict.__setitem__(self, _slot(key), value)

    def __contains__(self, key: object) -> bool:
        try:
            return dict.__contains__(self, _slot(key))
        except TypeError:
            return False

    def __iter__(self) -> Iterator[LispValue]:
        return (_unslot(slot) for slot in dict.__iter__(self))

    def get(self, key: LispValue, default: LispValue = None) -> LispValue:
        return dict.get(self, _slot(key), default)

    def pop(self, key: LispValue, *default: LispValue) -> LispValue:
        return dict.pop(self, _slot(key), *default)

    def keys(self) -> list[LispValue]:
        return [_unslot(slot) for slot in dict.keys(self)]

    def items(self) -> list[tuple[LispValue, LispValue]]:
        return [(_unslot(slot), value) for slot, value in dict.items(self)]

    def put(self, key: LispValue, value: LispValue) -> None:
        try:
            self[key] = value
        except TypeError:
            raise MalletTypeError(f"Cannot use {key!r} as a hash-map key")

    def assoc(self, pairs: Iterable[tuple[LispValue, LispValue]]) -> HashMap:
        result = type(self)(self.items(), self.meta)
        for key, value in pairs:
            result.put(key, value)
        return result

    def dissoc(self, keys: Iterable[LispValue]) -> HashMap:
        result = type(self)(self.items(), self.meta)
        for key in keys:
            try:
                result.pop(key, None)
            except TypeError:
                continue
        return result

    def lookup(self, key: LispValue, default: LispValue = Nil) -> LispValue:
        try:
            return self.get(key, default)
        except TypeError:
            return default

    def with_meta(self, meta: LispValue) -> HashMap:
        return type(self)(self.items(), meta)

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"HashMap({{{body}}})"
