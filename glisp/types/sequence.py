"""The glisp List value.

A List doubles as code and data. Unevaluated lists are call syntax and
render as `( ... )`; evaluated lists are realized collections and render as
`[ ... ]`. Lists are shared by reference: mutation through `set` is seen by
every holder.
"""

from __future__ import annotations

import collections.abc
from io import StringIO
from typing import Callable, Iterable

from glisp.errors import GlispLookupError, GlispTypeError
from glisp.types.base import Value
from glisp.types.datatype import DataType, LIST_TYPE


def check_value(item) -> Value:
    if not isinstance(item, Value):
        raise GlispTypeError(f"Not a glisp value: {item!r}")
    return item


class List(Value, collections.abc.MutableSequence):
    __slots__ = ("items", "evaluated")

    def __init__(self, items: Iterable[Value] = (), evaluated: bool = False):
        self.items: list[Value] = [check_value(i) for i in items]
        self.evaluated = evaluated

    # --- MutableSequence protocol ---
    def __getitem__(self, index):
        if isinstance(index, slice):
            return List(self.items[index], self.evaluated)
        return self.items[index]

    def __setitem__(self, index, value):
        self.items[index] = check_value(value)

    def __delitem__(self, index):
        del self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def insert(self, index, value):
        self.items.insert(index, check_value(value))

    # --- Value protocol ---
    def get_type(self) -> DataType:
        return LIST_TYPE

    def equals(self, other: Value) -> bool:
        if not isinstance(other, List) or len(self) != len(other):
            return False
        return all(a.equals(b) for a, b in zip(self.items, other.items))

    __hash__ = None

    def __str__(self) -> str:
        open_, close = ("[", "]") if self.evaluated else ("(", ")")
        with StringIO() as buffer:
            buffer.write(open_)
            buffer.write(" ".join(str(item) for item in self.items))
            buffer.write(close)
            return buffer.getvalue()

    # --- positional access ---
    def _position(self, n: int) -> int:
        pos = n + len(self.items) if n < 0 else n
        if pos < 0 or pos >= len(self.items):
            raise GlispLookupError(f"Index {n} out of range for list of length {len(self.items)}")
        return pos

    def get(self, n: int) -> Value:
        """Element at position n; negative positions count from the end."""
        return self.items[self._position(n)]

    def set(self, n: int, value: Value) -> None:
        """Replace the element at position n in place."""
        self.items[self._position(n)] = check_value(value)

    def front(self) -> Value:
        return self.get(0)

    def back(self) -> Value:
        return self.get(-1)

    def slice(self, start: int, end: int | None = None) -> List:
        return List(self.items[start:end], self.evaluated)

    def slice_from(self, start: int) -> List:
        return self.slice(start)

    def filter(self, predicate: Callable[[Value], bool]) -> List:
        return List((item for item in self.items if predicate(item)), self.evaluated)

    def map(self, fn: Callable[[Value], Value]) -> List:
        return List((fn(item) for item in self.items), self.evaluated)

    def concat(self, other: List) -> List:
        """A new list holding the elements of both; the operands are untouched."""
        if not isinstance(other, List):
            raise GlispTypeError(f"Cannot concatenate a list with {other}")
        return List(self.items + other.items, self.evaluated)
