from __future__ import annotations

import sys

from glisp.types.base import Value
from glisp.types.datatype import DataType, SYMBOL_TYPE


class Symbol(Value):
    """An identifier used for lookup; identity is its name."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash
        self.id = sys.intern(name)

    def get_type(self) -> DataType:
        return SYMBOL_TYPE

    def equals(self, other: Value) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
