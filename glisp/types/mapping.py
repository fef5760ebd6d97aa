"""The glisp Dict value: an unordered mapping from Value to Value."""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator

from glisp.errors import GlispLookupError, GlispTypeError
from glisp.types.base import Value
from glisp.types.datatype import DataType, DICT_TYPE
from glisp.types.sequence import check_value


class Dict(Value):
    """Keys are compared by structural equality, so mutable values cannot be keys."""

    __slots__ = ("entries",)

    def __init__(self, pairs: Iterable[tuple[Value, Value]] = ()):
        self.entries: dict[Value, Value] = {}
        for key, value in pairs:
            self.put(key, value)

    def get_type(self) -> DataType:
        return DICT_TYPE

    def put(self, key: Value, value: Value) -> None:
        """Bind key to value in place."""
        check_value(key)
        check_value(value)
        try:
            self.entries[key] = value
        except TypeError:
            raise GlispTypeError(f"Mutable value {key} cannot be used as a dict key") from None

    def get(self, key: Value) -> Value:
        try:
            return self.entries[key]
        except KeyError:
            raise GlispLookupError(f"Key {key} not found in dict") from None
        except TypeError:
            raise GlispTypeError(f"Mutable value {key} cannot be used as a dict key") from None

    def contains(self, key: Value) -> bool:
        try:
            return key in self.entries
        except TypeError:
            return False

    def keys(self) -> Iterator[Value]:
        return iter(self.entries.keys())

    def items(self) -> Iterator[tuple[Value, Value]]:
        return iter(self.entries.items())

    def __len__(self) -> int:
        return len(self.entries)

    def equals(self, other: Value) -> bool:
        # Left-coverage only: every key of self must exist with an equal value
        # in other. Extra keys in other are not checked.
        if not isinstance(other, Dict):
            return False
        for key, value in self.entries.items():
            if not other.contains(key) or not value.equals(other.entries[key]):
                return False
        return True

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(" ".join(f"{k} {v}" for k, v in self.entries.items()))
            buffer.write("}")
            return buffer.getvalue()
