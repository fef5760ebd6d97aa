"""Primitive glisp values.

Primitives are immutable: binding one to a second name copies it in effect,
since nothing can change it in place.
"""

from __future__ import annotations

from glisp.types.base import Value
from glisp.types.datatype import (
    BOOL_TYPE,
    DataType,
    FLOAT_TYPE,
    INT_TYPE,
    KEYWORD_TYPE,
    NOTHING_TYPE,
    STRING_TYPE,
)

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r"}


class Number(Value):
    """Common base of Int and Float; equality is numeric across both."""

    __slots__ = ("value",)

    def equals(self, other: Value) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self):
        return hash(self.value)


class Int(Number):
    __slots__ = ()

    def __init__(self, value: int):
        self.value = int(value)

    def get_type(self) -> DataType:
        return INT_TYPE

    def __str__(self):
        return str(self.value)


class Float(Number):
    __slots__ = ()

    def __init__(self, value: float):
        self.value = float(value)

    def get_type(self) -> DataType:
        return FLOAT_TYPE

    def __str__(self):
        return repr(self.value)


class Bool(Value):
    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = bool(value)

    def get_type(self) -> DataType:
        return BOOL_TYPE

    def equals(self, other: Value) -> bool:
        return isinstance(other, Bool) and self.value == other.value

    def __hash__(self):
        return hash(("bool", self.value))

    def __bool__(self):
        return self.value

    def __str__(self):
        return "true" if self.value else "false"


class String(Value):
    __slots__ = ("value",)

    def __init__(self, value: str):
        self.value = str(value)

    def get_type(self) -> DataType:
        return STRING_TYPE

    def equals(self, other: Value) -> bool:
        return isinstance(other, String) and self.value == other.value

    def __hash__(self):
        return hash(("str", self.value))

    def __str__(self):
        escaped = "".join(_ESCAPES.get(ch, ch) for ch in self.value)
        return f'"{escaped}"'


class Keyword(Value):
    """A self-evaluating named constant, written `:name`."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name[1:] if name.startswith(":") else name

    def get_type(self) -> DataType:
        return KEYWORD_TYPE

    def equals(self, other: Value) -> bool:
        return isinstance(other, Keyword) and self.name == other.name

    def __hash__(self):
        return hash(("kw", self.name))

    def __str__(self):
        return f":{self.name}"


class NothingType(Value):
    """The unit value; there is exactly one instance, `Nothing`."""

    __slots__ = ()

    def get_type(self) -> DataType:
        return NOTHING_TYPE

    def equals(self, other: Value) -> bool:
        return isinstance(other, NothingType)

    def __hash__(self):
        return hash("Nothing")

    def __bool__(self):
        return False

    def __str__(self):
        return "Nothing"


Nothing = NothingType()
TRUE = Bool(True)
FALSE = Bool(False)


def truthy(value: Value) -> bool:
    """Only `false` and `Nothing` are falsy."""
    if isinstance(value, Bool):
        return value.value
    return not isinstance(value, NothingType)
