"""Host-backed values: native callables and opaque host objects.

A native function is called as ``fn(context, args)`` where ``args`` is a
glisp List. NativeFunction receives arguments already evaluated in the
caller's context; NativeFunctionB receives the raw call syntax and decides
itself what to evaluate, which is how special forms are built.
"""

from __future__ import annotations

from typing import Any, Callable, TYPE_CHECKING

from glisp.errors import GlispTypeError
from glisp.types.base import Value
from glisp.types.datatype import (
    DataType,
    NATIVE_FUNCTION_B_TYPE,
    NATIVE_FUNCTION_TYPE,
    NATIVE_OBJECT_TYPE,
)

if TYPE_CHECKING:
    from glisp.types.context import Context
    from glisp.types.sequence import List

NativeFn = Callable[["Context", "List"], Value]


class NativeFunction(Value):
    __slots__ = ("fn", "name")

    lazy = False

    def __init__(self, fn: NativeFn, name: str = ""):
        self.fn = fn
        self.name = name or getattr(fn, "__name__", "")

    def __call__(self, context: Context, args: List) -> Value:
        return self.fn(context, args)

    def get_type(self) -> DataType:
        return NATIVE_FUNCTION_TYPE

    def equals(self, other: Value) -> bool:
        raise GlispTypeError(f"Native function {self.name} cannot be compared")

    def __eq__(self, other):
        return self is other

    def __hash__(self):
        return id(self)

    def __str__(self):
        return "native function"


class NativeFunctionB(NativeFunction):
    __slots__ = ()

    lazy = True

    def get_type(self) -> DataType:
        return NATIVE_FUNCTION_B_TYPE


class NativeObject(Value):
    """An opaque host object, e.g. an event-bus handle, carried as a value."""

    __slots__ = ("obj", "datatype")

    def __init__(self, obj: Any, datatype: DataType = NATIVE_OBJECT_TYPE):
        self.obj = obj
        self.datatype = datatype

    def get_type(self) -> DataType:
        return self.datatype

    def equals(self, other: Value) -> bool:
        return isinstance(other, NativeObject) and self.obj is other.obj

    def __hash__(self):
        return id(self.obj)

    def __str__(self):
        return f"{self.datatype.name}<{type(self.obj).__name__}>"
