"""First-class type descriptors.

A DataType names one of the intrinsic variants or a host-defined type. Two
descriptors are equal iff their names match.
"""

from __future__ import annotations

from glisp.types.base import Value


class DataType(Value):
    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def get_type(self) -> DataType:
        return DATATYPE_TYPE

    def equals(self, other: Value) -> bool:
        return isinstance(other, DataType) and self.name == other.name

    def __hash__(self):
        return hash(("type", self.name))

    def __str__(self):
        return self.name


DATATYPE_TYPE = DataType("DataType")
INT_TYPE = DataType("Int")
FLOAT_TYPE = DataType("Float")
BOOL_TYPE = DataType("Bool")
STRING_TYPE = DataType("String")
SYMBOL_TYPE = DataType("Symbol")
KEYWORD_TYPE = DataType("Keyword")
# `Nothing` names the unit value, so its type gets a name of its own
NOTHING_TYPE = DataType("NothingType")
LIST_TYPE = DataType("List")
DICT_TYPE = DataType("Dict")
NATIVE_FUNCTION_TYPE = DataType("NativeFunction")
NATIVE_FUNCTION_B_TYPE = DataType("NativeFunctionB")
FUNCTION_TYPE = DataType("Function")
NATIVE_OBJECT_TYPE = DataType("NativeObject")
CONTEXT_TYPE = DataType("Context")

INTRINSIC_TYPES: tuple[DataType, ...] = (
    INT_TYPE,
    FLOAT_TYPE,
    BOOL_TYPE,
    STRING_TYPE,
    SYMBOL_TYPE,
    KEYWORD_TYPE,
    NOTHING_TYPE,
    LIST_TYPE,
    DICT_TYPE,
    DATATYPE_TYPE,
    NATIVE_FUNCTION_TYPE,
    NATIVE_FUNCTION_B_TYPE,
    FUNCTION_TYPE,
    NATIVE_OBJECT_TYPE,
    CONTEXT_TYPE,
)
