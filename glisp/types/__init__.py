"""The glisp value model, contexts and dispatch declarations."""

from glisp.types.base import Value
from glisp.types.datatype import DataType, INTRINSIC_TYPES
from glisp.types.value import Bool, FALSE, Float, Int, Keyword, Nothing, NothingType, Number, String, TRUE, truthy
from glisp.types.symbol import Symbol
from glisp.types.sequence import List
from glisp.types.mapping import Dict
from glisp.types.native import NativeFunction, NativeFunctionB, NativeObject
from glisp.types.context import Context
from glisp.types.parameters import ArgumentPattern, ArgumentSink, ParameterDeclaration
from glisp.types.function import DispatchPattern, Function

__all__ = [
    "Value", "DataType", "INTRINSIC_TYPES",
    "Bool", "FALSE", "Float", "Int", "Keyword", "Nothing", "NothingType", "Number", "String", "TRUE", "truthy",
    "Symbol", "List", "Dict",
    "NativeFunction", "NativeFunctionB", "NativeObject",
    "Context",
    "ArgumentPattern", "ArgumentSink", "ParameterDeclaration",
    "DispatchPattern", "Function",
]
