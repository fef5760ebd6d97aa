"""glisp: an embeddable, homoiconic scripting language.

Host embedding API:

    from glisp import new_context, evaluate_string
    ctx = new_context()
    evaluate_string("(defn sq [x] (* x x)) (sq 4)", ctx)   # Int(16)
"""

from glisp.errors import (
    GlispArithmeticError,
    GlispArityError,
    GlispDispatchError,
    GlispError,
    GlispLookupError,
    GlispParseError,
    GlispRedefinitionError,
    GlispRuntimeError,
    GlispTypeError,
)
from glisp.reader.parser import parse, parse_all
from glisp.evaluation.evaluator import evaluate, evaluate_string
from glisp.interpreter import Interpreter, Outcome, new_context
from glisp.types import (
    Bool,
    Context,
    DataType,
    Dict,
    Float,
    Function,
    Int,
    Keyword,
    List,
    NativeFunction,
    NativeFunctionB,
    NativeObject,
    Nothing,
    String,
    Symbol,
    Value,
)

__all__ = [
    "GlispArithmeticError", "GlispArityError", "GlispDispatchError", "GlispError", "GlispLookupError",
    "GlispParseError", "GlispRedefinitionError", "GlispRuntimeError", "GlispTypeError",
    "parse", "parse_all", "evaluate", "evaluate_string",
    "Interpreter", "Outcome", "new_context",
    "Bool", "Context", "DataType", "Dict", "Float", "Function", "Int", "Keyword", "List",
    "NativeFunction", "NativeFunctionB", "NativeObject", "Nothing", "String", "Symbol", "Value",
]
