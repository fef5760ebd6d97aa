"""Arithmetic natives.

Operators fold left to right over two or more arguments. Int op Int stays
an Int; as soon as a Float takes part the result is a Float. `+` with a
String on the left concatenates, `*` of a String and an Int repeats.
"""

from __future__ import annotations

import operator
from typing import Callable

from glisp.builtin.signature import require_args, require_arity
from glisp.errors import GlispArithmeticError, GlispTypeError
from glisp.types.base import Value
from glisp.types.context import Context
from glisp.types.sequence import List
from glisp.types.value import Float, Int, Number, String


def _numeric(op_name: str, a: Value, b: Value, op: Callable) -> Value:
    if isinstance(a, Int) and isinstance(b, Int):
        return Int(op(a.value, b.value))
    if isinstance(a, Number) and isinstance(b, Number):
        return Float(op(float(a.value), float(b.value)))
    raise GlispTypeError(f"{op_name} only works with Ints and Floats, not {a.get_type()} and {b.get_type()}")


def truncated_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def plus(a: Value, b: Value) -> Value:
    if isinstance(a, String):
        return String(a.value + (b.value if isinstance(b, String) else str(b)))
    return _numeric("Addition", a, b, operator.add)


def minus(a: Value, b: Value) -> Value:
    return _numeric("Subtraction", a, b, operator.sub)


def multiply(a: Value, b: Value) -> Value:
    if isinstance(a, String) and isinstance(b, Int):
        return String(a.value * max(b.value, 0))
    if isinstance(a, Int) and isinstance(b, String):
        return String(b.value * max(a.value, 0))
    return _numeric("Multiplication", a, b, operator.mul)


def divide(a: Value, b: Value) -> Value:
    if isinstance(b, Number) and b.value == 0:
        raise GlispArithmeticError("Division by zero")
    if isinstance(a, Int) and isinstance(b, Int):
        return Int(truncated_div(a.value, b.value))
    return _numeric("Division", a, b, operator.truediv)


def _fold(name: str, op: Callable[[Value, Value], Value]):
    def native(context: Context, args: List) -> Value:
        require_arity(name, args, 2)
        result = args[0]
        for arg in args.slice_from(1):
            result = op(result, arg)
        return result

    native.__name__ = name
    return native


add = _fold("+", plus)
sub = _fold("-", minus)
mul = _fold("*", multiply)
div = _fold("/", divide)


def mod(context: Context, args: List) -> Value:
    """(mod n d) => remainder of truncated division. Exactly 2 Ints."""
    n, d = require_args("mod", args, Int, Int)
    if d.value == 0:
        raise GlispArithmeticError("Modulo by zero")
    return Int(n.value - d.value * truncated_div(n.value, d.value))
