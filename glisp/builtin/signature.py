"""Argument validation helpers for native functions.

Checks run against the Value classes themselves, e.g.

    n, s = require_args("repeat", args, Int, String)
    x, = require_args("neg", args, (Int, Float))
"""

from __future__ import annotations

from typing import Union

from glisp.errors import GlispArityError, GlispTypeError
from glisp.types.base import Value
from glisp.types.sequence import List

Expected = Union[type, tuple[type, ...]]


def _describe(expected: Expected) -> str:
    if isinstance(expected, tuple):
        return " or ".join(t.__name__ for t in expected)
    return expected.__name__


def require_arity(name: str, args: List, minimum: int, maximum: int | None = None) -> None:
    """Raise GlispArityError unless minimum <= len(args) <= maximum."""
    count = len(args)
    if count < minimum:
        raise GlispArityError(f"{name} requires at least {minimum} argument(s), got {count}")
    if maximum is not None and count > maximum:
        raise GlispArityError(f"{name} accepts at most {maximum} argument(s), got {count}")


def require_type(name: str, arg: Value, expected: Expected, position: int = 0) -> Value:
    if not isinstance(arg, expected):
        raise GlispTypeError(
            f"{name} expects {_describe(expected)} as argument {position + 1}, got {arg.get_type()}"
        )
    return arg


def require_args(name: str, args: List, *expected: Expected) -> list[Value]:
    """Validate an exact positional signature and return the arguments."""
    require_arity(name, args, len(expected), len(expected))
    return [require_type(name, arg, exp, i) for i, (arg, exp) in enumerate(zip(args, expected))]
