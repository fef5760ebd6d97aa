"""Application engine for glisp.

This module centralizes the calling conventions:
- NativeFunctionB receives the raw, unevaluated argument expressions.
- NativeFunction receives arguments evaluated in the caller's context.
- A user Function evaluates its arguments eagerly, selects the first
  matching dispatch pattern, binds it into a fresh child of the pattern's
  definition context and evaluates the body there.
"""

from __future__ import annotations

import logging
from typing import Callable

from glisp.errors import GlispDispatchError, GlispTypeError
from glisp.types.base import Value
from glisp.types.context import Context
from glisp.types.function import Function
from glisp.types.native import NativeFunction
from glisp.types.sequence import List

logger = logging.getLogger(__name__)

EvaluatorFn = Callable[[Value, Context], Value]


def is_callable(value: Value) -> bool:
    return isinstance(value, (NativeFunction, Function))


def evaluate_args(args: List, context: Context, evaluate_fn: EvaluatorFn) -> List:
    """Evaluate each argument expression in `context`, left to right."""
    return List((evaluate_fn(arg, context) for arg in args), evaluated=True)


def apply_function(fn: Function, args: List, evaluate_fn: EvaluatorFn) -> Value:
    """Apply a user Function to already-evaluated arguments."""
    pattern = fn.select_dispatch(args)
    if pattern is None:
        raise GlispDispatchError(f"No dispatch pattern of {fn.name} matches the arguments {args}")
    logger.debug("dispatch %s%s -> %r", fn.name, args, pattern)

    local = Context(parent=pattern.context, name=fn.name)
    pattern.bind_parameters(args, local)
    return evaluate_fn(pattern.body, local)


def apply(fn: Value, args: List, context: Context, evaluate_fn: EvaluatorFn) -> Value:
    """Call `fn` with the raw argument expressions `args` from `context`."""
    if isinstance(fn, NativeFunction):
        if fn.lazy:
            return fn(context, args)
        return fn(context, evaluate_args(args, context, evaluate_fn))
    if isinstance(fn, Function):
        return apply_function(fn, evaluate_args(args, context, evaluate_fn), evaluate_fn)
    raise GlispTypeError(f"Cannot apply non-function {fn}")


def apply_values(fn: Value, values: List, context: Context, evaluate_fn: EvaluatorFn) -> Value:
    """Call `fn` with arguments that are already values (used by map/filter)."""
    if isinstance(fn, NativeFunction):
        return fn(context, values)
    if isinstance(fn, Function):
        return apply_function(fn, values, evaluate_fn)
    raise GlispTypeError(f"Cannot apply non-function {fn}")
