"""Core evaluator for glisp.

`evaluate` is an error boundary: whatever a native function raises comes
back out as a GlispError, so a malformed script never takes the host down.
"""

from __future__ import annotations

from glisp.errors import GlispError, GlispLookupError, GlispTypeError, from_host_exception
from glisp.evaluation.apply import apply, is_callable
from glisp.reader.parser import parse_all
from glisp.types.base import Value
from glisp.types.context import Context
from glisp.types.sequence import List
from glisp.types.symbol import Symbol
from glisp.types.value import Nothing


def evaluate(expr: Value, context: Context) -> Value:
    """Evaluate `expr` under `context`, converting host faults to GlispErrors."""
    try:
        return evaluate0(expr, context)
    except GlispError:
        raise
    except Exception as exc:
        raise from_host_exception(exc) from exc


def evaluate0(expr: Value, context: Context) -> Value:
    """Single evaluation step, without the error conversion."""
    if isinstance(expr, Symbol):
        return context.lookup(expr)

    if isinstance(expr, List) and not expr.evaluated:
        return call(expr, context)

    if not isinstance(expr, Value):
        raise GlispTypeError(f"Cannot evaluate non-glisp value {expr!r}")

    # --- Everything else evaluates to itself ---
    return expr


def resolve_head(head: Value, context: Context) -> Value:
    """Resolve the head of a call by lookup, never by evaluation."""
    if isinstance(head, Symbol):
        fn = context.lookup(head)
        if is_callable(fn):
            return fn
        raise GlispLookupError(f"Not a function: {head}")
    if is_callable(head):
        return head
    raise GlispLookupError(f"Not a function: {head}")


def call(expr: List, context: Context) -> Value:
    if not len(expr):
        raise GlispLookupError("Cannot call an empty list")
    fn = resolve_head(expr[0], context)
    # slice_from copies, so callees never see or change the caller's list
    return apply(fn, expr.slice_from(1), context, evaluate)


def evaluate_string(text: str, context: Context) -> Value:
    """Read and evaluate every expression in `text`; return the last value."""
    result: Value = Nothing
    for expr in parse_all(text):
        result = evaluate(expr, context)
    return result
