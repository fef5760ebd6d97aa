"""Short-circuiting boolean forms. Both return the last value they evaluated."""

from glisp.evaluation.evaluator import evaluate
from glisp.types.base import Value
from glisp.types.context import Context
from glisp.types.sequence import List
from glisp.types.value import FALSE, TRUE, truthy


def and_form(context: Context, tail: List) -> Value:
    result: Value = TRUE
    for expr in tail:
        result = evaluate(expr, context)
        if not truthy(result):
            return result
    return result


def or_form(context: Context, tail: List) -> Value:
    result: Value = FALSE
    for expr in tail:
        result = evaluate(expr, context)
        if truthy(result):
            return result
    return result
