from glisp.evaluation.evaluator import evaluate
from glisp.types.base import Value
from glisp.types.context import Context
from glisp.types.sequence import List
from glisp.types.value import Nothing


def do_form(context: Context, tail: List) -> Value:
    """(do expr...) evaluates each expression in order and returns the last."""
    result: Value = Nothing
    for expr in tail:
        result = evaluate(expr, context)
    return result
