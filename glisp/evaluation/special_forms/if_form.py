from glisp.errors import GlispArityError
from glisp.evaluation.evaluator import evaluate
from glisp.types.base import Value
from glisp.types.context import Context
from glisp.types.sequence import List
from glisp.types.value import Nothing, truthy


def if_form(context: Context, tail: List) -> Value:
    """(if cond then [else]); only the taken branch is evaluated."""
    if len(tail) not in (2, 3):
        raise GlispArityError("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate(tail[0], context)
    if truthy(cond):
        return evaluate(tail[1], context)
    elif len(tail) > 2:
        return evaluate(tail[2], context)
    else:
        return Nothing
