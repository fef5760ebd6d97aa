from glisp.errors import GlispArityError
from glisp.types.base import Value
from glisp.types.context import Context
from glisp.types.sequence import List


def quote_form(context: Context, tail: List) -> Value:
    """(quote expr) returns expr unevaluated."""
    if len(tail) != 1:
        raise GlispArityError("quote requires exactly 1 argument")
    return tail[0]
