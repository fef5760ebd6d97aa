from glisp.errors import GlispArityError
from glisp.types.base import Value
from glisp.types.context import Context
from glisp.types.function import DispatchPattern, Function
from glisp.types.parameters import create_parameters
from glisp.types.sequence import List
from glisp.types.symbol import Symbol
from glisp.types.value import Nothing

DO = Symbol("do")


def make_body(body_forms: List) -> Value:
    # Several body forms run as an implicit `do`; none gives Nothing.
    if not body_forms:
        return Nothing
    if len(body_forms) == 1:
        return body_forms[0]
    return List([DO, *body_forms])


def make_pattern(params: Value, body_forms: List, context: Context) -> DispatchPattern:
    return DispatchPattern(create_parameters(params, context), make_body(body_forms), context)


def fn_form(context: Context, tail: List) -> Value:
    """(fn [params] body...) creates an anonymous function closing over `context`."""
    if not tail:
        raise GlispArityError("fn requires at least a parameter list")
    return Function("fn", [make_pattern(tail[0], tail.slice_from(1), context)])
