from glisp.errors import GlispArityError, GlispTypeError
from glisp.evaluation.evaluator import evaluate
from glisp.types.base import Value
from glisp.types.context import Context
from glisp.types.parameters import strip_list_marker
from glisp.types.sequence import List
from glisp.types.symbol import Symbol
from glisp.types.value import Nothing


def let_form(context: Context, tail: List) -> Value:
    """
    (let [name value ...] body...)

    Bindings are made one after another in a child context, so later values
    can refer to earlier names. The child context is dropped afterwards.
    """
    if not tail:
        raise GlispArityError("let requires a binding list")
    bindings = tail[0]
    if not isinstance(bindings, List):
        raise GlispTypeError(f"let bindings must be a list, not {bindings}")
    bindings = strip_list_marker(bindings)
    if len(bindings) % 2 != 0:
        raise GlispArityError("let bindings must come in name/value pairs")

    local = Context(parent=context, name="let")
    for i in range(0, len(bindings), 2):
        name, expr = bindings[i], bindings[i + 1]
        if not isinstance(name, Symbol):
            raise GlispTypeError(f"Cannot bind {name} in let, a symbol is required")
        local.define(name, evaluate(expr, local))

    result: Value = Nothing
    for expr in tail.slice_from(1):
        result = evaluate(expr, local)
    return result
