import logging

from glisp.errors import GlispArityError, GlispRedefinitionError, GlispTypeError
from glisp.evaluation.evaluator import evaluate
from glisp.evaluation.special_forms.fn_form import make_pattern
from glisp.types.base import Value
from glisp.types.context import Context
from glisp.types.function import Function
from glisp.types.native import NativeFunction
from glisp.types.sequence import List
from glisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def def_form(context: Context, tail: List) -> Value:
    """
    (def name value)
    Binds the evaluated value in the current context and returns it.
    """
    if len(tail) != 2:
        raise GlispArityError("def requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise GlispTypeError(f"Cannot define {name}, a symbol is required")
    value = evaluate(val_expr, context)
    context.define(name, value)
    return value


def defn_form(context: Context, tail: List) -> Value:
    """
    (defn name [params] body...)

    Adds a dispatch pattern to the function bound to `name`. A pattern with
    the same parameter shape is replaced in place, any other is appended
    after the existing ones. A function inherited from an outer context is
    extended as a copy in the current context; the outer one is untouched.
    """
    if len(tail) < 2:
        raise GlispArityError("defn requires a name and a parameter list")
    name = tail[0]
    if not isinstance(name, Symbol):
        raise GlispTypeError(f"Cannot define function {name}, a symbol is required")

    pattern = make_pattern(tail[1], tail.slice_from(2), context)

    owner = context.find(name)
    existing = owner.lookup(name) if owner is not None else None
    if isinstance(existing, NativeFunction):
        raise GlispRedefinitionError(f"Cannot redefine native function {name}")

    if isinstance(existing, Function):
        if owner is context:
            existing.add_dispatch(pattern)
            fn = existing
        else:
            fn = existing.extended(pattern)
            context.define(name, fn)
    else:
        fn = Function(name.id, [pattern])
        context.define(name, fn)

    logger.debug("defn %s now has %d dispatch pattern(s)", name, len(fn.dispatchers))
    return fn
