"""Built-in functions for the glisp root context.

This module defines comparison and introspection natives and registers
every builtin, special form, constant and intrinsic DataType into a
context.
"""

from __future__ import annotations

from glisp.builtin import arithmetic, collection_builtin
from glisp.builtin.signature import require_args, require_arity
from glisp.errors import GlispTypeError
from glisp.evaluation import special_forms
from glisp.types.base import Value
from glisp.types.context import Context
from glisp.types.datatype import INTRINSIC_TYPES
from glisp.types.native import NativeFunction
from glisp.types.sequence import List
from glisp.types.symbol import Symbol
from glisp.types.value import Bool, FALSE, Nothing, Number, String, TRUE, truthy


# -------------------------------
# Equality and comparison
# -------------------------------
def equals(context: Context, args: List) -> Value:
    """true if every argument equals the first."""
    require_arity("=", args, 1)
    first = args[0]
    return Bool(all(first.equals(other) for other in args.slice_from(1)))


def not_equals(context: Context, args: List) -> Value:
    return Bool(not equals(context, args).value)


def _comparable(name: str, a: Value, b: Value):
    if isinstance(a, Number) and isinstance(b, Number):
        return a.value, b.value
    if isinstance(a, String) and isinstance(b, String):
        return a.value, b.value
    raise GlispTypeError(f"{name} cannot compare {a.get_type()} with {b.get_type()}")


def _chain(name: str, test):
    def native(context: Context, args: List) -> Value:
        require_arity(name, args, 2)
        pairs = zip(args, args.slice_from(1))
        return Bool(all(test(*_comparable(name, a, b)) for a, b in pairs))

    native.__name__ = name
    return native


lt = _chain("<", lambda a, b: a < b)
lte = _chain("<=", lambda a, b: a <= b)
gt = _chain(">", lambda a, b: a > b)
gte = _chain(">=", lambda a, b: a >= b)


def logical_not(context: Context, args: List) -> Value:
    require_arity("not", args, 1, 1)
    return Bool(not truthy(args[0]))


# -------------------------------
# Introspection
# -------------------------------
def type_of(context: Context, args: List) -> Value:
    """(type x) returns the DataType of x."""
    require_arity("type", args, 1, 1)
    return args[0].get_type()


def symbol(context: Context, args: List) -> Value:
    """(symbol "x") returns the symbol x."""
    name, = require_args("symbol", args, String)
    return Symbol(name.value)


def to_str(context: Context, args: List) -> Value:
    """(str x ...) concatenates the text of its arguments; strings contribute their raw text."""
    return String("".join(arg.value if isinstance(arg, String) else str(arg) for arg in args))


# -------------------------------
# Registration
# -------------------------------
NATIVES = {
    "+": arithmetic.add,
    "-": arithmetic.sub,
    "*": arithmetic.mul,
    "/": arithmetic.div,
    "mod": arithmetic.mod,
    "=": equals,
    "!=": not_equals,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "not": logical_not,
    "list": collection_builtin.list_builtin,
    "dict": collection_builtin.dict_builtin,
    "get": collection_builtin.get,
    "set": collection_builtin.set_builtin,
    "put": collection_builtin.put,
    "first": collection_builtin.first,
    "last": collection_builtin.last,
    "len": collection_builtin.length,
    "slice": collection_builtin.slice_builtin,
    "concat": collection_builtin.concat,
    "map": collection_builtin.map_builtin,
    "filter": collection_builtin.filter_builtin,
    "keys": collection_builtin.keys,
    "type": type_of,
    "symbol": symbol,
    "str": to_str,
}


def register(context: Context) -> None:
    special_forms.register(context)
    context.update({Symbol(name): NativeFunction(fn, name) for name, fn in NATIVES.items()})
    context.update({Symbol(t.name): t for t in INTRINSIC_TYPES})
    context.update({
        Symbol("true"): TRUE,
        Symbol("false"): FALSE,
        Symbol("Nothing"): Nothing,
    })
