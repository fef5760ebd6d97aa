"""List and Dict natives.

Lists and dicts are shared by reference: `set` and `put` change them in
place and return the same collection.
"""

from __future__ import annotations

from glisp.builtin.signature import require_args, require_arity, require_type
from glisp.errors import GlispArityError, GlispTypeError
from glisp.evaluation.apply import apply_values, is_callable
from glisp.evaluation.evaluator import evaluate
from glisp.types.base import Value
from glisp.types.context import Context
from glisp.types.mapping import Dict
from glisp.types.sequence import List
from glisp.types.value import Int, String, truthy


def list_builtin(context: Context, args: List) -> Value:
    return List(args, evaluated=True)


def dict_builtin(context: Context, args: List) -> Value:
    if len(args) % 2 != 0:
        raise GlispArityError("dict requires key/value pairs")
    return Dict((args[i], args[i + 1]) for i in range(0, len(args), 2))


def get(context: Context, args: List) -> Value:
    """(get coll key): position in a list (negative counts from the end) or key in a dict."""
    coll, key = require_args("get", args, (List, Dict), Value)
    if isinstance(coll, List):
        return coll.get(require_type("get", key, Int, 1).value)
    return coll.get(key)


def set_builtin(context: Context, args: List) -> Value:
    """(set list index value) replaces an element in place."""
    coll, index, value = require_args("set", args, List, Int, Value)
    coll.set(index.value, value)
    return coll


def put(context: Context, args: List) -> Value:
    """(put dict key value) binds a key in place."""
    coll, key, value = require_args("put", args, Dict, Value, Value)
    coll.put(key, value)
    return coll


def first(context: Context, args: List) -> Value:
    coll, = require_args("first", args, List)
    return coll.front()


def last(context: Context, args: List) -> Value:
    coll, = require_args("last", args, List)
    return coll.back()


def length(context: Context, args: List) -> Value:
    coll, = require_args("len", args, (List, Dict, String))
    if isinstance(coll, String):
        return Int(len(coll.value))
    return Int(len(coll))


def slice_builtin(context: Context, args: List) -> Value:
    """(slice list start [end])"""
    require_arity("slice", args, 2, 3)
    coll = require_type("slice", args[0], List, 0)
    start = require_type("slice", args[1], Int, 1).value
    end = require_type("slice", args[2], Int, 2).value if len(args) > 2 else None
    return coll.slice(start, end)


def concat(context: Context, args: List) -> Value:
    result = List(evaluated=True)
    for i, coll in enumerate(args):
        result = result.concat(require_type("concat", coll, List, i))
    return result


def _callable_and_list(name: str, args: List) -> tuple[Value, List]:
    fn, coll = require_args(name, args, Value, List)
    if not is_callable(fn):
        raise GlispTypeError(f"{name} expects a function as argument 1, got {fn.get_type()}")
    return fn, coll


def map_builtin(context: Context, args: List) -> Value:
    """(map fn list) applies fn to every element."""
    fn, coll = _callable_and_list("map", args)
    mapped = coll.map(lambda item: apply_values(fn, List([item], evaluated=True), context, evaluate))
    mapped.evaluated = True
    return mapped


def filter_builtin(context: Context, args: List) -> Value:
    """(filter fn list) keeps the elements for which fn returns a truthy value."""
    fn, coll = _callable_and_list("filter", args)
    kept = coll.filter(lambda item: truthy(apply_values(fn, List([item], evaluated=True), context, evaluate)))
    kept.evaluated = True
    return kept


def keys(context: Context, args: List) -> Value:
    coll, = require_args("keys", args, Dict)
    return List(coll.keys(), evaluated=True)
