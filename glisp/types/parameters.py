"""Parameter declarations for multi-dispatch functions.

A dispatch pattern is a sequence of declarations, each one of:

- a named binder ``x``: matches anything and binds it to ``x``;
- a typed binder ``Int`` or ``(Int x)``: matches values of that DataType;
- a valued binder ``0``, ``"on"``, ``:key``, ``true``: matches equal values;
- an argument sink ``&rest xs``: binds all remaining arguments as a list.

Two declarations are equal when their shapes are equal; binder names are
ignored, so ``[r]`` and ``[x]`` describe the same pattern.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from glisp.errors import GlispArityError
from glisp.types.base import Value
from glisp.types.datatype import DataType
from glisp.types.sequence import List
from glisp.types.symbol import Symbol
from glisp.types.value import Bool, FALSE, Keyword, Nothing, Number, String, TRUE

if TYPE_CHECKING:
    from glisp.types.context import Context

SINK_MARKER = Symbol("&rest")
LIST_MARKER = Symbol("list")

# Constants written as symbols that declare a valued binder, not a name.
_CONSTANTS: dict[Symbol, Value] = {
    Symbol("true"): TRUE,
    Symbol("false"): FALSE,
    Symbol("Nothing"): Nothing,
}


class ParameterDeclaration(ABC):
    name: str | None

    @abstractmethod
    def match(self, arg: Value) -> bool:
        """Whether `arg` is acceptable in this position."""

    @abstractmethod
    def bind(self, args: List, index: int, context: Context) -> None:
        """Bind the argument(s) at `index` into `context`."""

    @abstractmethod
    def shape(self) -> tuple:
        """Key identifying this declaration regardless of its name."""

    def __eq__(self, other):
        if not isinstance(other, ParameterDeclaration):
            return NotImplemented
        return self.shape() == other.shape()

    def __hash__(self):
        return hash(type(self))


class ArgumentPattern(ParameterDeclaration):
    """A regular positional parameter, optionally restricted by type or value."""

    def __init__(
        self,
        name: str | None = None,
        expected_type: DataType | None = None,
        expected_value: Value | None = None,
    ):
        self.name = name
        self.expected_type = expected_type
        self.expected_value = expected_value

    def match(self, arg: Value) -> bool:
        if self.expected_value is not None:
            return self.expected_value.equals(arg)
        if self.expected_type is not None:
            return self.expected_type.equals(arg.get_type())
        return True

    def bind(self, args: List, index: int, context: Context) -> None:
        if self.name:
            context.define(Symbol(self.name), args[index])

    def shape(self) -> tuple:
        return ("arg", self.expected_type, self.expected_value)

    def __repr__(self):
        if self.expected_value is not None:
            return str(self.expected_value)
        if self.expected_type is not None:
            return f"({self.expected_type} {self.name})" if self.name else str(self.expected_type)
        return self.name or "_"


class ArgumentSink(ParameterDeclaration):
    """Consumes every argument from its position onward."""

    def __init__(self, name: str):
        self.name = name

    def match(self, arg: Value) -> bool:
        return True

    def bind(self, args: List, index: int, context: Context) -> None:
        context.define(Symbol(self.name), List(args.items[index:], evaluated=True))

    def shape(self) -> tuple:
        return ("sink",)

    def __repr__(self):
        return f"&rest {self.name}"


def strip_list_marker(params: List) -> List:
    """`[a b]` reads as `(list a b)`; drop the marker to get the declarations."""
    if len(params) and params[0] == LIST_MARKER:
        return params.slice_from(1)
    return params


def create_parameter(expr: Value, context: Context) -> ParameterDeclaration:
    """Build one declaration from its written form."""
    if isinstance(expr, Symbol):
        if expr in _CONSTANTS:
            return ArgumentPattern(expected_value=_CONSTANTS[expr])
        owner = context.find(expr)
        if owner is not None:
            bound = owner.lookup(expr)
            if isinstance(bound, DataType):
                return ArgumentPattern(expected_type=bound)
        return ArgumentPattern(name=expr.id)
    if isinstance(expr, (Number, String, Keyword, Bool)):
        return ArgumentPattern(expected_value=expr)
    if isinstance(expr, List):
        pair = strip_list_marker(expr)
        if len(pair) == 2 and isinstance(pair[0], Symbol) and isinstance(pair[1], Symbol):
            declared = create_parameter(pair[0], context)
            if isinstance(declared, ArgumentPattern) and declared.expected_type is not None:
                return ArgumentPattern(name=pair[1].id, expected_type=declared.expected_type)
    raise GlispArityError(f"Couldn't create parameter from {expr}")


def create_parameters(params: Value, context: Context) -> list[ParameterDeclaration]:
    """Build the declarations of a whole parameter list such as `[a 0 &rest xs]`."""
    if not isinstance(params, List):
        raise GlispArityError(f"Parameter list expected, got {params}")
    items = list(strip_list_marker(params))
    declarations: list[ParameterDeclaration] = []
    while items:
        expr = items.pop(0)
        if expr == SINK_MARKER:
            if len(items) != 1 or not isinstance(items[0], Symbol):
                raise GlispArityError("Malformed parameter list: &rest must be followed by exactly one name")
            declarations.append(ArgumentSink(items.pop(0).id))
            break
        declarations.append(create_parameter(expr, context))
    return declarations
