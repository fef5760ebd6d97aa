"""User-defined, multiply-dispatched glisp functions."""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from glisp.types.base import Value
from glisp.types.datatype import DataType, FUNCTION_TYPE
from glisp.types.parameters import ArgumentSink, ParameterDeclaration
from glisp.types.sequence import List

if TYPE_CHECKING:
    from glisp.types.context import Context


class DispatchPattern:
    """One candidate parameter shape of a function, with its body.

    `context` is the context the pattern was defined in; calls bind their
    parameters into a fresh child of it. Two patterns are equal when their
    parameter shapes are equal, whatever their bodies.
    """

    __slots__ = ("parameters", "body", "context")

    def __init__(self, parameters: list[ParameterDeclaration], body: Value, context: Context):
        self.parameters = parameters
        self.body = body
        self.context = context

    def __eq__(self, other):
        if not isinstance(other, DispatchPattern):
            return NotImplemented
        return self.parameters == other.parameters

    __hash__ = None

    @property
    def has_sink(self) -> bool:
        return bool(self.parameters) and isinstance(self.parameters[-1], ArgumentSink)

    def match(self, args: List) -> bool:
        fixed = self.parameters[:-1] if self.has_sink else self.parameters
        if len(args) < len(fixed):
            return False
        # Unconsumed arguments are only fine if a sink takes them
        if len(args) > len(fixed) and not self.has_sink:
            return False
        return all(param.match(arg) for param, arg in zip(fixed, args))

    def bind_parameters(self, args: List, context: Context) -> None:
        for index, param in enumerate(self.parameters):
            param.bind(args, index, context)

    def __repr__(self):
        return f"[{' '.join(repr(p) for p in self.parameters)}] {self.body}"


class Function(Value):
    """A named function holding an ordered list of dispatch patterns."""

    __slots__ = ("name", "dispatchers")

    def __init__(self, name: str, dispatchers: Optional[list[DispatchPattern]] = None):
        self.name = name
        self.dispatchers: list[DispatchPattern] = list(dispatchers or [])

    def get_type(self) -> DataType:
        return FUNCTION_TYPE

    def equals(self, other: Value) -> bool:
        return self is other

    def __hash__(self):
        return id(self)

    def __str__(self):
        return f"Function<{self.name}>"

    def add_dispatch(self, pattern: DispatchPattern) -> None:
        """Replace the pattern with the same shape in place, or append."""
        for index, existing in enumerate(self.dispatchers):
            if existing == pattern:
                self.dispatchers[index] = pattern
                return
        self.dispatchers.append(pattern)

    def select_dispatch(self, args: List) -> Optional[DispatchPattern]:
        """The first pattern, in declaration order, that matches `args`."""
        for pattern in self.dispatchers:
            if pattern.match(args):
                return pattern
        return None

    def extended(self, pattern: DispatchPattern) -> Function:
        """A copy of this function with `pattern` added; self is unchanged."""
        fn = Function(self.name, self.dispatchers)
        fn.add_dispatch(pattern)
        return fn
