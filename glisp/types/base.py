"""Abstract base of the glisp value model."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Value(ABC):
    """A runtime datum. Code and data share this representation."""

    __slots__ = ()

    @abstractmethod
    def get_type(self):
        """Return the DataType naming this value's variant."""

    @abstractmethod
    def equals(self, other: Value) -> bool:
        """Structural value equality."""

    def __eq__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return object.__hash__(self)

    def __repr__(self):
        return f"{type(self).__name__}({self})"
