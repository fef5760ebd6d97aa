"""Error taxonomy for the glisp runtime.

Every failure surfaced by the reader or the evaluator is an instance of
GlispError. Host exceptions escaping a native function are converted at the
evaluate boundary with `from_host_exception`.
"""

from __future__ import annotations


class GlispError(Exception):
    """ Base class for all glisp errors"""
    pass


class GlispParseError(GlispError):
    """ Raised when source text cannot be read"""

    def __init__(self, message: str, offset: int | None = None):
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)
        self.offset = offset


class GlispLookupError(GlispError):
    """ Raised when a symbol is undefined or a call head cannot be resolved"""


class GlispDispatchError(GlispError):
    """ Raised when no dispatch pattern of a function matches its arguments"""


class GlispTypeError(GlispError):
    """ Raised when an operand does not satisfy the expected type"""


class GlispArithmeticError(GlispTypeError):
    """ Raised for arithmetic faults such as division by zero"""


class GlispArityError(GlispError):
    """ Raised when a call receives the wrong number of arguments"""


class GlispRedefinitionError(GlispError):
    """ Raised when user code tries to overwrite a native binding"""


class GlispRuntimeError(GlispError):
    """ Raised for host faults that fit no other kind"""


def from_host_exception(exc: BaseException) -> GlispError:
    """Map a stray host exception onto the glisp taxonomy."""
    if isinstance(exc, GlispError):
        return exc
    if isinstance(exc, ZeroDivisionError):
        return GlispArithmeticError("Division by zero")
    if isinstance(exc, ArithmeticError):
        return GlispArithmeticError(str(exc))
    if isinstance(exc, (TypeError, ValueError)):
        return GlispTypeError(str(exc))
    if isinstance(exc, (IndexError, KeyError)):
        return GlispLookupError(str(exc))
    if isinstance(exc, RecursionError):
        return GlispRuntimeError("Maximum evaluation depth exceeded")
    return GlispRuntimeError(f"{type(exc).__name__}: {exc}")
