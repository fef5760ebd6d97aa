"""Lexical environment frames for glisp.

A Context stores bindings of Symbols to values and links to its parent
through `parent`. A child owns its own table and only references its
parent. Contexts can also import each other's bindings under a prefix; the
source context remembers its importers so later changes can be pushed to
them with `propagate`.
"""

from __future__ import annotations

import threading
import weakref
from io import StringIO
from typing import Mapping, Optional

from glisp.errors import GlispLookupError, GlispTypeError
from glisp.types.base import Value
from glisp.types.datatype import CONTEXT_TYPE, DataType
from glisp.types.symbol import Symbol


class Context(Value):
    """Hierarchical mapping from Symbols to glisp values."""

    __slots__ = (
        "symbols",
        "parent",
        "name",
        "usages",
        "imported",
        "_lock",
        "__weakref__",
    )

    def __init__(self, parent: Optional[Context] = None, name: str = ""):
        self.symbols: dict[Symbol, Value] = {}
        self.parent: Context | None = parent
        self.name = name
        # importer -> prefixes it imported this context under
        self.usages: weakref.WeakKeyDictionary[Context, set[str]] = weakref.WeakKeyDictionary()
        # source -> {prefix: names brought in by that import}
        self.imported: weakref.WeakKeyDictionary[Context, dict[str, set[Symbol]]] = weakref.WeakKeyDictionary()
        self._lock = threading.RLock()

    # --- Value protocol ---
    def get_type(self) -> DataType:
        return CONTEXT_TYPE

    def equals(self, other: Value) -> bool:
        return self is other

    def __hash__(self):
        return id(self)

    # --- bindings ---
    def define(self, name: Symbol, value: Value) -> None:
        """Bind `name` in this frame only, shadowing any parent binding."""
        if not isinstance(name, Symbol):
            raise GlispTypeError(f"Cannot define {name} as a symbol")
        if not isinstance(value, Value):
            raise GlispTypeError(f"Cannot bind {name} to non-glisp value {value!r}")
        with self._lock:
            self.symbols[name] = value

    def find(self, name: Symbol) -> Optional[Context]:
        """Find the nearest context in the chain that binds `name`."""
        ctx: Optional[Context] = self
        while ctx is not None:
            with ctx._lock:
                if name in ctx.symbols:
                    return ctx
            ctx = ctx.parent
        return None

    def lookup(self, name: Symbol) -> Value:
        """Return the nearest binding of `name`; raise GlispLookupError if none."""
        ctx: Optional[Context] = self
        while ctx is not None:
            with ctx._lock:
                value = ctx.symbols.get(name)
            if value is not None:
                return value
            ctx = ctx.parent
        raise GlispLookupError(f"Undefined symbol {name}")

    def is_defined(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def root(self) -> Context:
        ctx = self
        while ctx.parent is not None:
            ctx = ctx.parent
        return ctx

    # --- imports ---
    def import_from(self, other: Context, prefix: str = "") -> None:
        """Copy every binding of `other` into this frame as `prefix + name`.

        `other` records this context as a user, so `other.propagate()` can
        re-import after `other` changes.
        """
        self.reimport(other, prefix)
        with other._lock:
            other.usages.setdefault(self, set()).add(prefix)

    def reimport(self, other: Context, prefix: str = "") -> None:
        """Refresh the bindings previously imported from `other` under `prefix`."""
        with other._lock:
            snapshot = dict(other.symbols)
        with self._lock:
            fresh = {Symbol(prefix + name.id): value for name, value in snapshot.items()}
            by_prefix = self.imported.setdefault(other, {})
            for stale in by_prefix.get(prefix, set()) - fresh.keys():
                self.symbols.pop(stale, None)
            self.symbols.update(fresh)
            by_prefix[prefix] = set(fresh)

    def propagate(self) -> None:
        """Re-import this context into every live importer."""
        with self._lock:
            users = [(ctx, set(prefixes)) for ctx, prefixes in self.usages.items()]
        for ctx, prefixes in users:
            for prefix in prefixes:
                ctx.reimport(self, prefix)

    def update(self, mapping: Mapping[Symbol, Value]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for name, value in mapping.items():
            self.define(name, value)

    def replace_bindings(self, mapping: Mapping[Symbol, Value]) -> None:
        """Swap this frame's whole table in one step."""
        with self._lock:
            self.symbols = dict(mapping)

    def locked(self) -> threading.RLock:
        """The frame lock; hold it to make a series of changes appear atomic."""
        return self._lock

    # --- rendering ---
    def _write_symbols(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.symbols.items()))
        buffer.write("}")

    def __str__(self) -> str:
        label = self.name or "anonymous"
        return f"Context<{label}>"

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Context chain: ")
            ctx: Optional[Context] = self
            chain = []
            while ctx is not None:
                with StringIO() as frame:
                    ctx._write_symbols(frame)
                    chain.append(frame.getvalue())
                ctx = ctx.parent
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
