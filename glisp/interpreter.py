"""The glisp runtime instance.

An Interpreter owns a root ("main") context with the builtins, the module
registry, and the host objects registered for scripts. Nothing is shared
between interpreters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Literal, Optional

from glisp.builtin.env_builtin import register
from glisp.errors import GlispError
from glisp.evaluation.evaluator import evaluate_string
from glisp.evaluation.special_forms.import_form import make_import_form
from glisp.modules.module_loader import Module, ModuleRegistry
from glisp.types.base import Value
from glisp.types.context import Context
from glisp.types.datatype import DataType
from glisp.types.native import NativeFunction, NativeFunctionB, NativeObject
from glisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def new_context() -> Context:
    """A root context holding the builtins, special forms and constants."""
    context = Context(name="main")
    register(context)
    return context


@dataclass
class Outcome:
    """The structured result of evaluating code without raising."""
    status: Literal['success', 'error']
    value: Optional[Value] = None
    error: Optional[GlispError] = None

    @property
    def ok(self) -> bool:
        return self.status == 'success'

    def format_error(self) -> str:
        if self.error is None:
            return ""
        return f"{type(self.error).__name__}: {self.error}"


class Interpreter:
    """
    Orchestrates reading and evaluating glisp code.
    Maintains the root context and module registry across calls.
    """

    def __init__(self, prelude: str | None = None):
        self.context: Context = new_context()
        self.modules = ModuleRegistry(self.context)
        self.objects: Dict[str, NativeObject] = {}
        self.context.define(Symbol("import"), make_import_form(self.modules))

        if prelude:
            self.eval(prelude)

    def eval(self, code: str) -> Value:
        """Evaluate every expression in `code`; raises GlispError on failure."""
        return evaluate_string(code, self.context)

    def run(self, code: str) -> Outcome:
        """Evaluate `code`, reporting a failure as an Outcome instead of raising."""
        try:
            return Outcome('success', value=self.eval(code))
        except GlispError as exc:
            logger.warning("evaluation failed: %s", exc)
            return Outcome('error', error=exc)

    # --- host extension ---
    def define_native(
        self, name: str, fn: Callable[[Context, Any], Value], lazy: bool = False
    ) -> NativeFunction:
        """Bind a host function; lazy natives receive unevaluated arguments."""
        native = NativeFunctionB(fn, name) if lazy else NativeFunction(fn, name)
        self.context.define(Symbol(name), native)
        return native

    def define_type(self, name: str) -> DataType:
        """Bind a host-defined DataType so scripts can dispatch on it."""
        datatype = DataType(name)
        self.context.define(Symbol(name), datatype)
        return datatype

    def register_object(self, name: str, obj: Any, type_name: str | None = None) -> NativeObject:
        """Expose a host object (e.g. an event bus handle) to scripts as `name`."""
        if type_name is not None:
            existing = self.context.symbols.get(Symbol(type_name))
            datatype = existing if isinstance(existing, DataType) else self.define_type(type_name)
            handle = NativeObject(obj, datatype)
        else:
            handle = NativeObject(obj)
        self.objects[name] = handle
        self.context.define(Symbol(name), handle)
        return handle

    # --- modules ---
    def load_module(self, name: str, source: str) -> Module:
        return self.modules.load(name, source)

    def load_module_file(self, name: str) -> Module:
        return self.modules.load_file(name)

    def reload_module(self, name: str, source: str | None = None) -> Outcome:
        """Reload a module; a failure leaves the old bindings in place."""
        try:
            module = self.modules.reload(name, source)
            return Outcome('success', value=module.context)
        except GlispError as exc:
            logger.warning("reload of module %s failed: %s", name, exc)
            return Outcome('error', error=exc)
