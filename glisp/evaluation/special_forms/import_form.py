from __future__ import annotations

from typing import TYPE_CHECKING

from glisp.errors import GlispArityError, GlispTypeError
from glisp.evaluation.evaluator import evaluate
from glisp.types.base import Value
from glisp.types.context import Context
from glisp.types.native import NativeFunctionB
from glisp.types.sequence import List
from glisp.types.value import String

if TYPE_CHECKING:
    from glisp.modules.module_loader import ModuleRegistry


def make_import_form(registry: ModuleRegistry) -> NativeFunctionB:
    """Build the `import` form bound to one interpreter's module registry."""

    def import_form(context: Context, tail: List) -> Value:
        """
        Usage:
            (import "module_name")            ; bindings appear as module_name.x
            (import "module_name" "prefix.")  ; bindings appear as prefix.x
        Returns the module's context.
        """
        if len(tail) not in (1, 2):
            raise GlispArityError("import requires a module name and an optional prefix")
        args = [evaluate(arg, context) for arg in tail]
        if not all(isinstance(arg, String) for arg in args):
            raise GlispTypeError("import expects string arguments")
        name = args[0].value
        prefix = args[1].value if len(args) > 1 else None
        module = registry.import_into(context, name, prefix)
        return module.context

    return NativeFunctionB(import_form, "import")
