"""Named module contexts with reload and re-import propagation.

A module is a Context evaluated from source text, whose parent is the
interpreter's root context. Other contexts import it under a prefix. When
the host detects a change (file watching is the host's job) it calls
`ModuleRegistry.reload`, which re-evaluates the source and pushes the new
bindings into every importer.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from glisp.config import MODULE_SUFFIX, get_modules_roots
from glisp.errors import GlispError, GlispLookupError
from glisp.evaluation.evaluator import evaluate_string
from glisp.types.context import Context

logger = logging.getLogger(__name__)

# Held for the whole of every reload. A reload holds its module context's lock
# while it runs the new source, and that source may take other contexts'
# locks through `import`; one reload at a time keeps those in a single order.
_reload_lock = threading.RLock()


@dataclass
class Module:
    name: str
    context: Context
    source: str
    path: Optional[Path] = None


def reload(context: Context, source: str) -> None:
    """Re-evaluate `source` as the new content of `context`.

    Runs as a critical section on the context's lock, so a concurrent lookup
    sees either the old or the new table and never a half-built one. On
    failure the old bindings are restored and the error re-raised. Importers
    are refreshed afterwards.
    """
    with _reload_lock:
        with context.locked():
            previous = dict(context.symbols)
            context.replace_bindings({})
            try:
                evaluate_string(source, context)
            except GlispError:
                context.replace_bindings(previous)
                raise
        context.propagate()


# Map a dotted module name to a file underneath a set of roots

def _name_to_relpath(name: str) -> Path:
    return Path(*name.split('.')).with_suffix(MODULE_SUFFIX)


def resolve_module(name: str) -> Optional[Path]:
    rel = _name_to_relpath(name)
    for root in get_modules_roots():
        candidate = root / rel
        if candidate.is_file():
            return candidate
    return None


class ModuleRegistry:
    """The modules known to one interpreter, keyed by name."""

    def __init__(self, root: Context):
        self.root = root
        self._modules: Dict[str, Module] = {}
        self._lock = threading.RLock()

    def get(self, name: str) -> Optional[Module]:
        with self._lock:
            return self._modules.get(name)

    def load(self, name: str, source: str, path: Optional[Path] = None) -> Module:
        """Evaluate `source` into a fresh module context and register it."""
        context = Context(parent=self.root, name=name)
        evaluate_string(source, context)
        module = Module(name=name, context=context, source=source, path=path)
        with self._lock:
            self._modules[name] = module
        logger.debug("loaded module %s (%d bindings)", name, len(context.symbols))
        return module

    def load_file(self, name: str) -> Module:
        path = resolve_module(name)
        if path is None:
            raise GlispLookupError(f"Cannot find module '{name}' in GLISP_MODULES_PATH")
        return self.load(name, path.read_text(encoding='utf-8'), path)

    def reload(self, name: str, source: Optional[str] = None) -> Module:
        """Reload a module from new source, or from its file when source is None."""
        module = self.get(name)
        if module is None:
            raise GlispLookupError(f"Module '{name}' is not loaded")
        if source is None:
            if module.path is None:
                raise GlispLookupError(f"Module '{name}' was not loaded from a file")
            source = module.path.read_text(encoding='utf-8')
        reload(module.context, source)
        module.source = source
        logger.debug("reloaded module %s", name)
        return module

    def import_into(self, context: Context, name: str, prefix: Optional[str] = None) -> Module:
        """Import module `name` into `context`, loading it from disk if needed."""
        module = self.get(name) or self.load_file(name)
        context.import_from(module.context, f"{name}." if prefix is None else prefix)
        logger.debug("imported module %s into %s", name, context)
        return module
