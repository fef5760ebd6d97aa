from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List

# Resolve installation dir (glisp package directory)
_GLISP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_MODULES_DIRS = [_GLISP_DIR / 'modules' / 'lib']
MODULE_SUFFIX = '.glisp'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_modules_roots() -> List[Path]:
    return paths_from_env('GLISP_MODULES_PATH', _DEFAULT_MODULES_DIRS)


def get_log_level() -> int:
    name = os.environ.get('GLISP_LOG_LEVEL', 'WARNING').upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging() -> None:
    """Apply GLISP_LOG_LEVEL to the `glisp` logger hierarchy. Handlers are left to the host."""
    logging.getLogger('glisp').setLevel(get_log_level())
