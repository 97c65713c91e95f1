"""Module Loader — imports user files by path and reads what they export.

Invariants:
    - Each file gets a unique module name derived from its path (no clashes between groups)
    - The module is in sys.modules while it executes (dataclasses/pydantic need it)
    - A failed load leaves no half-initialized module in sys.modules; the error propagates
    - Loading twice re-executes the file (no caching across construction passes)

Design Decisions:
    - spec_from_file_location over sys.path manipulation: '.function.py' names are not
      importable identifiers, and user folders must not shadow installed packages
    - Exports = __all__ when present, else public non-module attributes minus names bound
      by import (a foreign function/class whose __name__ is the name it is bound to).
      Values produced by a call (decorators, factories) are kept whatever their __module__
"""

import hashlib
import importlib.util
import inspect
import logging
import re
import sys
from pathlib import Path
from types import ModuleType
from typing import Any

logger = logging.getLogger(__name__)

MODULE_PREFIX = "function_parser_user"

_NON_IDENTIFIER = re.compile(r"\W")


def module_name_for(path: Path) -> str:
    """Stable, importable name: prefix + sanitized stem + short path digest."""
    resolved = str(Path(path).resolve())
    digest = hashlib.sha1(resolved.encode("utf-8")).hexdigest()[:10]
    stem = _NON_IDENTIFIER.sub("_", Path(path).name.removesuffix(".py"))
    return f"{MODULE_PREFIX}_{stem}_{digest}"


def load_module(path: Path) -> ModuleType:
    name = module_name_for(path)
    spec = importlib.util.spec_from_file_location(name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load {path}: no module loader for this file type")
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(name, None)
        raise
    return module


def _is_imported(module: ModuleType, name: str, value: Any) -> bool:
    """True for `from x import name`: a foreign callable still under its own name."""
    if not (inspect.isfunction(value) or inspect.isclass(value)):
        return False
    foreign = getattr(value, "__module__", None) != module.__name__
    return foreign and getattr(value, "__name__", None) == name


def _is_own_export(module: ModuleType, name: str, value: Any) -> bool:
    if name.startswith("_") or inspect.ismodule(value):
        return False
    if _is_imported(module, name, value):
        logger.debug(
            f"Skipping imported {value.__module__}.{name} in {module.__file__}",
            extra={"file": module.__file__, "function_name": name},
        )
        return False
    return True


def public_exports(module: ModuleType) -> dict[str, Any]:
    """What a function file publishes into its group."""
    names = getattr(module, "__all__", None)
    if names is not None:
        return {name: getattr(module, name) for name in names}
    return {
        name: value for name, value in vars(module).items()
        if _is_own_export(module, name, value)
    }
