"""Reactive Registrar — groups the exports of every *.function.py file.

Invariants:
    - FUNCTION_NAME set → only files whose logical name equals it are loaded at all
    - Exports merged per group under the configured CollisionPolicy
    - Load failures propagate unwrapped (no per-file context added)

Design Decisions:
    - Selector checked before loading: a cold start only imports the function it serves
"""

import logging
from pathlib import Path

from function_parser.config import Settings
from function_parser.core.domain_types import GroupKey, ParserOptions
from function_parser.core.exports import merge_exports
from function_parser.core.grouping import describe
from function_parser.core.registration import RegistrationResult
from function_parser.infrastructure.discovery import discover_files
from function_parser.infrastructure.module_loader import load_module, public_exports

logger = logging.getLogger(__name__)


def is_selected(name: str, selector: str | None) -> bool:
    return not selector or selector == name


def build_reactive_functions(
    root: str | Path, options: ParserOptions, settings: Settings,
) -> RegistrationResult:
    logger.debug("Reactive Functions - Building...")
    result = RegistrationResult()
    files = discover_files(root, settings.function_suffix, settings.ignore_dirs)
    for path in files:
        found = describe(path, settings.function_suffix, options.group_by_folder)
        if not is_selected(found.name, settings.function_name):
            continue

        exports = result.group(GroupKey(found.group))
        merged, collisions = merge_exports(
            found.group, exports.handlers, public_exports(load_module(path)),
            settings.collision_policy, source=str(path),
        )
        if collisions:
            logger.warning(
                f"Reactive Functions - {path} overrides {', '.join(collisions)} "
                f"in group '{found.group}'",
                extra={"group": found.group, "file": str(path)},
            )
        exports.handlers = merged
        logger.debug(
            f"Reactive Functions - Added {found.group}/{found.name}",
            extra={"group": found.group, "function_name": found.name},
        )
    logger.debug("Reactive Functions - Built")
    return result
