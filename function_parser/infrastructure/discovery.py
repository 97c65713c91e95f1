"""File Discovery — recursive search for files carrying a suffix marker.

Invariants:
    - Ignored directory names are pruned before descending (never listed)
    - Returned paths keep the root prefix exactly as given (no resolve())
    - Output is sorted: traversal order of the filesystem never leaks into registration
    - A missing root yields [] (logged), other OS errors propagate

Design Decisions:
    - os.walk over Path.rglob: rglob cannot prune dependency caches such as .venv
"""

import logging
import os
from pathlib import Path
from typing import Iterable

from function_parser.core.grouping import file_pattern

logger = logging.getLogger(__name__)


def _raise(error: OSError) -> None:
    raise error


def discover_files(
    root: str | os.PathLike, suffix: str, ignore_dirs: Iterable[str] = (),
) -> list[Path]:
    """All files under root named '*{suffix}.py', sorted."""
    root_path = Path(root)
    if not root_path.is_dir():
        logger.warning(
            f"Root path {root_path} is not a directory; nothing to discover",
            extra={"file": str(root_path)},
        )
        return []

    ignored = set(ignore_dirs)
    ending = file_pattern(suffix)
    matches: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root_path, onerror=_raise):
        dirnames[:] = [d for d in dirnames if d not in ignored]
        matches.extend(
            Path(dirpath) / filename
            for filename in filenames
            if filename.endswith(ending) and filename != ending
        )
    return sorted(matches)
