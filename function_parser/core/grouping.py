"""Grouping & Naming — maps a discovered file path to its group key and logical name.

Invariants:
    - All functions are PURE: no filesystem access, paths are treated as strings of segments
    - group_by_folder=True → grandparent folder name; False → parent folder name
    - Missing segments degrade to "" (accepted, never an error)
    - Logical name = filename without ".py" and without the suffix marker

Design Decisions:
    - Segments come from the path as discovered (root included, not resolved):
      a file directly under root groups by root's parent when group_by_folder is on
    - Shared by both registration passes so functions and endpoints group identically
"""

from pathlib import PurePath

from function_parser.core.domain_types import DiscoveredFile, GroupKey

MODULE_EXTENSION = ".py"


def directory_segments(path: PurePath) -> list[str]:
    """Parent directory's segments, anchor ("/" or drive) excluded."""
    parent = path.parent
    return [part for part in parent.parts if part != parent.anchor]


def group_key_for(path: PurePath, group_by_folder: bool) -> GroupKey:
    segments = directory_segments(path)
    index = -2 if group_by_folder else -1
    try:
        return GroupKey(segments[index])
    except IndexError:
        return GroupKey("")


def logical_name(path: PurePath, suffix: str) -> str:
    """'invoices.endpoint.py' with suffix '.endpoint' → 'invoices'."""
    stem = path.name.removesuffix(MODULE_EXTENSION)
    return stem.removesuffix(suffix)


def file_pattern(suffix: str) -> str:
    """Filename ending that marks a file for discovery."""
    return f"{suffix}{MODULE_EXTENSION}"


def describe(path: PurePath, suffix: str, group_by_folder: bool) -> DiscoveredFile:
    return DiscoveredFile(
        path=path,
        group=group_key_for(path, group_by_folder),
        name=logical_name(path, suffix),
    )
