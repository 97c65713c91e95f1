"""Export Merging — folds one function file's exports into its group's bag.

Invariants:
    - merge_exports never mutates its inputs; returns the merged bag and the collided names
    - OVERWRITE: last writer wins (discovery is sorted, so the winner is deterministic)
    - ERROR: any collision raises ExportCollisionError before anything is merged

Design Decisions:
    - Collision policy explicit instead of inherited from traversal order
"""

from typing import Any, Mapping

from function_parser.core.domain_types import CollisionPolicy, GroupKey
from function_parser.core.errors import ErrorContext, ExportCollisionError


def merge_exports(
    group: GroupKey,
    existing: Mapping[str, Any],
    incoming: Mapping[str, Any],
    policy: CollisionPolicy = CollisionPolicy.OVERWRITE,
    source: str | None = None,
) -> tuple[dict[str, Any], list[str]]:
    """Return (merged, collisions). Collisions are names present in both with different values."""
    collisions = [
        name for name, value in incoming.items()
        if name in existing and existing[name] is not value
    ]
    if collisions and policy == CollisionPolicy.ERROR:
        raise ExportCollisionError(
            group, collisions, ErrorContext(file=source, group=group),
        )
    return {**existing, **incoming}, collisions
