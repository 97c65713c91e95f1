"""Registration Result — the value a discovery pass returns instead of mutating exports.

Invariants:
    - One GroupExports per group key; handlers and api published under namespace[group]
    - merge_into only touches keys for groups present in the result
    - namespace[group] is rebuilt as {**existing, **handlers} (plus api), never mutated in place
    - A non-mapping already bound to the group name (e.g. an imported module) is replaced, logged
    - A published api overwrites any earlier api of that group

Design Decisions:
    - Result value over direct mutation: passes are testable without a namespace object
    - Namespace may be any MutableMapping (globals()) or a module (its __dict__ is used)
"""

import logging
from dataclasses import dataclass, field
from types import ModuleType
from typing import Any, Mapping, MutableMapping

from function_parser.core.domain_types import GroupKey

logger = logging.getLogger(__name__)

API_KEY = "api"


@dataclass
class GroupExports:
    """Everything one group publishes."""
    handlers: dict[str, Any] = field(default_factory=dict)
    app: Any = None
    api: Any = None
    routes: list[str] = field(default_factory=list)


@dataclass
class RegistrationResult:
    groups: dict[GroupKey, GroupExports] = field(default_factory=dict)

    def group(self, key: GroupKey) -> GroupExports:
        """Resolve or create the exports bag for a group."""
        if key not in self.groups:
            self.groups[key] = GroupExports()
        return self.groups[key]

    def routes(self) -> list[str]:
        return [route for exports in self.groups.values() for route in exports.routes]

    def update(self, other: "RegistrationResult") -> None:
        """Fold another pass's result into this one (later values win)."""
        for key, incoming in other.groups.items():
            current = self.group(key)
            current.handlers.update(incoming.handlers)
            current.routes.extend(incoming.routes)
            if incoming.api is not None:
                current.app = incoming.app
                current.api = incoming.api

    def merge_into(self, namespace: MutableMapping[str, Any] | ModuleType) -> None:
        target = vars(namespace) if isinstance(namespace, ModuleType) else namespace
        for key, exports in self.groups.items():
            bag = {**_existing_members(target, key), **exports.handlers}
            if exports.api is not None:
                if API_KEY in bag:
                    logger.warning(
                        f"Replacing existing '{API_KEY}' export of group '{key}'",
                        extra={"group": key},
                    )
                bag[API_KEY] = exports.api
            target[key] = bag


def _existing_members(target: MutableMapping[str, Any], key: str) -> Mapping[str, Any]:
    existing = target.get(key)
    if existing is None or isinstance(existing, Mapping):
        return existing or {}
    logger.warning(
        f"Replacing non-mapping {type(existing).__name__} bound to group name '{key}'",
        extra={"group": key},
    )
    return {}
