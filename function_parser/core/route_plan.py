"""Route Planning — collects route specs per group before any router exists.

Invariants:
    - Route path is always /{group}/{name}; no path params, no wildcards
    - A (method, path) pair is registered at most once per group
    - Group-wide CORS / upload policy = OR of the global flag and every endpoint's flag,
      fully resolved before routes are materialized
    - Request type parsing is case-insensitive; anything outside RequestType is rejected

Design Decisions:
    - Two-phase (plan, then build): a router is built once per group from a finished
      plan, so middleware scope no longer depends on file order
    - Plans are plain dataclasses: testable without FastAPI
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from function_parser.core.domain_types import GroupKey, RequestType
from function_parser.core.errors import (
    DuplicateRouteError,
    ErrorContext,
    UnsupportedRequestTypeError,
)


def parse_request_type(value: object) -> RequestType:
    """Map a declared request type onto RequestType or raise."""
    if isinstance(value, RequestType):
        return value
    if isinstance(value, str):
        try:
            return RequestType(value.strip().upper())
        except ValueError:
            pass
    raise UnsupportedRequestTypeError(value)


def route_path(group: GroupKey, name: str) -> str:
    return f"/{group}/{name}"


@dataclass(frozen=True)
class RouteSpec:
    """One endpoint file translated into a route."""
    method: RequestType
    path: str
    name: str
    handler: Callable[..., Any]
    middlewares: tuple[Callable[..., Any], ...] = ()
    source: str = ""

    @property
    def label(self) -> str:
        return f"{self.method.value} {self.path}"


@dataclass
class GroupPlan:
    """Every route of one group plus the group-wide middleware policy."""
    group: GroupKey
    enable_cors: bool = False
    enable_file_upload: bool = False
    routes: list[RouteSpec] = field(default_factory=list)

    def add(
        self, route: RouteSpec,
        enable_cors: bool = False, enable_file_upload: bool = False,
    ) -> None:
        for existing in self.routes:
            if existing.method == route.method and existing.path == route.path:
                raise DuplicateRouteError(
                    route.method.value, route.path, existing.source,
                    ErrorContext(file=route.source, group=self.group, name=route.name),
                )
        self.routes.append(route)
        self.enable_cors = self.enable_cors or enable_cors
        self.enable_file_upload = self.enable_file_upload or enable_file_upload


def plan_for(plans: dict[GroupKey, GroupPlan], group: GroupKey, enable_cors: bool) -> GroupPlan:
    """Resolve or create the plan for a group (first file for a group allocates)."""
    plan = plans.get(group)
    if plan is None:
        plan = GroupPlan(group=group, enable_cors=enable_cors)
        plans[group] = plan
    return plan
