"""Endpoint Registrar — builds one published API per group from *.endpoint.py files.

Invariants:
    - Phase 1 (collect) loads every endpoint file in sorted order into GroupPlans
    - Phase 2 (assemble) builds router → app → adapter once per group
    - Any failure while collecting a file is wrapped in EndpointRegistrationError
      (file + group named, cause chained) and aborts the whole pass
    - Nothing is published for any group when the pass fails

Design Decisions:
    - Collect-then-assemble: per-group state machine NoRouter → RouterCreated →
      AddRoute* → Published runs once per group instead of remounting after every file
    - Descriptors given as plain mappings are validated into Endpoint
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from function_parser.config import Settings
from function_parser.core.domain_types import DiscoveredFile, GroupKey, ParserOptions
from function_parser.core.errors import (
    EndpointRegistrationError, ErrorContext, InvalidEndpointError,
)
from function_parser.core.grouping import describe
from function_parser.core.registration import RegistrationResult
from function_parser.core.route_plan import (
    GroupPlan, RouteSpec, parse_request_type, plan_for, route_path,
)
from function_parser.infrastructure.adapters import build_adapter
from function_parser.infrastructure.discovery import discover_files
from function_parser.infrastructure.module_loader import load_module
from function_parser.schemas.endpoint import Endpoint
from function_parser.services.router_builder import build_group_app, build_group_router

logger = logging.getLogger(__name__)


def read_endpoint(path: Path, export_name: str) -> Endpoint:
    """Load an endpoint module and return its validated descriptor."""
    module = load_module(path)
    raw = getattr(module, export_name, None)
    context = ErrorContext(file=str(path))
    if raw is None:
        raise InvalidEndpointError(
            f"{path.name} does not export '{export_name}'", context,
        )
    if isinstance(raw, Endpoint):
        return raw
    try:
        return Endpoint.model_validate(raw)
    except ValidationError as e:
        raise InvalidEndpointError(str(e), context) from e


def collect_route(
    found: DiscoveredFile, endpoint: Endpoint, plan: GroupPlan,
) -> RouteSpec:
    name = endpoint.name or found.name
    route = RouteSpec(
        method=parse_request_type(endpoint.request_type),
        path=route_path(found.group, name),
        name=name,
        handler=endpoint.handler,
        middlewares=tuple(endpoint.options.middlewares),
        source=str(found.path),
    )
    if endpoint.options.enable_cors and not plan.enable_cors:
        logger.debug(f"Cors enabled for {name}", extra={"group": found.group, "endpoint": name})
    if endpoint.options.enable_file_upload:
        logger.debug(f"File upload enabled for {name}", extra={"group": found.group, "endpoint": name})
    plan.add(
        route,
        enable_cors=endpoint.options.enable_cors,
        enable_file_upload=endpoint.options.enable_file_upload,
    )
    return route


def collect_plans(
    root: str | Path, options: ParserOptions, settings: Settings,
) -> dict[GroupKey, GroupPlan]:
    """Phase 1: one GroupPlan per group, every route validated."""
    plans: dict[GroupKey, GroupPlan] = {}
    files = discover_files(root, settings.endpoint_suffix, settings.ignore_dirs)
    for path in files:
        found = describe(path, settings.endpoint_suffix, options.group_by_folder)
        plan = plan_for(plans, found.group, options.enable_cors)
        try:
            endpoint = read_endpoint(path, settings.endpoint_export)
            collect_route(found, endpoint, plan)
        except Exception as e:
            error = EndpointRegistrationError(path, found.group, e)
            logger.error(error.message, extra=error.to_log_extra())
            raise error from e
    return plans


def build_restful_api(
    root: str | Path, options: ParserOptions, settings: Settings,
) -> RegistrationResult:
    """Discover every endpoint file and publish one adapter per group."""
    logger.debug("Restful Endpoints - Building...")
    result = RegistrationResult()
    for group, plan in collect_plans(root, options, settings).items():
        router = build_group_router(plan)
        app = build_group_app(plan, router, settings)
        exports = result.group(group)
        exports.app = app
        exports.api = build_adapter(app, settings.adapter)
        exports.routes = [route.label for route in plan.routes]
    logger.debug(
        f"Restful Endpoints - Built {len(result.groups)} group api(s)",
        extra={"group": ",".join(result.groups)},
    )
    return result
