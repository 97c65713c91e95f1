"""Router Builder — turns a finished GroupPlan into an APIRouter and a group app.

Invariants:
    - Exactly one APIRouter and one FastAPI app per group, built once
    - Upload parsing (router dependency) and CORS (app middleware) are decided by the
      plan before the first route is added, so they cover every route of the group
    - Route dependencies = the endpoint's middlewares, in declared order
    - The router is included at "/" — routes keep their full /{group}/{name} path

Design Decisions:
    - Explicit dict from RequestType to router method over getattr: every supported
      method visible in one place, adding one means editing this dict
"""

import logging

from fastapi import APIRouter, Depends, FastAPI

from function_parser.api.error_handlers import register_error_handlers
from function_parser.api.middleware import add_cors, parse_file_uploads
from function_parser.config import Settings
from function_parser.core.domain_types import RequestType
from function_parser.core.errors import UnsupportedRequestTypeError
from function_parser.core.route_plan import GroupPlan, RouteSpec

logger = logging.getLogger(__name__)


def _route_registrars(router: APIRouter) -> dict:
    return {
        RequestType.GET: router.get,
        RequestType.POST: router.post,
        RequestType.PUT: router.put,
        RequestType.DELETE: router.delete,
        RequestType.PATCH: router.patch,
    }


def add_route(router: APIRouter, route: RouteSpec) -> None:
    """Register one route on the group router (the five-way dispatch)."""
    registrar = _route_registrars(router).get(route.method)
    if registrar is None:
        raise UnsupportedRequestTypeError(route.method)
    decorator = registrar(
        route.path,
        name=route.name,
        dependencies=[Depends(middleware) for middleware in route.middlewares],
    )
    decorator(route.handler)


def build_group_router(plan: GroupPlan) -> APIRouter:
    dependencies = [Depends(parse_file_uploads)] if plan.enable_file_upload else []
    router = APIRouter(dependencies=dependencies)
    for route in plan.routes:
        add_route(router, route)
        logger.debug(
            f"Restful Endpoints - Added {plan.group}/{route.method.value}:{route.name}",
            extra={"group": plan.group, "method": route.method.value, "path": route.path},
        )
    return router


def build_group_app(plan: GroupPlan, router: APIRouter, settings: Settings) -> FastAPI:
    """Mount the group router at the root of a dedicated app."""
    app = FastAPI(title=f"{plan.group or 'root'} api")
    if plan.enable_cors:
        add_cors(app, settings)
    register_error_handlers(app, plan.group)
    app.include_router(router, prefix="")
    return app
