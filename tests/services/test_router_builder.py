"""Router builder tests — five-way dispatch and group app assembly from plans."""

from fastapi.routing import APIRoute
from starlette.middleware.cors import CORSMiddleware

from function_parser.core.domain_types import GroupKey, RequestType
from function_parser.core.route_plan import GroupPlan, RouteSpec, route_path
from function_parser.services.router_builder import build_group_app, build_group_router


async def _handler():
    return {}


def _plan(**flags) -> GroupPlan:
    plan = GroupPlan(group=GroupKey("billing"), **flags)
    for method in RequestType:
        name = method.value.lower()
        plan.add(RouteSpec(
            method=method, path=route_path(plan.group, name), name=name, handler=_handler,
        ))
    return plan


def _api_routes(router_or_app) -> dict[str, set[str]]:
    return {
        route.path: route.methods
        for route in router_or_app.routes
        if isinstance(route, APIRoute)
    }


def test_every_request_type_registered_with_its_method():
    router = build_group_router(_plan())
    assert _api_routes(router) == {
        "/billing/get": {"GET"},
        "/billing/post": {"POST"},
        "/billing/put": {"PUT"},
        "/billing/delete": {"DELETE"},
        "/billing/patch": {"PATCH"},
    }


def test_upload_policy_adds_router_dependency_to_every_route():
    router = build_group_router(_plan(enable_file_upload=True))
    for route in router.routes:
        assert len(route.dependencies) == 1


def test_no_upload_policy_no_dependencies():
    router = build_group_router(_plan())
    assert all(not route.dependencies for route in router.routes)


def test_group_app_mounts_router_at_root(settings):
    plan = _plan()
    app = build_group_app(plan, build_group_router(plan), settings)
    assert set(_api_routes(app)) == {
        "/billing/get", "/billing/post", "/billing/put", "/billing/delete", "/billing/patch",
    }


def test_cors_middleware_only_when_policy_enabled(settings):
    plain = _plan()
    cors = _plan(enable_cors=True)
    plain_app = build_group_app(plain, build_group_router(plain), settings)
    cors_app = build_group_app(cors, build_group_router(cors), settings)
    assert not any(m.cls is CORSMiddleware for m in plain_app.user_middleware)
    assert any(m.cls is CORSMiddleware for m in cors_app.user_middleware)
