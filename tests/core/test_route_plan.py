"""Route planning tests — request type parsing, paths, duplicate and policy rules.

Tests cover:
    - Every supported RequestType parses, case-insensitively
    - HEAD, None and non-strings raise UnsupportedRequestTypeError
    - Duplicate method+path in one group rejected; same path, other method accepted
    - Group CORS/upload policy is the OR of all flags, independent of order
"""

import pytest

from function_parser.core.domain_types import GroupKey, RequestType
from function_parser.core.errors import DuplicateRouteError, UnsupportedRequestTypeError
from function_parser.core.route_plan import (
    GroupPlan, RouteSpec, parse_request_type, plan_for, route_path,
)


def _handler():
    return None


def _route(method: RequestType, name: str = "invoices", source: str = "a.py") -> RouteSpec:
    return RouteSpec(
        method=method, path=route_path(GroupKey("billing"), name),
        name=name, handler=_handler, source=source,
    )


@pytest.mark.parametrize("value", ["GET", "post", " Put ", "delete", "PATCH"])
def test_supported_request_types_parse(value):
    assert parse_request_type(value) == RequestType(value.strip().upper())


def test_enum_member_passes_through():
    assert parse_request_type(RequestType.DELETE) is RequestType.DELETE


@pytest.mark.parametrize("value", ["HEAD", "OPTIONS", "", None, 42])
def test_unsupported_request_types_raise(value):
    with pytest.raises(UnsupportedRequestTypeError) as exc_info:
        parse_request_type(value)
    assert exc_info.value.code == "UNSUPPORTED_REQUEST_TYPE"
    assert "GET, POST, PUT, DELETE or PATCH" in exc_info.value.message


def test_route_path_shape():
    assert route_path(GroupKey("billing"), "refunds") == "/billing/refunds"
    assert route_path(GroupKey(""), "ping") == "//ping"


def test_route_label():
    assert _route(RequestType.GET).label == "GET /billing/invoices"


def test_duplicate_method_and_path_rejected():
    plan = GroupPlan(group=GroupKey("billing"))
    plan.add(_route(RequestType.GET, source="first.py"))
    with pytest.raises(DuplicateRouteError) as exc_info:
        plan.add(_route(RequestType.GET, source="second.py"))
    assert exc_info.value.first_source == "first.py"
    assert len(plan.routes) == 1


def test_same_path_different_methods_coexist():
    plan = GroupPlan(group=GroupKey("billing"))
    plan.add(_route(RequestType.GET))
    plan.add(_route(RequestType.POST))
    assert [r.label for r in plan.routes] == [
        "GET /billing/invoices", "POST /billing/invoices",
    ]


def test_policy_is_or_of_flags_regardless_of_order():
    plan = GroupPlan(group=GroupKey("billing"))
    plan.add(_route(RequestType.GET, "a"))
    plan.add(_route(RequestType.GET, "b"), enable_cors=True, enable_file_upload=True)
    plan.add(_route(RequestType.GET, "c"))
    assert plan.enable_cors is True
    assert plan.enable_file_upload is True


def test_plan_for_reuses_plan_per_group():
    plans = {}
    first = plan_for(plans, GroupKey("billing"), enable_cors=False)
    again = plan_for(plans, GroupKey("billing"), enable_cors=False)
    other = plan_for(plans, GroupKey("users"), enable_cors=True)
    assert first is again
    assert other is not first
    assert other.enable_cors is True
