"""Error Handlers — tag request failures with the group and endpoint they came from.

Invariants:
    - Status codes are FastAPI's own: 422 for request validation, 500 for anything unhandled
    - Every failure is logged with group, endpoint (route name), method and path
    - The 500 body names group and endpoint but never the exception text
    - HTTPException (raised by middlewares to short-circuit) keeps FastAPI's default handling

Design Decisions:
    - Validation responses delegate to FastAPI's default handler after logging, so user
      routes answer exactly as a hand-written FastAPI app would
    - Route name read from scope["route"] (set once the router matched); None before matching
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from function_parser.core.domain_types import GroupKey

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI, group: GroupKey) -> None:
    """Install the group's failure logging on its app."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        endpoint = endpoint_name(request)
        logger.warning(
            f"Restful Endpoints - Invalid request to {group}/{endpoint}: {exc.errors()}",
            extra=_request_extra(request, group, endpoint),
        )
        return await request_validation_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        endpoint = endpoint_name(request)
        logger.error(
            f"Restful Endpoints - {group}/{endpoint} failed: {exc}",
            exc_info=exc,
            extra=_request_extra(request, group, endpoint),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "group": group,
                    "endpoint": endpoint,
                },
            },
        )


def endpoint_name(request: Request) -> str | None:
    route = request.scope.get("route")
    return getattr(route, "name", None)


def _request_extra(request: Request, group: GroupKey, endpoint: str | None) -> dict:
    return {
        "group": group,
        "endpoint": endpoint,
        "method": request.method,
        "path": request.url.path,
    }
