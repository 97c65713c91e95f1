"""Error Hierarchy — typed, categorized exceptions for every registration failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Registration errors are fatal: they abort the construction pass
    - EndpointRegistrationError always names the offending file and group
    - to_log_extra() only emits primitives (safe for JSONFormatter)

Design Decisions:
    - Single hierarchy with FunctionParserError base: callers catch one type
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    REGISTRATION = "registration"


@dataclass
class ErrorContext:
    """Where in the discovery pass the error happened."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    file: str | None = None
    group: str | None = None
    name: str | None = None
    debug_info: dict[str, Any] | None = None


class FunctionParserError(Exception):
    """Base exception for all function-parser errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_log_extra(self) -> dict:
        """Structured fields for logger.error(..., extra=...)."""
        extra = {"error_code": self.code}
        if self.context.file is not None:
            extra["file"] = self.context.file
        if self.context.group is not None:
            extra["group"] = self.context.group
        if self.context.name is not None:
            extra["endpoint"] = self.context.name
        return extra


# ─── Configuration Errors ───────────────────────────────────────

class RootPathRequiredError(FunctionParserError):
    """FunctionParser constructed without a root path."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "root_path is required to find the functions.",
            "ROOT_PATH_REQUIRED", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context,
        )


class UnsupportedRequestTypeError(FunctionParserError):
    """Endpoint declared a request type outside GET/POST/PUT/DELETE/PATCH."""
    def __init__(self, request_type: object, context: ErrorContext | None = None):
        super().__init__(
            f"An unsupported request type ({request_type!r}) was defined for an endpoint. "
            "Make sure the endpoint module exports a request_type using "
            "function_parser.core.domain_types.RequestType "
            "(GET, POST, PUT, DELETE or PATCH). "
            "This value is required to add the endpoint to the API.",
            "UNSUPPORTED_REQUEST_TYPE", ErrorCategory.CONFIGURATION,
            ErrorSeverity.ERROR, context,
        )
        self.request_type = request_type


class InvalidEndpointError(FunctionParserError):
    """Endpoint module is missing its descriptor or the descriptor is malformed."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid endpoint descriptor: {reason}",
            "INVALID_ENDPOINT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.reason = reason


# ─── Conflict Errors ────────────────────────────────────────────

class DuplicateRouteError(FunctionParserError):
    """Two endpoint files in one group resolve to the same method and path."""
    def __init__(
        self, method: str, path: str, first_source: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Route {method} {path} is already registered by {first_source}",
            "DUPLICATE_ROUTE", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context,
        )
        self.method = method
        self.path = path
        self.first_source = first_source


class ExportCollisionError(FunctionParserError):
    """Two function files export the same name into one group."""
    def __init__(self, group: str, names: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Exports {', '.join(sorted(names))} already registered in group '{group}'",
            "EXPORT_COLLISION", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context,
        )
        self.group = group
        self.names = names


# ─── Registration Errors ────────────────────────────────────────

class EndpointRegistrationError(FunctionParserError):
    """Wraps any failure while loading or registering one endpoint file."""
    def __init__(self, file: Path | str, group: str, cause: BaseException):
        super().__init__(
            f"Restful Endpoints - Failed to add the endpoint defined in {file} "
            f"to the {group!r} API: {cause}",
            "ENDPOINT_REGISTRATION_FAILED", ErrorCategory.REGISTRATION,
            ErrorSeverity.CRITICAL,
            ErrorContext(file=str(file), group=group),
        )
        self.file = str(file)
        self.group = group
        self.cause = cause
