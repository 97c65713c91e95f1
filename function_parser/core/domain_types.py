"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - GroupKey wraps str — an empty group key is valid, never an error
    - RequestType is closed: GET, POST, PUT, DELETE, PATCH
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: values double as settings values and log fields
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

GroupKey = NewType("GroupKey", str)


# ─── Enums ───────────────────────────────────────────────────────

class RequestType(str, Enum):
    """HTTP methods an endpoint descriptor may declare."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class AdapterKind(str, Enum):
    """How a group's FastAPI app is exposed as a deployable entry point."""
    MANGUM = "mangum"
    ASGI = "asgi"


class CollisionPolicy(str, Enum):
    """What happens when two function files export the same name in one group."""
    OVERWRITE = "overwrite"
    ERROR = "error"


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class ParserOptions:
    """Constructor options for FunctionParser."""
    enable_cors: bool = False
    group_by_folder: bool = True
    build_reactive: bool = True
    build_endpoints: bool = True

    @classmethod
    def from_settings(cls, settings) -> "ParserOptions":
        return cls(
            enable_cors=settings.enable_cors,
            group_by_folder=settings.group_by_folder,
            build_reactive=settings.build_reactive,
            build_endpoints=settings.build_endpoints,
        )


@dataclass(frozen=True)
class DiscoveredFile:
    """A matched file with its group and logical name resolved."""
    path: Path
    group: GroupKey
    name: str
