"""Endpoint Schemas — the descriptor every *.endpoint.py module exports.

Invariants:
    - Endpoint is frozen: read once during registration, never mutated
    - handler and every middleware must be callable
    - request_type is kept as declared; parse_request_type decides support
      (so an unsupported value surfaces as UnsupportedRequestTypeError, not a ValidationError)
    - camelCase keys (requestType, enableCors, enableFileUpload) accepted alongside snake_case

Design Decisions:
    - Pydantic over a bare dict: descriptors written as dicts are validated with
      field-level messages at the module boundary
    - Middlewares are FastAPI dependencies: they run in order before the handler
      and may raise HTTPException to short-circuit
"""

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class EndpointOptions(BaseModel):
    """Per-endpoint switches and route-level middleware chain."""
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True,
    )

    enable_cors: bool = False
    enable_file_upload: bool = False
    middlewares: list[Callable[..., Any]] = Field(default_factory=list)


class Endpoint(BaseModel):
    """Descriptor of one REST endpoint."""
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True,
    )

    request_type: Any = None
    handler: Callable[..., Any]
    name: str | None = None
    options: EndpointOptions = Field(default_factory=EndpointOptions)
