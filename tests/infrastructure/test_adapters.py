"""Adapter tests — Mangum wrapping versus bare ASGI publication."""

from fastapi import FastAPI
from mangum import Mangum

from function_parser.core.domain_types import AdapterKind
from function_parser.infrastructure.adapters import build_adapter


def test_mangum_is_default():
    app = FastAPI()
    adapter = build_adapter(app)
    assert isinstance(adapter, Mangum)
    assert callable(adapter)


def test_asgi_publishes_app_itself():
    app = FastAPI()
    assert build_adapter(app, AdapterKind.ASGI) is app
