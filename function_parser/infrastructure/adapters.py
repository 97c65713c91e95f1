"""Serverless Adapters — exposes a group's ASGI app as a single deployable entry point.

Invariants:
    - MANGUM: API Gateway / Lambda events are converted to ASGI and back
    - ASGI: the FastAPI app is published as-is (uvicorn, local development, tests)
    - Lifespan disabled for Mangum: group apps hold no startup state

Design Decisions:
    - Mangum over a hand-written event translator: same adapter the FastAPI-on-Lambda
      deployments in the wild use
"""

from fastapi import FastAPI
from mangum import Mangum

from function_parser.core.domain_types import AdapterKind


def build_adapter(app: FastAPI, kind: AdapterKind = AdapterKind.MANGUM):
    if kind == AdapterKind.ASGI:
        return app
    return Mangum(app, lifespan="off")
