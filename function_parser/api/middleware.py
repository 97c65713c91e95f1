"""Group Middleware — CORS and file-upload parsing applied group-wide.

Invariants:
    - parse_file_uploads always sets request.state.files (empty dict for non-multipart)
    - One upload per field → UploadFile; repeated field → list[UploadFile]
    - add_cors wraps the whole group app: every route of the group answers preflight

Design Decisions:
    - Uploads as a router-level dependency, not an ASGI middleware: FastAPI passes the
      same Request to dependencies and handler, so the parsed form is cached once
    - CORS on the app, not the router: Starlette middleware is app-scoped, and each
      group owns exactly one app, so the scope is the same
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.datastructures import UploadFile

from function_parser.config import Settings

MULTIPART = "multipart/form-data"


async def parse_file_uploads(request: Request) -> None:
    """Parse multipart bodies and expose uploaded files on request.state.files."""
    files: dict[str, UploadFile | list[UploadFile]] = {}
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(MULTIPART):
        form = await request.form()
        for key, value in form.multi_items():
            if not isinstance(value, UploadFile):
                continue
            current = files.get(key)
            if current is None:
                files[key] = value
            elif isinstance(current, list):
                current.append(value)
            else:
                files[key] = [current, value]
    request.state.files = files


def add_cors(app: FastAPI, settings: Settings) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
        allow_credentials=settings.cors_allow_credentials,
    )
