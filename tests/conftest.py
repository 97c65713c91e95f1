"""Root conftest — shared test configuration and on-disk module trees."""

import textwrap
from pathlib import Path

import pytest

from function_parser.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """No selector leaks in from the host environment; no cached Settings across tests."""
    monkeypatch.delenv("FUNCTION_NAME", raising=False)
    monkeypatch.delenv("FUNCTION_PARSER_FUNCTION_NAME", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, adapter="asgi")


@pytest.fixture
def write_module(tmp_path):
    """Write a python source file under tmp_path and return its path."""

    def _write(relative: str, source: str = "") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return _write

