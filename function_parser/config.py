"""Parser Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - FUNCTION_NAME (the platform's per-function selector) is read without prefix
    - Every other setting is read from FUNCTION_PARSER_<NAME>
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults reproduce the conventional layout: *.function.py / *.endpoint.py, grouped by folder
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from function_parser.core.domain_types import AdapterKind, CollisionPolicy


class Settings(BaseSettings):
    """Parser settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FUNCTION_PARSER_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    # Selector — set by the serverless runtime for the function being booted
    function_name: str | None = Field(
        None,
        validation_alias=AliasChoices("FUNCTION_NAME", "FUNCTION_PARSER_FUNCTION_NAME"),
    )

    # Default ParserOptions
    enable_cors: bool = False
    group_by_folder: bool = True
    build_reactive: bool = True
    build_endpoints: bool = True

    # Discovery
    function_suffix: str = ".function"
    endpoint_suffix: str = ".endpoint"
    endpoint_export: str = "endpoint"
    ignore_dirs: list[str] = [
        "__pycache__", "node_modules", "site-packages",
        ".venv", "venv", ".git", ".tox", ".mypy_cache", ".pytest_cache",
    ]

    # Registration
    adapter: AdapterKind = AdapterKind.MANGUM
    collision_policy: CollisionPolicy = CollisionPolicy.OVERWRITE

    # CORS — defaults mirror a permissive cors() middleware
    cors_origins: list[str] = ["*"]
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]
    cors_allow_credentials: bool = False

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("function_name", mode="before")
    @classmethod
    def blank_selector_means_all(cls, v: str | None) -> str | None:
        """An empty FUNCTION_NAME selects every function, same as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
