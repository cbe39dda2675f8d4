# src/config/settings.py - v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for deployment-specific settings: the OpenAI
credential, the cache backend handle, the HTTP bind address and logging.
Values come from the process environment first, then from ``.env``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === LLM ===
    llm_provider: str = "openai"
    llm_model: str = "gpt-4o"
    llm_temperature: float | None = None
    llm_max_tokens: int | None = None
    openai_api_key: str = ""

    # === Cache ===
    cache_backend: Literal["memory", "json", "sqlite", "redis"] = "memory"
    cache_root: Path = Path("~/.redflags/cache")
    cache_redis_url: str = ""
    cache_key_prefix: str = "redflags:"

    # === HTTP ===
    host: str = "0.0.0.0"
    port: int = 8787
    cors_allow_origins: str = "*"
    edge_cache_max_age: int = 3600

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("llm_max_tokens")
    @classmethod
    def validate_max_tokens(cls, v: int | None) -> int | None:  # noqa: N805
        if v is not None and v <= 0:
            raise ValueError("llm_max_tokens must be > 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.cache_backend == "redis" and not self.cache_redis_url:
            errors.append("CACHE_BACKEND=redis requires CACHE_REDIS_URL")

        if self.edge_cache_max_age <= 0:
            errors.append("EDGE_CACHE_MAX_AGE must be > 0")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Parse comma-separated CORS origins."""
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]

    @property
    def edge_cache_control(self) -> str:
        """Cache-Control header value applied to GET responses."""
        return f"public, max-age={self.edge_cache_max_age}"


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or the CLI).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
