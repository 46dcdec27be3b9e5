"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting readable from a MEDIA_-prefixed environment variable or .env
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - get_settings doubles as a FastAPI dependency so tests can override it
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="MEDIA_", case_sensitive=False,
    )

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Not-found handling: False keeps 200 + null / 204, True answers 404
    strict_not_found: bool = False

    # Frontend base URL; informational, no handler reads it
    public_base_url: str = "http://localhost:3000"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
