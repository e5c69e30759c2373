"""Library Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Settings only affect observability; predicate semantics never depend on configuration
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - REQUIREMENT_ prefix: the host application's own settings never collide with ours
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

LOG_FORMATS = ("json", "text")


class Settings(BaseSettings):
    """Library settings from REQUIREMENT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REQUIREMENT_", env_file=".env", extra="ignore", case_sensitive=False,
    )

    # Observability
    log_level: str = "WARNING"
    log_format: str = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @field_validator("log_format", mode="before")
    @classmethod
    def check_format(cls, v: str) -> str:
        if isinstance(v, str):
            v = v.lower()
        if v not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
