"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) - single instance per process
    - The reference timezone is NOT configurable here; it is fixed in
      eventclock.core.resolve_timezone

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - EVENTCLOCK_ prefix: the host application shares the process environment
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Event clock settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EVENTCLOCK_", env_file=".env", case_sensitive=False,
        extra="ignore",
    )

    service_name: str = "eventclock"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        """Anything other than json renders as plain text."""
        if isinstance(v, str) and v.strip().lower() == "json":
            return "json"
        return "text"

    # Warn once when running on the UTC fallback instead of the reference zone
    warn_on_timezone_fallback: bool = True

    # API
    cors_origins: list[str] = ["http://localhost:5173"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
