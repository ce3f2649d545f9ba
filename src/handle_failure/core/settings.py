"""Runtime settings for handle-failure.

Settings are read from ``HF_``-prefixed environment variables and an optional
``.env`` file. Nothing on the success path reads them; the combinator consults
``log_failures`` only after a failure has been classified.

Examples:
    >>> import os
    >>> os.environ["HF_LOG_FAILURES"] = "true"
    >>> reset_settings()
    >>> get_settings().log_failures
    True

Tags:
    settings, configuration, pydantic, environment, handle-failure
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class HandleFailureSettings(BaseSettings):
    """Settings shared by the library and the CLI.

    Fields
    ──────
    log_level    : structlog level used by configure_logging
    json_logs    : JSON output; None picks JSON when stderr is not a tty
    log_failures : emit a ``failure_triggered`` event for each handled failure
    service_name : value of the ``service`` key on every log line
    """

    model_config = SettingsConfigDict(
        env_prefix="HF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"
    json_logs: bool | None = None
    log_failures: bool = Field(
        default=False,
        description="Log every failure routed through the combinator",
    )
    service_name: str = "handle-failure"

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> HandleFailureSettings:
    """Return the process-wide settings, loading them on first use."""
    return HandleFailureSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()


__all__ = [
    "LOG_LEVELS",
    "HandleFailureSettings",
    "get_settings",
    "reset_settings",
]
