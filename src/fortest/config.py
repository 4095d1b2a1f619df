"""Runtime configuration loaded from ``FORTEST_*`` environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fortest.assertions import Verbosity


class FortestSettings(BaseSettings):
    """Settings for a fortest session.

    Loads from environment variables automatically:
        FORTEST_VERBOSITY, FORTEST_ISOLATE_FAILURES, FORTEST_COLOR,
        FORTEST_DB_PATH, FORTEST_TRACE_OUTPUT
    """

    verbosity: int = Field(
        default=int(Verbosity.QUIET),
        ge=0,
        le=2,
        description="Default assertion verbosity (0=quiet, 1=fail only, 2=all)",
    )
    isolate_failures: bool = Field(
        default=False,
        description="Record a raising test as FAIL and keep running instead of aborting the session",
    )
    color: bool = Field(default=True, description="Colour console output")
    db_path: Path | None = Field(default=None, description="SQLite file for result history; disabled when unset")
    trace_output: Path | None = Field(default=None, description="JSONL span output; tracing is off when unset")

    model_config = SettingsConfigDict(
        env_prefix="FORTEST_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> FortestSettings:
    """Return the process-wide settings, loading them on first use."""
    return FortestSettings()


def reset_settings() -> None:
    """Forget cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
