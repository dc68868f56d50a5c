from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from edgedebug.errors import UsageError, validation_problems

DEFAULT_DB_PATH = Path("/var/lib/kubeedge/edgecore.db")
LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def _resolve_path(value: str | Path) -> Path:
    return Path(value).expanduser().resolve()


def _normalize_optional_text(value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        return None
    normalized = value.strip()
    if normalized:
        return normalized
    return None


class AppSettings(BaseSettings):
    """
    Runtime configuration for the inspection CLI.

    Options come from `EDGEDEBUG_*` variables, except the store path which
    also honours `EDGECORE_DB_PATH`, the variable edgecore itself reads.
    Command-line flags override whatever is loaded here.
    """

    model_config = SettingsConfigDict(
        env_prefix="EDGEDEBUG_",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    db_path: Path = Field(
        default=DEFAULT_DB_PATH,
        validation_alias=AliasChoices("EDGECORE_DB_PATH", "EDGEDEBUG_DB_PATH"),
        description="SQLite database holding the edge node's persisted resources.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level for the stderr handler.",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional file receiving DEBUG-level JSON log lines.",
    )

    @field_validator("db_path", mode="before")
    @classmethod
    def _normalize_db_path(cls, value: Any) -> Any:
        if value is None:
            return DEFAULT_DB_PATH
        return _resolve_path(value)

    @field_validator("log_file", mode="before")
    @classmethod
    def _normalize_log_file(cls, value: Any) -> Path | None:
        if isinstance(value, Path):
            return _resolve_path(value)
        normalized = _normalize_optional_text(value)
        if normalized is None:
            return None
        return _resolve_path(normalized)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError("EDGEDEBUG_LOG_LEVEL must be a string.")
        normalized = value.strip().upper()
        if normalized in LOG_LEVELS:
            return normalized
        allowed = ", ".join(sorted(LOG_LEVELS))
        raise ValueError(f"EDGEDEBUG_LOG_LEVEL must be one of: {allowed}.")


def load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        details = "; ".join(validation_problems(exc))
        raise UsageError(f"invalid configuration: {details}") from exc
