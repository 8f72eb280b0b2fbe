"""Configuration management for the heritage data model.

Loads environment variables using pydantic-settings for type-safe configuration.
Resolution defaults and logging parameters are defined here.
"""

import os
from functools import lru_cache
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_LOADED = False
_ENV_LOCK = Lock()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _resolve_env_file() -> str | None:
    """Locate the .env file regardless of the current working directory.

    Preference order:
        1. HERITAGE_ENV_FILE environment variable (explicit override)
        2. Current working directory (common for local runs)
        3. Ancestors of this file (covers installed package execution)
    """
    override = os.getenv("HERITAGE_ENV_FILE")
    if override:
        override_path = Path(override).expanduser()
        if override_path.is_file():
            return str(override_path)

    cwd_candidate = Path.cwd() / ".env"
    if cwd_candidate.is_file():
        return str(cwd_candidate)

    for parent in Path(__file__).resolve().parents:
        candidate = parent / ".env"
        if candidate.is_file():
            return str(candidate)

    return None


_DEFAULT_ENV_FILE = _resolve_env_file()


def ensure_env_loaded() -> None:
    """Load environment variables from disk exactly once."""
    global _ENV_LOADED

    with _ENV_LOCK:
        if _ENV_LOADED:
            return

        env_path = _DEFAULT_ENV_FILE or _resolve_env_file()
        if env_path:
            load_dotenv(env_path, override=False)

        _ENV_LOADED = True


ensure_env_loaded()


class HeritageConfig(BaseSettings):
    """Main configuration class for the heritage data model.

    Values come from environment variables prefixed with ``HERITAGE_``
    (e.g. ``HERITAGE_RESOLUTION_DEPTH=3``).
    """

    model_config = SettingsConfigDict(
        env_prefix="HERITAGE_",
        env_file=_DEFAULT_ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========== Resolution ==========
    resolution_depth: int = Field(
        default=1,
        ge=0,
        le=10,
        description="Depth used when a caller does not request one explicitly",
    )

    # ========== Observability ==========
    log_level: str = "INFO"
    log_json: bool = True

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return upper


@lru_cache(maxsize=1)
def get_config() -> HeritageConfig:
    """Return cached Settings instance (thread-safe, process-local).

    Returns:
        HeritageConfig: The configuration instance loaded from environment variables.
    """
    return HeritageConfig()


__all__ = ["HeritageConfig", "ensure_env_loaded", "get_config"]
