"""Application settings loaded from environment variables via pydantic-settings.

# ─── HOW SETTINGS WORK ────────────────────────────────────────────────
#
# pydantic-settings reads each field from (highest priority first):
#
#   1. Keyword arguments passed to Settings(...)
#   2. Environment variables, prefixed with MUSICMAP_
#      e.g. MUSICMAP_MAX_PARALLEL_DOWNLOADS=8
#   3. A .env file in the working directory
#   4. The defaults below
#
# The YAML layer (config/loader.py) sits between the defaults and the
# environment; see load_settings().
# ──────────────────────────────────────────────────────────────────────
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://www.music-map.com/"
DEFAULT_MAX_PARALLEL_DOWNLOADS = 24
DEFAULT_REQUEST_TIMEOUT_SECONDS = 15.0
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """musicmap runtime settings."""

    model_config = SettingsConfigDict(
        env_prefix="MUSICMAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Fetcher ===
    # Upper bound on simultaneous outbound requests for the whole run.
    max_parallel_downloads: int = Field(default=DEFAULT_MAX_PARALLEL_DOWNLOADS, ge=1)
    # Wall-clock limit for one artist page, connect through last byte.
    request_timeout_seconds: float = Field(default=DEFAULT_REQUEST_TIMEOUT_SECONDS, gt=0)
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = "musicmap/0.1.0 (+https://github.com/musicmap)"

    # === Extractor ===
    page_parser: str = "regex"  # "regex" or "soup"

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return level
