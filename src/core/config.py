"""
Settings — environment-driven runtime configuration via pydantic-settings.

Algorithmic constants (DECIMAL_BASE, U64_MAX...) stay Final module
constants next to the code that uses them. Only runtime knobs live here.

Environment variables (prefix DIGITWISE_, optional .env file):
    DIGITWISE_LOG_LEVEL      root log level (default INFO)
    DIGITWISE_LOG_FORMAT     "json" | "text" (default json)
    DIGITWISE_GRID_ENCODING  text encoding of grid files (default utf-8)

get_settings() is cached: one Settings instance per process.
"""

import codecs
import logging
from functools import lru_cache
from typing import Final

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMATS: Final[tuple[str, ...]] = ("json", "text")


class Settings(BaseSettings):
    """Runtime settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DIGITWISE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    # Grid I/O
    grid_encoding: str = "utf-8"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v!r}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        fmt = v.lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {LOG_FORMATS}, got {v!r}")
        return fmt

    @field_validator("grid_encoding")
    @classmethod
    def validate_grid_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {v!r}") from e
        return v


@lru_cache
def get_settings() -> Settings:
    """Cached Settings instance."""
    return Settings()
