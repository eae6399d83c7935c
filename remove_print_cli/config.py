"""Configuration for the remove_print_cli command."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HISTORY_PATH = Path("cli_history.json")
DEFAULT_SOURCE_SUFFIX = ".dart"


class Settings(BaseSettings):
    """Runtime settings, read from ``REMOVE_PRINT_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="REMOVE_PRINT_", extra="ignore")

    history_path: Path = Field(default=DEFAULT_HISTORY_PATH)
    source_suffix: str = Field(default=DEFAULT_SOURCE_SUFFIX)
    log_level: str = Field(default="WARNING")

    @field_validator("source_suffix")
    @classmethod
    def check_suffix(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("source_suffix must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def normalise_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def source_label(self) -> str:
        """Human name for the scanned files, e.g. ``Dart`` for ``.dart``."""

        return self.source_suffix.lstrip(".").capitalize() or self.source_suffix


def _load_env() -> None:
    load_dotenv(find_dotenv(usecwd=True), override=False)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process settings, loading ``.env`` on first use."""

    _load_env()
    return Settings()


__all__ = ["Settings", "get_settings", "DEFAULT_HISTORY_PATH", "DEFAULT_SOURCE_SUFFIX"]
