"""Centralized configuration via pydantic-settings.

Settings are read from CHESS_CONTROL_* environment variables and, if present,
a .env.chess-control file.
"""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHESS_CONTROL_",
        env_file=".env.chess-control", env_file_encoding="utf-8",
    )

    log_level: str = "WARNING"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # Log every mark-square decision at DEBUG
    trace_marks: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level
