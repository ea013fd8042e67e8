"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings to:
  - Load from environment variables prefixed with FP_PRIMER_
  - Fall back to a .env file at the project root
  - Validate values at startup, before any demo runs

    FP_PRIMER_LOG_LEVEL=DEBUG FP_PRIMER_DEMOS=payments,users fp-primer
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Resolve the .env file relative to the project root (two levels above this file),
# so settings load correctly regardless of the working directory at runtime.
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"


class AppSettings(BaseSettings):
    """
    Root application settings.

    Load order (highest priority first):
      1. Environment variables
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="FP_PRIMER_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Standard logging level name")
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="console: human-readable lines; json: one JSON object per line",
    )
    demos: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Demos to run, comma-separated in the environment; empty runs all",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept only level names the logging module knows, in any case."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelNamesMapping().get(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @field_validator("demos", mode="before")
    @classmethod
    def split_demos(cls, value: object) -> object:
        """Split a comma-separated string into names, dropping blanks."""
        if isinstance(value, str):
            return [name.strip() for name in value.split(",") if name.strip()]
        return value
