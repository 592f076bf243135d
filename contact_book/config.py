"""Runtime settings read from the environment (and `.env`, once loaded)."""
from __future__ import annotations

import logging
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PROMPT = "Enter command: "
DEFAULT_LOG_LEVEL = "WARNING"


class ConfigError(RuntimeError):
    """Raised when a configuration value cannot be used."""


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    prompt: str = Field(DEFAULT_PROMPT, description="Prompt shown before each command")
    export_dir: Optional[str] = Field(None, description="Base directory for relative export paths")
    log_level: str = Field(DEFAULT_LOG_LEVEL, description="Logging level name")

    @property
    def log_level_value(self) -> int:
        return parse_log_level(self.log_level)


def parse_log_level(name: str) -> int:
    """Map a level name such as 'info' to its logging constant."""
    value = logging.getLevelName(name.strip().upper())
    if not isinstance(value, int):
        raise ConfigError(f"Unknown log level: {name!r}")
    return value


def load_settings(
    prompt: Optional[str] = None,
    export_dir: Optional[str] = None,
    log_level: Optional[str] = None,
) -> Settings:
    """Build settings; explicit arguments win over environment variables."""
    settings = Settings(
        prompt=prompt if prompt is not None else os.getenv("CONTACT_BOOK_PROMPT", DEFAULT_PROMPT),
        export_dir=export_dir or os.getenv("CONTACT_BOOK_EXPORT_DIR") or None,
        log_level=log_level or os.getenv("CONTACT_BOOK_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
    # fail early on a bad level rather than at first use
    parse_log_level(settings.log_level)
    return settings
