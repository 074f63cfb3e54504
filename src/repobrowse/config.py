# Settings for repobrowse.
# Created: 2026-10-19
#
# Values come from (highest priority first): ~/.repobrowse/config.json,
# REPOBROWSE_* environment variables, then the defaults below.

from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from repobrowse.browsing.binder import BROWSE_ACTION, DOWNLOAD_ACTION, EXIT_LABEL
from repobrowse.browsing.sanitize import (
    FILENAME_SANITIZATION_PATTERN,
    SUBSTITUTION_CHAR,
    compile_unsafe_pattern,
)

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Directory holding config.json (REPOBROWSE_CONFIG_DIR overrides)."""
    override = os.environ.get("REPOBROWSE_CONFIG_DIR")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".repobrowse"


def get_config_path() -> Path:
    return get_config_dir() / "config.json"


class Settings(BaseSettings):
    """Repository browser settings."""

    model_config = SettingsConfigDict(env_prefix="REPOBROWSE_", extra="ignore")

    # Listing
    exit_row_label: str = Field(default=EXIT_LABEL, description="Display name of the exit row")
    browse_action: str = Field(default=BROWSE_ACTION, description="Action for directory rows")
    download_action: str = Field(default=DOWNLOAD_ACTION, description="Action for file rows")
    prefer_direct_metadata: bool = Field(
        default=True,
        description="Use metadata_at_path for the exit row when the backend has it",
    )

    # Upload names
    filename_sanitization_pattern: str = Field(default=FILENAME_SANITIZATION_PATTERN)
    filename_substitution_char: str = Field(default=SUBSTITUTION_CHAR)

    # Server
    log_level: str = "INFO"
    api_host: str = "127.0.0.1"
    api_port: int = 8890

    @model_validator(mode="after")
    def _check_substitution(self) -> Settings:
        compile_unsafe_pattern(self.filename_sanitization_pattern, self.filename_substitution_char)
        return self

    @classmethod
    def load(cls) -> Settings:
        """Load settings, layering config.json over the environment."""
        path = get_config_path()
        data: dict = {}
        if path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError):
                logger.warning("Ignoring unreadable config file %s", path, exc_info=True)
                data = {}
        return cls(**data)

    def save(self) -> None:
        """Write settings to config.json."""
        path = get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.model_dump(), indent=2), encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """Cached settings; call ``get_settings.cache_clear()`` after changes."""
    return Settings.load()
