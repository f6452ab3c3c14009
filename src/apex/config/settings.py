# SPDX-License-Identifier: Apache-2.0
"""Runtime settings for Apex.

Values come from keyword arguments (e.g. a loaded YAML file) and fall back
to ``APEX_*`` environment variables, then to the defaults below.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Configuration versioning constants
CURRENT_CONFIG_VERSION = "1"
MIN_SUPPORTED_VERSION = "1"

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ApexSettings(BaseSettings):
    """Process-wide settings."""

    model_config = SettingsConfigDict(env_prefix="APEX_", extra="forbid")

    config_version: str = Field(
        default=CURRENT_CONFIG_VERSION, description="Configuration schema version"
    )
    environment: Literal["development", "test", "production"] = Field(
        default="development", description="Deployment environment"
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    log_format: str = Field(default=DEFAULT_LOG_FORMAT, description="logging.Formatter format")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level
