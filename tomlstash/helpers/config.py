#!/usr/bin/env python3
################################################################################
# TOMLSTASH
#
# @file:        config.py
# @module:      tomlstash.helpers.config
# @description: Runtime options of a settings store and default path lookup
# @repository:  https://github.com/tomlstash/tomlstash
# @version:     1.0.0
#
# ------------------------------------------------------------------------------
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
################################################################################

"""
Store configuration for TomlStash.

The base directory is an explicit value. ``StoreConfig.from_env()`` resolves
the default for a given application name from the environment, so the
calling application decides where its settings live.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .constants import (
    APP_NAME,
    DEFAULT_FILE_MODE,
    ENV_LOG_LEVEL,
    ENV_PATH,
    ENV_STRICT_HASH,
)
from .logging import get_logger

_TRUE_VALUES = {"1", "true", "yes", "on"}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = get_logger(__name__)


def get_config_dir(app_name: str = APP_NAME) -> Path:
    """
    Get the default settings directory for an application.

    Uses XDG_CONFIG_HOME if set, otherwise ~/.config. The directory is not
    created here.
    """
    config_home = os.getenv("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / app_name
    return Path.home() / ".config" / app_name


class StoreConfig(BaseModel):
    """Options of a settings store"""

    base_path: Path = Field(
        default_factory=lambda: get_config_dir(),
        description="Directory holding one TOML file per entry",
    )
    file_mode: int = Field(
        default=DEFAULT_FILE_MODE,
        ge=0,
        le=0o777,
        description="Permissions of written entry files",
    )
    strict_hash: bool = Field(
        default=False,
        description="Reject entries whose stored hash does not match on load",
    )
    log_level: str = Field(default="INFO", description="Log level for the CLI")

    @field_validator("base_path", mode="before")
    @classmethod
    def validate_base_path(cls, v: Any) -> Path:
        """Convert string to Path"""
        if isinstance(v, str):
            return Path(v).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name"""
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return v

    @classmethod
    def from_env(cls, app_name: str = APP_NAME, **overrides: Any) -> StoreConfig:
        """
        Build a configuration from environment variables.

        An unknown level in the environment is logged and ignored. Explicit
        overrides are validated as usual.

        Args:
            app_name: Application name used for the default directory
            **overrides: Explicit values, these win over the environment

        Returns:
            StoreConfig instance
        """
        values: dict[str, Any] = {}

        env_path = os.getenv(ENV_PATH)
        values["base_path"] = env_path if env_path else get_config_dir(app_name)

        strict = os.getenv(ENV_STRICT_HASH)
        if strict is not None:
            values["strict_hash"] = strict.strip().lower() in _TRUE_VALUES

        level = os.getenv(ENV_LOG_LEVEL)
        if level:
            if level.strip().upper() in LOG_LEVELS:
                values["log_level"] = level.strip()
            else:
                logger.warning(f"Ignoring {ENV_LOG_LEVEL}={level!r}, expected one of {', '.join(LOG_LEVELS)}")

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
