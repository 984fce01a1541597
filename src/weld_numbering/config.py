"""
Configuration management for weld-numbering.

Settings come from environment variables (WELD_NUMBERING_*) and, optionally,
a [numbering] table in weld-numbering.toml, validated with Pydantic.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Literal, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weld_numbering.exceptions import ConfigError

CONFIG_FILENAME = "weld-numbering.toml"
ENV_PREFIX = "WELD_NUMBERING_"
ENV_SOURCE = f"environment ({ENV_PREFIX}*)"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class NumberingConfig(BaseSettings):
    """Settings for weld number proposal and the CLI."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="forbid")

    default_prefix: str = Field(
        default="W-", description="Prefix used when a project has no weld numbers yet"
    )
    default_padding_width: int = Field(
        default=3, ge=0, description="Zero-padding width used when a project has no weld numbers yet"
    )
    log_level: LogLevel = Field(default="WARNING", description="Logging level for the CLI")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        """Accept level names in any case."""
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def from_toml(cls, path: Path | str) -> NumberingConfig:
        """
        Load configuration from TOML file.

        Args:
            path: Path to weld-numbering.toml

        Returns:
            NumberingConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigError: If config file or environment is invalid
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"'{config_path}'", str(e)) from e

        table = data.get("numbering", {})
        try:
            return cls(**table)
        except ValidationError as e:
            # Fields the file doesn't set can only have failed through the environment
            failed = {str(error["loc"][0]) for error in e.errors() if error["loc"]}
            source = f"'{config_path}'" if failed.issubset(table) else ENV_SOURCE
            raise ConfigError(source, str(e)) from e

    @classmethod
    def find_and_load(cls, start_dir: Optional[Path] = None) -> NumberingConfig:
        """
        Find and load configuration from weld-numbering.toml.

        Searches from start_dir up through parent directories. Falls back to
        defaults (plus environment overrides) when no file is found.

        Args:
            start_dir: Directory to start search (defaults to current directory)

        Returns:
            NumberingConfig instance

        Raises:
            ConfigError: If the config file or environment is invalid
        """
        if start_dir is None:
            start_dir = Path.cwd()

        current = Path(start_dir).resolve()

        # Walk up directory tree
        while True:
            config_path = current / CONFIG_FILENAME
            if config_path.exists():
                return cls.from_toml(config_path)

            parent = current.parent
            if parent == current:
                try:
                    return cls()
                except ValidationError as e:
                    raise ConfigError(ENV_SOURCE, str(e)) from e
            current = parent
