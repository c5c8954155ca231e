"""Pydantic models for taskcli configuration.

This module defines the configuration schema using Pydantic v2.
All configuration validation happens through these models.

Classes:
    StorageConfig: Task file location and write behavior
    DisplayConfig: Table rendering options
    CliConfig: Command behavior options
    LoggingConfig: Logging configuration
    TaskCliConfig: Top-level configuration combining all sections
"""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_TIMESTAMP_FORMAT = "%a, %d %b %Y %H:%M:%S %Z"
"""RFC 1123 style, e.g. ``Mon, 02 Jan 2006 15:04:05 CET``."""


class StorageConfig(BaseModel, frozen=True):
    """Task file configuration.

    Attributes:
        file_path: JSON file holding the task list. Relative paths resolve
            against the current working directory.
        indent: Indentation used when writing JSON.
        atomic_writes: Write to a temporary file and rename it over the target.
    """

    file_path: str = "tasks.json"
    indent: int = Field(default=2, ge=0, le=8)
    atomic_writes: bool = True

    @field_validator("file_path")
    @classmethod
    def validate_file_path(cls, v: str) -> str:
        """Reject blank paths and expand ~."""
        if not v.strip():
            msg = "file_path must not be empty"
            raise ValueError(msg)
        return str(Path(v).expanduser())


class DisplayConfig(BaseModel, frozen=True):
    """Table rendering configuration.

    Attributes:
        timestamp_format: strftime format for the Created At / Updated At columns.
        show_lines: Draw separator lines between rows.
    """

    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    show_lines: bool = False


class CliConfig(BaseModel, frozen=True):
    """Command behavior configuration.

    Attributes:
        strict_exit: Exit with status 1 when update/status/delete address an
            invalid index. Off by default: such failures are reported only.
    """

    strict_exit: bool = False


class LoggingConfig(BaseModel, frozen=True):
    """Logging configuration.

    Attributes:
        level: Minimum log level for console and file output.
        mode: dev for human-readable lines, prod for JSON lines.
        log_path: Directory for rotated log files (relative to config dir).
        enable_file_logging: Whether to write log files at all.
        max_log_days: Days of rotated log files to keep.
    """

    level: Literal["debug", "info", "warning", "error"] = "warning"
    mode: Literal["dev", "prod"] = "dev"
    log_path: str = "logs"
    enable_file_logging: bool = False
    max_log_days: int = Field(default=7, ge=1, le=365)


class TaskCliConfig(BaseModel, frozen=True):
    """Top-level taskcli configuration.

    Validates against config.yaml in the configuration directory.
    """

    storage: StorageConfig = Field(default_factory=StorageConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    cli: CliConfig = Field(default_factory=CliConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_config() -> TaskCliConfig:
    """Get the default taskcli configuration."""
    return TaskCliConfig()


def get_config_dir() -> Path:
    """Get the taskcli configuration directory path.

    Returns:
        $TASKCLI_CONFIG_DIR when set, otherwise ~/.taskcli/
    """
    env_dir = os.environ.get("TASKCLI_CONFIG_DIR", "").strip()
    if env_dir:
        return Path(env_dir).expanduser()
    return Path.home() / ".taskcli"
