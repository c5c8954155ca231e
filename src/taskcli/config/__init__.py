"""Configuration module for taskcli.

Configuration is optional and stored in ~/.taskcli/config.yaml
(or $TASKCLI_CONFIG_DIR/config.yaml).

Usage:
    from taskcli.config import load_config, resolve_task_file

    config = load_config()
    task_file = resolve_task_file(config)
"""

from taskcli.config.loader import (
    config_exists,
    create_default_config,
    ensure_config_dir,
    load_config,
    resolve_task_file,
)
from taskcli.config.models import (
    DEFAULT_TIMESTAMP_FORMAT,
    CliConfig,
    DisplayConfig,
    LoggingConfig,
    StorageConfig,
    TaskCliConfig,
    get_config_dir,
    get_default_config,
)

__all__ = [
    # Models
    "TaskCliConfig",
    "StorageConfig",
    "DisplayConfig",
    "CliConfig",
    "LoggingConfig",
    "DEFAULT_TIMESTAMP_FORMAT",
    # Loader functions
    "load_config",
    "create_default_config",
    "ensure_config_dir",
    "config_exists",
    "resolve_task_file",
    # Model helpers
    "get_config_dir",
    "get_default_config",
]
