"""Configuration loading and management for taskcli.

Functions:
    load_config: Load configuration from ~/.taskcli/config.yaml
    create_default_config: Write the default configuration file
    ensure_config_dir: Ensure ~/.taskcli/ directory exists
    config_exists: Check whether a configuration file exists
    resolve_task_file: Pick the task file from flag, environment or config
"""

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError
import yaml

from taskcli.config.models import TaskCliConfig, get_config_dir, get_default_config
from taskcli.core.errors import ConfigError

# .env in the current directory first, then the global one; neither overrides
# variables already set in the environment.
load_dotenv()
load_dotenv(get_config_dir() / ".env")

CONFIG_FILE_NAME = "config.yaml"


def ensure_config_dir(config_dir: Path | None = None) -> Path:
    """Ensure the configuration directory exists.

    Args:
        config_dir: Directory to create. Defaults to ~/.taskcli/

    Returns:
        Path to the configuration directory.
    """
    if config_dir is None:
        config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def _model_to_yaml_dict(model: TaskCliConfig) -> dict[str, Any]:
    return model.model_dump(mode="json")


def create_default_config(
    config_dir: Path | None = None,
    *,
    overwrite: bool = False,
) -> Path:
    """Create the default configuration file.

    Args:
        config_dir: Directory to create the file in. Defaults to ~/.taskcli/
        overwrite: If True, overwrite an existing file.

    Returns:
        Path to the written config.yaml.

    Raises:
        ConfigError: If the file exists and overwrite is False.
    """
    config_dir = ensure_config_dir(config_dir)
    config_path = config_dir / CONFIG_FILE_NAME

    if config_path.exists() and not overwrite:
        raise ConfigError(
            f"Configuration file already exists: {config_path}",
            config_file=str(config_path),
        )

    with config_path.open("w") as f:
        yaml.dump(
            _model_to_yaml_dict(get_default_config()),
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    return config_path


def load_config(config_path: Path | None = None) -> TaskCliConfig:
    """Load configuration from a YAML file.

    When no path is given, ~/.taskcli/config.yaml is used if it exists and the
    built-in defaults otherwise. An explicitly given path must exist.

    Args:
        config_path: Path to config file.

    Returns:
        Validated TaskCliConfig instance.

    Raises:
        ConfigError: If an explicit file doesn't exist, or a file is
            malformed or fails validation.
    """
    if config_path is None:
        config_path = get_config_dir() / CONFIG_FILE_NAME
        if not config_path.exists():
            return get_default_config()
    elif not config_path.exists():
        raise ConfigError(
            f"Configuration file not found: {config_path}. "
            "Run `taskcli config init` to create a default configuration.",
            config_file=str(config_path),
        )

    try:
        with config_path.open() as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Failed to parse configuration file: {e}",
            config_file=str(config_path),
            details={"yaml_error": str(e)},
        ) from e

    if config_dict is None:
        config_dict = {}

    try:
        return TaskCliConfig.model_validate(config_dict)
    except PydanticValidationError as e:
        error_messages = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            error_messages.append(f"  - {loc}: {error['msg']}")

        raise ConfigError(
            "Configuration validation failed:\n" + "\n".join(error_messages),
            config_file=str(config_path),
            details={"validation_errors": e.errors()},
        ) from e


def config_exists(config_dir: Path | None = None) -> bool:
    """Check if the configuration file exists."""
    if config_dir is None:
        config_dir = get_config_dir()
    return (config_dir / CONFIG_FILE_NAME).exists()


def resolve_task_file(config: TaskCliConfig, override: Path | None = None) -> Path:
    """Pick the task file for this invocation.

    Priority:
        1. Explicit override (the --file option)
        2. TASKCLI_FILE environment variable
        3. storage.file_path from configuration

    Returns:
        Path to the task file (not required to exist).
    """
    if override is not None:
        return override.expanduser()

    env_path = os.environ.get("TASKCLI_FILE", "").strip()
    if env_path:
        return Path(env_path).expanduser()

    return Path(config.storage.file_path)
