"""taskcli core module - shared Result type and error hierarchy."""

from taskcli.core.errors import (
    ConfigError,
    DirectiveFormatError,
    InvalidIndexError,
    PersistenceError,
    StorageIOError,
    StorageParseError,
    TaskCliError,
)
from taskcli.core.types import Result

__all__ = [
    # Types
    "Result",
    # Errors
    "TaskCliError",
    "InvalidIndexError",
    "DirectiveFormatError",
    "ConfigError",
    "PersistenceError",
    "StorageIOError",
    "StorageParseError",
]
