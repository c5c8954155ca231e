"""Error hierarchy for taskcli.

This module defines the exception hierarchy for taskcli. These exceptions
are raised for unexpected errors and carried as error types in Result for
expected failures (bad indices, malformed directives, unreadable files).

Exception Hierarchy:
    TaskCliError (base)
    ├── InvalidIndexError     - Positional index out of bounds
    ├── DirectiveFormatError  - Malformed "index:value" or "mark:status" input
    ├── ConfigError           - Configuration loading and validation issues
    └── PersistenceError      - Storage issues
        ├── StorageIOError    - Missing, unreadable or unwritable file
        └── StorageParseError - Empty or invalid JSON content
"""

from typing import Any


class TaskCliError(Exception):
    """Base exception for all taskcli errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dict with additional context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize the error.

        Args:
            message: Human-readable error description.
            details: Optional dict with additional context about the error.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class InvalidIndexError(TaskCliError, IndexError):
    """A positional index does not address any task in the store.

    Also an IndexError so plain ``except IndexError`` callers keep working.

    Attributes:
        index: The offending positional index.
        length: Store length at the time of the check.
    """

    def __init__(self, index: int, length: int) -> None:
        super().__init__(
            "Invalid Index",
            details={"index": index, "length": length},
        )
        self.index = index
        self.length = length


class DirectiveFormatError(TaskCliError, ValueError):
    """A directive string could not be parsed.

    Attributes:
        directive: The raw directive text.
        expected: Human-readable shape that was expected.
    """

    def __init__(self, message: str, *, directive: str, expected: str) -> None:
        super().__init__(message, details={"directive": directive, "expected": expected})
        self.directive = directive
        self.expected = expected


class ConfigError(TaskCliError):
    """Error from configuration operations.

    Raised when configuration loading, parsing, or validation fails.

    Attributes:
        config_key: The configuration key that caused the error.
        config_file: Path to the config file if applicable.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        config_file: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize config error.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            config_file: Path to the config file if applicable.
            details: Optional dict with additional context.
        """
        super().__init__(message, details)
        self.config_key = config_key
        self.config_file = config_file


class PersistenceError(TaskCliError):
    """Error from storage operations.

    Attributes:
        operation: The operation that failed ("read", "write", "parse").
        path: The file involved.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize persistence error.

        Args:
            message: Human-readable error description.
            operation: The operation that failed.
            path: The file involved.
            details: Optional dict with additional context.
        """
        super().__init__(message, details)
        self.operation = operation
        self.path = path


class StorageIOError(PersistenceError):
    """The storage file could not be opened, read or written."""


class StorageParseError(PersistenceError):
    """The storage file is empty or does not hold valid JSON for the value type."""
