"""JSON file storage for any pydantic-serializable value.

JsonStorage is generic over the stored value type: the task list uses
``JsonStorage[list[Task]]``, but strings, integer lists or plain dicts work
the same way. Validation and serialization go through a pydantic TypeAdapter,
so model aliases (``ID``, ``createdAt``) are honored and ``None`` fields are
omitted from the file.

Writes are atomic by default: the JSON is written to a hidden sibling file,
fsynced, then renamed over the target. The parent directory must already
exist; it is never created here.

Usage:
    storage = JsonStorage("tasks.json", list[Task])
    loaded = storage.load()
    tasks = loaded.value if loaded.is_ok else []
    storage.save(tasks)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from taskcli.core.errors import PersistenceError, StorageIOError, StorageParseError
from taskcli.core.types import Result
from taskcli.observability.logging import get_logger

log = get_logger(__name__)


class JsonStorage[T]:
    """Load and save one value of type ``T`` as a JSON file.

    Attributes:
        file_name: The path as given at construction.
    """

    def __init__(
        self,
        file_name: str | Path,
        value_type: Any,
        *,
        indent: int = 2,
        atomic: bool = True,
    ) -> None:
        """Initialize the storage.

        Args:
            file_name: Target file. An empty name is accepted here and
                reported as an error by load/save.
            value_type: Type of the stored value, e.g. ``list[Task]`` or ``str``.
            indent: JSON indentation.
            atomic: Write via temporary file and rename.
        """
        self.file_name = str(file_name)
        self._path = Path(file_name)
        self._adapter: TypeAdapter[T] = TypeAdapter(value_type)
        self._indent = indent
        self._atomic = atomic

    @property
    def path(self) -> Path:
        """Target file path."""
        return self._path

    def _missing_name_error(self, operation: str) -> StorageIOError:
        return StorageIOError(
            "No storage file name configured", operation=operation, path=self.file_name
        )

    def save(self, value: T) -> Result[None, PersistenceError]:
        """Serialize ``value`` as indented JSON, replacing the file's content.

        Returns:
            Result.ok(None), Result.err(StorageIOError) if the file cannot be
            written, or Result.err(PersistenceError) if the value cannot be
            serialized.
        """
        if not self.file_name:
            return Result.err(self._missing_name_error("write"))

        try:
            payload = self._adapter.dump_json(
                value, indent=self._indent, by_alias=True, exclude_none=True
            )
        except PydanticSerializationError as e:
            log.error("storage.save.serialize_failed", path=self.file_name, error=str(e))
            return Result.err(
                PersistenceError(
                    f"Failed to serialize value: {e}",
                    operation="serialize",
                    path=self.file_name,
                )
            )

        try:
            if self._atomic:
                self._write_atomic(payload)
            else:
                self._path.write_bytes(payload)
        except OSError as e:
            log.error("storage.save.failed", path=self.file_name, error=str(e))
            return Result.err(
                StorageIOError(
                    f"Failed to write {self.file_name}: {e.strerror or e}",
                    operation="write",
                    path=self.file_name,
                    details={"errno": e.errno},
                )
            )

        log.debug("storage.saved", path=self.file_name, size=len(payload))
        return Result.ok(None)

    def _write_atomic(self, payload: bytes) -> None:
        temp_path = self._path.with_name(f".{self._path.name}.tmp")
        try:
            with open(temp_path, "wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            temp_path.replace(self._path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

    def load(self) -> Result[T, PersistenceError]:
        """Read the whole file and validate it as ``T``.

        Returns:
            Result.ok(value), Result.err(StorageIOError) if the file is missing
            or unreadable, or Result.err(StorageParseError) if it is empty or
            not valid JSON for ``T``.
        """
        if not self.file_name:
            return Result.err(self._missing_name_error("read"))

        try:
            raw = self._path.read_bytes()
        except FileNotFoundError as e:
            log.info("storage.file.missing", path=self.file_name)
            return Result.err(
                StorageIOError(
                    f"Storage file not found: {self.file_name}",
                    operation="read",
                    path=self.file_name,
                    details={"errno": e.errno},
                )
            )
        except OSError as e:
            log.error("storage.load.failed", path=self.file_name, error=str(e))
            return Result.err(
                StorageIOError(
                    f"Failed to read {self.file_name}: {e.strerror or e}",
                    operation="read",
                    path=self.file_name,
                    details={"errno": e.errno},
                )
            )

        if not raw.strip():
            log.error("storage.load.empty", path=self.file_name)
            return Result.err(
                StorageParseError(
                    f"Storage file is empty: {self.file_name}",
                    operation="parse",
                    path=self.file_name,
                )
            )

        try:
            value = self._adapter.validate_json(raw)
        except PydanticValidationError as e:
            log.error(
                "storage.load.parse_failed", path=self.file_name, errors=e.error_count()
            )
            return Result.err(
                StorageParseError(
                    f"Invalid JSON in {self.file_name}: {e.errors()[0]['msg']}",
                    operation="parse",
                    path=self.file_name,
                    details={"error_count": e.error_count()},
                )
            )

        return Result.ok(value)
