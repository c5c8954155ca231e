"""Persistence module for taskcli - JSON file storage."""

from taskcli.persistence.json_storage import JsonStorage

__all__ = ["JsonStorage"]
