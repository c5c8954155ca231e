"""Task record and well-known status values.

The JSON field names (``ID``, ``createdAt``, ``updatedAt``) are part of the
on-disk format and are kept as pydantic aliases; Python code uses the
snake_case attribute names.
"""

from datetime import datetime
from enum import StrEnum
import re
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

# Files written by other tools may carry nanosecond fractions.
_EXTRA_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


def _trim_fraction(value: Any) -> Any:
    if isinstance(value, str):
        return _EXTRA_FRACTION_RE.sub(r"\1", value, count=1)
    return value


Timestamp = Annotated[datetime, BeforeValidator(_trim_fraction)]


class TaskStatus(StrEnum):
    """Status values the CLI proposes.

    Status is free-form text on a Task; these are conventions, not a closed set.
    """

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


def now() -> datetime:
    """Current local time, timezone-aware."""
    return datetime.now().astimezone()


class Task(BaseModel):
    """A single to-do item.

    Attributes:
        id: 1-based number assigned at creation as ``len(store) + 1``. Not
            renumbered on deletion, so ids can repeat or skip.
        description: Free text, empty allowed.
        status: Free text; see TaskStatus for the usual values.
        created_at: When the task was added.
        updated_at: Set by status changes only; None until then.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(alias="ID")
    description: str
    status: str = TaskStatus.TODO.value
    created_at: Timestamp = Field(alias="createdAt", default_factory=now)
    updated_at: Timestamp | None = Field(default=None, alias="updatedAt")
