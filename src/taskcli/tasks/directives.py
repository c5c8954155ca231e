"""Parsing of the compact directive strings used by the CLI.

Two shapes exist:
- ``"<index>:<value>"`` for update and status commands, split on the first colon
- ``"mark:<status>"`` for status changes on the store
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from taskcli.core.errors import DirectiveFormatError
from taskcli.core.types import Result

MARK_KEYWORD = "mark"
_INDEX_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class IndexedDirective:
    """A parsed ``"<index>:<value>"`` directive."""

    index: int
    value: str


def parse_index(raw: str, *, expected: str = "index") -> Result[int, DirectiveFormatError]:
    """Parse a base-10 task position with an optional sign."""
    if not _INDEX_RE.fullmatch(raw):
        return Result.err(DirectiveFormatError("Invalid Index", directive=raw, expected=expected))
    return Result.ok(int(raw))


def parse_indexed_directive(
    raw: str, *, value_name: str = "value"
) -> Result[IndexedDirective, DirectiveFormatError]:
    """Parse ``"<index>:<value>"``.

    The value keeps any further colons, and may be empty. The index must be a
    base-10 integer with an optional sign; range checks belong to the store.

    Args:
        raw: Directive text as typed by the user.
        value_name: Name of the value part, used in the error message.

    Returns:
        Result.ok(IndexedDirective) or Result.err(DirectiveFormatError).
    """
    expected = f"index:{value_name}"
    index_text, sep, value = raw.partition(":")
    if not sep:
        return Result.err(
            DirectiveFormatError(
                f"Invalid format. Please use {expected}",
                directive=raw,
                expected=expected,
            )
        )

    index = parse_index(index_text, expected=expected)
    if index.is_err:
        return Result.err(
            DirectiveFormatError("Invalid Index", directive=raw, expected=expected)
        )

    return Result.ok(IndexedDirective(index=index.value, value=value))


def parse_status_directive(raw: str) -> Result[str, DirectiveFormatError]:
    """Extract the new status from ``"mark:<status>"``.

    The status is returned verbatim; an empty status is allowed.
    """
    keyword, sep, status = raw.partition(":")
    if not sep or keyword != MARK_KEYWORD:
        return Result.err(
            DirectiveFormatError(
                f"Invalid status directive. Please use {MARK_KEYWORD}:new_status",
                directive=raw,
                expected=f"{MARK_KEYWORD}:status",
            )
        )
    return Result.ok(status)


def status_directive(value: str) -> str:
    """Build a ``"mark:<status>"`` directive from a CLI status value.

    Values that already carry the ``mark:`` prefix are passed through, so both
    ``0:done`` and ``0:mark:done`` work on the command line.
    """
    prefix = f"{MARK_KEYWORD}:"
    if value.startswith(prefix):
        return value
    return prefix + value
