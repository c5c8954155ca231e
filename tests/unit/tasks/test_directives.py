"""Unit tests for taskcli.tasks.directives module."""

import pytest

from taskcli.core.errors import DirectiveFormatError
from taskcli.tasks.directives import (
    IndexedDirective,
    parse_index,
    parse_indexed_directive,
    parse_status_directive,
    status_directive,
)


class TestParseIndex:
    """Test parse_index."""

    @pytest.mark.parametrize(("raw", "expected"), [("0", 0), ("12", 12), ("-1", -1), ("+3", 3)])
    def test_valid(self, raw: str, expected: int) -> None:
        assert parse_index(raw).value == expected

    @pytest.mark.parametrize("raw", ["", "a", "1.5", " 1", "1 ", "--1", "0x1"])
    def test_invalid(self, raw: str) -> None:
        result = parse_index(raw)

        assert isinstance(result.error, DirectiveFormatError)
        assert result.error.message == "Invalid Index"


class TestParseIndexedDirective:
    """Test parse_indexed_directive."""

    def test_basic(self) -> None:
        result = parse_indexed_directive("0:Buy milk")

        assert result.value == IndexedDirective(index=0, value="Buy milk")

    def test_splits_on_first_colon(self) -> None:
        result = parse_indexed_directive("1:Updated: Task 2")

        assert result.value == IndexedDirective(index=1, value="Updated: Task 2")

    def test_empty_value_allowed(self) -> None:
        assert parse_indexed_directive("2:").value == IndexedDirective(index=2, value="")

    def test_negative_index_parses(self) -> None:
        """Range checks happen in the store, not here."""
        assert parse_indexed_directive("-1:x").value.index == -1

    def test_missing_colon(self) -> None:
        result = parse_indexed_directive("0 Buy milk", value_name="description")

        assert result.is_err
        assert result.error.message == "Invalid format. Please use index:description"
        assert result.error.expected == "index:description"
        assert result.error.directive == "0 Buy milk"

    @pytest.mark.parametrize("raw", [":text", "x:text", "1a:text"])
    def test_bad_index(self, raw: str) -> None:
        result = parse_indexed_directive(raw)

        assert result.error.message == "Invalid Index"


class TestParseStatusDirective:
    """Test parse_status_directive."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("mark:done", "done"), ("mark:in-progress", "in-progress"), ("mark:", ""), ("mark:a:b", "a:b")],
    )
    def test_valid(self, raw: str, expected: str) -> None:
        assert parse_status_directive(raw).value == expected

    @pytest.mark.parametrize("raw", ["", "mark", "mar", "done", "Mark:done", "marks:done"])
    def test_invalid(self, raw: str) -> None:
        assert isinstance(parse_status_directive(raw).error, DirectiveFormatError)


class TestStatusDirective:
    """Test status_directive."""

    def test_adds_prefix(self) -> None:
        assert status_directive("done") == "mark:done"

    def test_keeps_existing_prefix(self) -> None:
        assert status_directive("mark:done") == "mark:done"

    def test_empty_value(self) -> None:
        assert status_directive("") == "mark:"
