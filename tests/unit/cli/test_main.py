"""Unit tests for CLI main module."""

import json
from pathlib import Path
import re
from typing import Any

import pytest
from typer.testing import CliRunner

from taskcli import __version__
from taskcli.cli.formatters import console
from taskcli.cli.main import app

runner = CliRunner()

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def clean(output: str) -> str:
    """Strip ANSI codes (Rich adds color formatting)."""
    return ANSI_RE.sub("", output)


@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep table cells on one line regardless of the test terminal."""
    monkeypatch.setattr(console, "width", 200)


@pytest.fixture
def task_file(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


def invoke(task_file: Path, *args: str) -> Any:
    return runner.invoke(app, ["--file", str(task_file), *args])


def read_tasks(task_file: Path) -> list[dict[str, Any]]:
    return json.loads(task_file.read_text())


@pytest.fixture
def three_tasks(task_file: Path) -> Path:
    for description in ("Task 1", "Task 2", "Task 3"):
        result = invoke(task_file, "add", description)
        assert result.exit_code == 0
    return task_file


class TestMainApp:
    """Tests for the main Typer application."""

    def test_app_has_help(self) -> None:
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "track tasks in a JSON file" in clean(result.output)

    @pytest.mark.parametrize("flag", ["--version", "-V"])
    def test_version(self, flag: str) -> None:
        result = runner.invoke(app, [flag])

        assert result.exit_code == 0
        assert __version__ in clean(result.output)

    def test_no_command_is_reported(self, task_file: Path) -> None:
        result = invoke(task_file)

        assert result.exit_code == 0
        assert "Invalid command" in clean(result.output)
        assert not task_file.exists()

    def test_unknown_command_is_usage_error(self, task_file: Path) -> None:
        result = invoke(task_file, "frobnicate")

        assert result.exit_code == 2


class TestAdd:
    """Tests for the add command."""

    def test_add_creates_file(self, task_file: Path) -> None:
        result = invoke(task_file, "add", "Buy milk")

        assert result.exit_code == 0
        assert "Buy milk" in clean(result.output)
        tasks = read_tasks(task_file)
        assert len(tasks) == 1
        assert tasks[0]["ID"] == 1
        assert tasks[0]["description"] == "Buy milk"
        assert tasks[0]["status"] == "todo"
        assert "updatedAt" not in tasks[0]

    def test_add_appends(self, three_tasks: Path) -> None:
        assert [t["ID"] for t in read_tasks(three_tasks)] == [1, 2, 3]

    def test_env_task_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        target = tmp_path / "env.json"
        monkeypatch.setenv("TASKCLI_FILE", str(target))

        result = runner.invoke(app, ["add", "From env"])

        assert result.exit_code == 0
        assert read_tasks(target)[0]["description"] == "From env"

    def test_missing_directory_fails_save(self, tmp_path: Path) -> None:
        result = invoke(tmp_path / "missing" / "tasks.json", "add", "x")

        assert result.exit_code == 1
        assert "Cannot save tasks" in clean(result.output)


class TestList:
    """Tests for the list command."""

    def test_list_does_not_create_file(self, task_file: Path) -> None:
        result = invoke(task_file, "list")

        assert result.exit_code == 0
        assert "Description" in clean(result.output)
        assert not task_file.exists()

    def test_list_filtered_by_status(self, three_tasks: Path) -> None:
        invoke(three_tasks, "status", "1:done")

        result = invoke(three_tasks, "list", "--status", "done")

        output = clean(result.output)
        assert "Task 2" in output
        assert "Task 1" not in output

    def test_corrupt_file_aborts_without_saving(self, task_file: Path) -> None:
        task_file.write_text("{ invalid json }")

        result = invoke(task_file, "add", "x")

        assert result.exit_code == 1
        assert "Cannot load tasks" in clean(result.output)
        assert task_file.read_text() == "{ invalid json }"

    def test_empty_file_aborts(self, task_file: Path) -> None:
        task_file.write_text("")

        result = invoke(task_file, "list")

        assert result.exit_code == 1


class TestUpdate:
    """Tests for the update command."""

    def test_update_description(self, three_tasks: Path) -> None:
        result = invoke(three_tasks, "update", "1:Updated: Task 2")

        assert result.exit_code == 0
        task = read_tasks(three_tasks)[1]
        assert task["description"] == "Updated: Task 2"
        assert "updatedAt" not in task

    def test_missing_colon(self, three_tasks: Path) -> None:
        result = invoke(three_tasks, "update", "1 Task")

        assert result.exit_code == 1
        assert "Invalid format. Please use index:description" in clean(result.output)

    def test_non_numeric_index(self, three_tasks: Path) -> None:
        result = invoke(three_tasks, "update", "one:Task")

        assert result.exit_code == 1
        assert "Invalid Index" in clean(result.output)

    def test_out_of_range_is_reported_not_fatal(self, three_tasks: Path) -> None:
        before = read_tasks(three_tasks)

        result = invoke(three_tasks, "update", "7:Nope")

        assert result.exit_code == 0
        assert "Invalid Index" in clean(result.output)
        assert read_tasks(three_tasks) == before


class TestStatus:
    """Tests for the status command."""

    @pytest.mark.parametrize("directive", ["0:done", "0:mark:done"])
    def test_mark_done(self, three_tasks: Path, directive: str) -> None:
        result = invoke(three_tasks, "status", directive)

        assert result.exit_code == 0
        task = read_tasks(three_tasks)[0]
        assert task["status"] == "done"
        assert "updatedAt" in task

    def test_missing_colon(self, three_tasks: Path) -> None:
        result = invoke(three_tasks, "status", "done")

        assert result.exit_code == 1
        assert "Invalid format. Please use index:status" in clean(result.output)

    def test_out_of_range(self, three_tasks: Path) -> None:
        result = invoke(three_tasks, "status", "3:done")

        assert result.exit_code == 0
        assert "Invalid Index" in clean(result.output)


class TestDelete:
    """Tests for the delete command."""

    def test_delete_shifts_and_keeps_ids(self, three_tasks: Path) -> None:
        result = invoke(three_tasks, "delete", "1")

        assert result.exit_code == 0
        assert [(t["ID"], t["description"]) for t in read_tasks(three_tasks)] == [
            (1, "Task 1"),
            (3, "Task 3"),
        ]

    def test_non_numeric_index(self, three_tasks: Path) -> None:
        result = invoke(three_tasks, "delete", "abc")

        assert result.exit_code == 1
        assert "Invalid Index" in clean(result.output)
        assert len(read_tasks(three_tasks)) == 3

    def test_out_of_range(self, three_tasks: Path) -> None:
        result = invoke(three_tasks, "delete", "3")

        assert result.exit_code == 0
        assert len(read_tasks(three_tasks)) == 3


class TestNegativeIndex:
    """A leading minus sign reaches the index check instead of option parsing."""

    @pytest.mark.parametrize(
        "args",
        [("delete", "-1"), ("update", "-1:x"), ("status", "-1:done")],
    )
    def test_reported_as_invalid_index(self, three_tasks: Path, args: tuple[str, str]) -> None:
        before = read_tasks(three_tasks)

        result = invoke(three_tasks, *args)

        output = clean(result.output)
        assert result.exit_code == 0
        assert "Invalid Index" in output
        assert "No such option" not in output
        assert read_tasks(three_tasks) == before

    def test_missing_colon_is_still_a_format_error(self, three_tasks: Path) -> None:
        result = invoke(three_tasks, "update", "-1")

        assert result.exit_code == 1
        assert "Invalid format" in clean(result.output)

    def test_strict_exit(self, three_tasks: Path, tmp_path: Path) -> None:
        config_path = tmp_path / "strict.yaml"
        config_path.write_text("cli:\n  strict_exit: true\n")

        result = runner.invoke(
            app, ["--config", str(config_path), "--file", str(three_tasks), "delete", "-1"]
        )

        assert result.exit_code == 1
        assert "Invalid Index" in clean(result.output)


class TestStrictExit:
    """Tests for cli.strict_exit."""

    def test_index_error_fails_when_strict(self, three_tasks: Path, tmp_path: Path) -> None:
        config_path = tmp_path / "strict.yaml"
        config_path.write_text("cli:\n  strict_exit: true\n")

        result = runner.invoke(
            app, ["--config", str(config_path), "--file", str(three_tasks), "delete", "9"]
        )

        assert result.exit_code == 1
        assert "Invalid Index" in clean(result.output)


class TestConfigCommands:
    """Tests for the config command group."""

    def test_show(self, task_file: Path) -> None:
        result = invoke(task_file, "config", "show")

        output = clean(result.output)
        assert result.exit_code == 0
        assert "storage.file_path" in output
        assert str(task_file) in output

    def test_init_then_refuse(self, isolated_environment: Path) -> None:
        first = runner.invoke(app, ["config", "init"])
        second = runner.invoke(app, ["config", "init"])
        forced = runner.invoke(app, ["config", "init", "--force"])

        assert first.exit_code == 0
        assert (isolated_environment / "config.yaml").exists()
        assert second.exit_code == 1
        assert "--force" in clean(second.output)
        assert forced.exit_code == 0

    def test_bad_config_aborts_task_commands(self, task_file: Path, tmp_path: Path) -> None:
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("storage:\n  indent: -3\n")

        result = runner.invoke(
            app, ["--config", str(config_path), "--file", str(task_file), "add", "x"]
        )

        assert result.exit_code == 1
        assert "Configuration error" in clean(result.output)
        assert not task_file.exists()

    def test_bad_config_still_allows_config_commands(self, tmp_path: Path) -> None:
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("storage:\n  indent: -3\n")

        result = runner.invoke(app, ["--config", str(config_path), "config", "show"])

        assert result.exit_code == 0
        assert "Using default configuration" in clean(result.output)
