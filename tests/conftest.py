"""Shared fixtures for taskcli tests."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from taskcli.observability.logging import reset_logging, set_console_logging


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the config directory at a temp dir and clear taskcli env vars."""
    config_dir = tmp_path / ".taskcli"
    monkeypatch.setenv("TASKCLI_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("TASKCLI_FILE", raising=False)
    monkeypatch.delenv("TASKCLI_LOG_MODE", raising=False)
    reset_logging()
    set_console_logging(True)
    yield config_dir
    reset_logging()
    set_console_logging(True)
