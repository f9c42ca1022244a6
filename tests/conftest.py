"""Shared pytest fixtures for vecmin tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from vecmin.config.settings import VecminSettings


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test in an empty directory with no VECMIN_* overrides.

    Keeps a developer's own vecmin.toml or environment from leaking in.
    """
    for name in (
        "VECMIN_CONFIG",
        "VECMIN_QUIET",
        "VECMIN_VERBOSE",
        "VECMIN_JSON_OUTPUT",
        "VECMIN_LOG_JSON",
        "VECMIN_SAMPLE__VALUES",
        "VECMIN_READER__PROMPT",
        "VECMIN_READER__NOTICE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo the root handler that AppContext installs on every CLI call."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    vecmin_logger = logging.getLogger("vecmin")
    vecmin_level = vecmin_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    vecmin_logger.setLevel(vecmin_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> VecminSettings:
    """Default settings with no config file."""
    return VecminSettings.from_cli(start=tmp_path)
