"""Shared pytest fixtures for the usysconf test suite."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Generator
from unittest.mock import MagicMock

import pytest
import structlog

import usysconf.config as cfg_module
from usysconf.config import Settings, override_settings
from usysconf.triggers.models import Bin, TriggerConfig
from usysconf.triggers.scope import Scope

PYTHON = sys.executable


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture
def trigger_dir(tmp_path: Path) -> Path:
    d = tmp_path / "usysconf.d"
    d.mkdir()
    return d


@pytest.fixture
def test_settings(tmp_path: Path, trigger_dir: Path) -> Generator[Settings, None, None]:
    """Settings whose discovery dirs resolve to *trigger_dir* for root and non-root."""
    empty = tmp_path / "vendor"
    empty.mkdir()
    settings = Settings(
        triggers={"system_dir": str(empty), "admin_dir": str(trigger_dir), "user_dir": str(trigger_dir)},
        runtime={"live_marker": str(tmp_path / "livesys"), "proc_root": "/"},
    )
    original = cfg_module._settings
    override_settings(settings)
    yield settings
    cfg_module._settings = original


@pytest.fixture
def settings_file(tmp_path: Path, trigger_dir: Path) -> Path:
    """A YAML settings file equivalent to ``test_settings``, for CLI runs."""
    empty = tmp_path / "vendor"
    empty.mkdir(exist_ok=True)
    f = tmp_path / "config.yaml"
    f.write_text(
        "triggers:\n"
        f"  system_dir: {empty}\n"
        f"  admin_dir: {trigger_dir}\n"
        f"  user_dir: {trigger_dir}\n"
        "runtime:\n"
        f"  live_marker: {tmp_path / 'livesys'}\n"
        "  proc_root: /\n"
    )
    return f


# ---------------------------------------------------------------------------
# Trigger definitions
# ---------------------------------------------------------------------------


@pytest.fixture
def write_trigger(trigger_dir: Path) -> Callable[[str, str], Path]:
    def _write(name: str, text: str) -> Path:
        path = trigger_dir / f"{name}.toml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def python_bin() -> Callable[..., Bin]:
    """Build a bin that runs a Python snippet with the test interpreter."""

    def _make(task: str, code: str) -> Bin:
        return Bin(task=task, cmd=[PYTHON, "-c", code])

    return _make


@pytest.fixture
def simple_config(python_bin: Callable[..., Bin]) -> TriggerConfig:
    return TriggerConfig(
        description="Simple trigger",
        bins=[python_bin("Say hello", "print('hello')")],
    )


# ---------------------------------------------------------------------------
# Scope / logging
# ---------------------------------------------------------------------------


@pytest.fixture
def scope() -> Scope:
    return Scope()


@pytest.fixture
def mock_logger() -> MagicMock:
    return MagicMock()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Undo ``configure_logging`` calls made by CLI tests."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()
