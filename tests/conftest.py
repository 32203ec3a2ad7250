"""
Shared pytest fixtures for unorunner tests.

- isolated_settings_env: keeps UNORUNNER_* variables and stray config files
  from leaking into tests (autouse)
- settings: default UnoSettings
- python_runner: ProcessRunner that spawns the current interpreter
"""

import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from unorunner.core.models.process import ProcessOutcome
from unorunner.core.settings import UnoSettings
from unorunner.services.execution.runner import ProcessRunner


@pytest.fixture(autouse=True)
def isolated_settings_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test from an empty directory with no UNORUNNER_* variables."""
    for name in list(os.environ):
        if name.startswith("UNORUNNER_"):
            monkeypatch.delenv(name)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def settings() -> UnoSettings:
    """Default settings, nothing loaded from disk."""
    return UnoSettings()


@pytest.fixture
def python_runner() -> ProcessRunner:
    """Runner whose "python" base command is the running interpreter."""
    return ProcessRunner(executables={"python": sys.executable})


@pytest.fixture
def fake_runner() -> MagicMock:
    """Runner double whose stream() returns a successful outcome."""
    runner = MagicMock()
    runner.stream = AsyncMock(return_value=ProcessOutcome.ok("fake", b"output"))
    return runner
