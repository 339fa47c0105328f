from pathlib import Path
from typing import Callable, List, Optional

import pytest

from env_bootstrap.models import CommandResult


class FakeRunner:
    """Records commands and replays scripted outcomes in order.

    Each step is a callable taking (command, cwd) and returning a
    CommandResult, or an exception instance to raise instead.
    """

    def __init__(self, *steps):
        self.steps = list(steps)
        self.calls: List[tuple] = []
        self.operations: List[str] = []
        self.loggers: list = []

    def __call__(self, command, cwd=None, logger=None, operation_name=""):
        self.operations.append(operation_name)
        self.loggers.append(logger)
        self.calls.append((list(command), Path(cwd) if cwd is not None else None))
        if not self.steps:
            raise AssertionError(f"Unexpected command: {command}")
        step = self.steps.pop(0)
        if isinstance(step, BaseException):
            raise step
        return step(command, cwd)


def exits(
    returncode: int = 0,
    stderr: bytes = b"",
    stdout: bytes = b"",
    creates: Optional[Path] = None,
) -> Callable:
    """Scripted process step; optionally creates a directory like `-m venv` would."""

    def _step(command, cwd):
        if creates is not None:
            creates.mkdir(parents=True)
        return CommandResult(
            command=list(command), returncode=returncode, stdout=stdout, stderr=stderr
        )

    return _step


@pytest.fixture
def workspace(tmp_path):
    """Empty project directory with no virtual environment."""
    root = tmp_path / "proj"
    root.mkdir()
    return root


@pytest.fixture
def venv_dir(workspace):
    return workspace / ".env"


@pytest.fixture
def fake_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner


@pytest.fixture
def step():
    """Factory for scripted process steps."""
    return exits
