"""
Subprocess execution with logging integration.

The bootstrapper never calls ``subprocess`` directly; it goes through a
``CommandRunner`` so tests can substitute scripted processes. The default
runner captures stdout/stderr as bytes and logs the command and its output at
DEBUG level.
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Protocol, Union

from .constants import NAMESPACE
from .models import CommandResult

PathLike = Union[str, Path]


class CommandRunner(Protocol):
    """Callable that runs a command to completion and reports its outcome.

    Implementations must raise ``OSError`` when the executable cannot be
    launched, and return a ``CommandResult`` for any process that started.
    """

    def __call__(
        self,
        command: List[str],
        cwd: Optional[PathLike] = None,
        logger: Optional[logging.Logger] = None,
        operation_name: str = "",
    ) -> CommandResult: ...


def run_logged_subprocess(
    command: List[str],
    cwd: Optional[PathLike] = None,
    logger: Optional[logging.Logger] = None,
    operation_name: str = "",
) -> CommandResult:
    """
    Execute subprocess with logging of command and output.

    Blocks until the process exits; no timeout is applied.

    Args:
        command: Command and arguments to execute
        cwd: Working directory for the process
        logger: Logger instance (module logger if None)
        operation_name: Description of operation for log messages

    Returns:
        CommandResult with exit status and raw captured output

    Raises:
        OSError: The executable could not be found or started
    """
    if logger is None:
        logger = logging.getLogger(f"{NAMESPACE}.{__name__.split('.')[-1]}")

    log_prefix = f"{operation_name}: " if operation_name else ""
    logger.debug(f"{log_prefix}Executing: {' '.join(str(c) for c in command)}")

    try:
        process = subprocess.Popen(
            command,
            cwd=str(cwd) if cwd is not None else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        logger.debug(f"{log_prefix}Launch failed: {e}")
        raise

    stdout, stderr = process.communicate()
    result = CommandResult(
        command=[str(c) for c in command],
        returncode=process.returncode,
        stdout=stdout or b"",
        stderr=stderr or b"",
    )

    if result.stdout:
        logger.debug(f"{log_prefix}Output: {result.stdout_text.strip()}")
    if result.stderr:
        if result.success:
            logger.debug(f"{log_prefix}Warnings: {result.stderr_text.strip()}")
        else:
            logger.debug(f"{log_prefix}Errors: {result.stderr_text.strip()}")

    return result
