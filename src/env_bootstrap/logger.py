"""
Logging configuration for env-bootstrap.

Provides centralized logging setup with level-based formatting, plus a cargo
mode in which every line is emitted as a ``cargo:warning=`` directive so it
shows up in the host build's output.
"""

import logging
import os
import sys
from typing import Iterable, Optional, TextIO, Union

from .constants import CARGO_RERUN_PREFIX, CARGO_WARNING_PREFIX


def get_log_level() -> int:
    """Get log level from environment variable, defaulting to INFO."""
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, log_level, logging.INFO)


def get_log_format(level: int) -> str:
    """Get appropriate log format based on level."""
    if level == logging.DEBUG:
        return "%(asctime)s | %(levelname)-5s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
    else:
        return "%(asctime)s | %(levelname)-5s | %(message)s"


class CargoWarningFormatter(logging.Formatter):
    """Prefix every output line with ``cargo:warning=``.

    Cargo drops build script output that is not a directive, and a directive
    ends at the newline, so multi-line messages (captured stderr) are split.
    """

    def __init__(self, fmt: Optional[str] = None):
        super().__init__(fmt or "%(message)s")

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        return "\n".join(
            f"{CARGO_WARNING_PREFIX}{line}" for line in text.splitlines() or [""]
        )


def setup_logging(
    level: Optional[Union[int, str]] = None,
    stream: Optional[TextIO] = None,
    fmt: Optional[str] = None,
    cargo: bool = False,
) -> None:
    """
    Setup logging configuration for env-bootstrap.

    Args:
        level: Log level (defaults to LOG_LEVEL env var or INFO)
        stream: Output stream for logs (stdout in cargo mode, stderr otherwise)
        fmt: Custom format string (auto-selected based on level if None)
        cargo: Emit lines as cargo build script warnings
    """
    # Determine log level
    if level is None:
        level = get_log_level()
    elif isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if stream is None:
        stream = sys.stdout if cargo else sys.stderr

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not root_logger.hasHandlers():
        handler = logging.StreamHandler(stream)
        if cargo:
            handler.setFormatter(CargoWarningFormatter(fmt))
        else:
            handler.setFormatter(logging.Formatter(fmt or get_log_format(level)))
        root_logger.addHandler(handler)


def emit_rerun_if_changed(paths: Iterable[str], stream: Optional[TextIO] = None) -> None:
    """Print one ``cargo:rerun-if-changed`` directive per path."""
    if stream is None:
        stream = sys.stdout
    for path in paths:
        print(f"{CARGO_RERUN_PREFIX}{path}", file=stream)
    stream.flush()
