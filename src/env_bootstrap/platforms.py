"""
Target platform selection for virtual environment layouts.

A virtual environment keeps its executables under ``Scripts`` with an
``.exe`` suffix on Windows and under ``bin`` without a suffix everywhere
else. The platform is a runtime value so both layouts can be exercised from
a single test run.
"""

import platform
from enum import Enum
from pathlib import Path
from typing import Optional

from .constants import POSIX_BIN_DIR, WINDOWS_EXE_SUFFIX, WINDOWS_SCRIPTS_DIR


class TargetPlatform(str, Enum):
    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"
    OTHER = "other"

    @property
    def is_windows(self) -> bool:
        return self is TargetPlatform.WINDOWS

    @classmethod
    def from_name(cls, name: str) -> "TargetPlatform":
        """
        Map an OS name to a platform.

        Accepts the names reported by ``platform.system()`` as well as the
        ``target_os`` spellings cargo uses, case-insensitively. Unknown names
        map to OTHER, which shares the POSIX layout.
        """
        normalized = name.strip().lower()
        if normalized in ("windows", "win32"):
            return cls.WINDOWS
        if normalized == "linux":
            return cls.LINUX
        if normalized in ("darwin", "macos"):
            return cls.MACOS
        return cls.OTHER

    @classmethod
    def detect(cls) -> "TargetPlatform":
        """Platform of the running interpreter."""
        return cls.from_name(platform.system())


def executable_dir(venv_path: Path, target: TargetPlatform) -> Path:
    """Directory holding the virtual environment's executables."""
    if target.is_windows:
        return venv_path / WINDOWS_SCRIPTS_DIR
    return venv_path / POSIX_BIN_DIR


def installer_path(
    venv_path: Path,
    installer_name: str,
    target: Optional[TargetPlatform] = None,
) -> Path:
    """
    Compute the path of the installer executable inside a virtual environment.

    Args:
        venv_path: Root of the virtual environment
        installer_name: Executable name without suffix, e.g. ``pip3``
        target: Platform whose layout to use (defaults to the host)

    Returns:
        ``<venv>/Scripts/<name>.exe`` on Windows, ``<venv>/bin/<name>`` otherwise
    """
    if target is None:
        target = TargetPlatform.detect()

    name = installer_name
    if target.is_windows and not name.lower().endswith(WINDOWS_EXE_SUFFIX):
        name += WINDOWS_EXE_SUFFIX

    return executable_dir(venv_path, target) / name
