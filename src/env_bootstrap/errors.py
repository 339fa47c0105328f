from typing import Optional


class BootstrapError(Exception):
    """Base class for every failure that must abort the build."""

    def __init__(self, message: str, stderr: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.stderr = stderr


class ConfigurationError(BootstrapError):
    """The bootstrapper was not given enough information to run."""


class InterpreterLaunchError(BootstrapError):
    """The system interpreter could not be found or started."""


class EnvironmentCreationError(BootstrapError):
    """The interpreter ran but `-m venv` exited non-zero."""

    def __init__(self, stderr: str):
        super().__init__(stderr, stderr=stderr)


class ToolInstallerLaunchError(BootstrapError):
    """The installer inside the virtual environment could not be started."""


class ToolInstallError(BootstrapError):
    """The installer ran but exited non-zero."""

    def __init__(self, stderr: str):
        super().__init__(stderr, stderr=stderr)
