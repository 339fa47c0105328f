from .bootstrapper import EnvironmentBootstrapper, ensure_environment
from .errors import (
    BootstrapError,
    ConfigurationError,
    EnvironmentCreationError,
    InterpreterLaunchError,
    ToolInstallError,
    ToolInstallerLaunchError,
)
from .models import BootstrapConfig, CommandResult
from .platforms import TargetPlatform, installer_path
from .subprocess_utils import CommandRunner, run_logged_subprocess

__all__ = [
    "BootstrapConfig",
    "BootstrapError",
    "CommandResult",
    "CommandRunner",
    "ConfigurationError",
    "EnvironmentBootstrapper",
    "EnvironmentCreationError",
    "InterpreterLaunchError",
    "TargetPlatform",
    "ToolInstallError",
    "ToolInstallerLaunchError",
    "ensure_environment",
    "installer_path",
    "run_logged_subprocess",
]
