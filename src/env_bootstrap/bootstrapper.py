import logging
from pathlib import Path
from typing import Any, List, Optional

from .constants import NAMESPACE
from .errors import (
    ConfigurationError,
    EnvironmentCreationError,
    InterpreterLaunchError,
    ToolInstallError,
    ToolInstallerLaunchError,
)
from .models import BootstrapConfig, CommandResult
from .platforms import installer_path
from .subprocess_utils import CommandRunner, run_logged_subprocess


class EnvironmentBootstrapper:
    """Ensures a workspace has a virtual environment with the packaging tool installed."""

    def __init__(
        self, config: BootstrapConfig, runner: Optional[CommandRunner] = None
    ):
        self.config = config
        self.runner: CommandRunner = runner or run_logged_subprocess
        self.logger = logging.getLogger(f"{NAMESPACE}.{__name__.split('.')[-1]}")

    @property
    def venv_path(self) -> Path:
        return self.config.venv_path

    @property
    def installer_path(self) -> Path:
        return installer_path(
            self.venv_path, self.config.installer_name, self.config.target_platform
        )

    def ensure_environment(self) -> None:
        """
        Create the virtual environment and install the tool unless it already exists.

        An existing directory is trusted as-is and no process is spawned. A
        failure after the environment was created leaves it on disk.

        Raises:
            InterpreterLaunchError: The interpreter could not be started
            EnvironmentCreationError: `-m venv` exited non-zero
            ToolInstallerLaunchError: The installer could not be started
            ToolInstallError: The install exited non-zero
        """
        if self.venv_path.exists():
            self._handle_existing_environment()
            return

        self.logger.info("Creating Python virtual environment...")
        self.create_virtualenv()

        self.logger.info(f"Installing {self.config.tool_package}...")
        self.install_tool()

        self.logger.info("Virtual environment setup complete!")

    def create_virtualenv(self) -> None:
        command = [self.config.interpreter, "-m", "venv", self.config.venv_dir_name]
        try:
            result = self._run(command, "Create venv")
        except OSError as e:
            raise InterpreterLaunchError(
                f"Failed to launch {self.config.interpreter}: {e}"
            ) from e

        if not result.success:
            raise EnvironmentCreationError(result.stderr_text)

    def install_tool(self) -> None:
        command = [str(self.installer_path), "install", self.config.tool_package]
        try:
            result = self._run(command, f"Install {self.config.tool_package}")
        except OSError as e:
            raise ToolInstallerLaunchError(
                f"Failed to launch {self.installer_path}: {e}"
            ) from e

        if not result.success:
            raise ToolInstallError(result.stderr_text)

    def _handle_existing_environment(self) -> None:
        if self.installer_path.exists():
            self.logger.info("Virtual environment already exists, skipping setup")
            return

        self.logger.warning(
            f"Virtual environment at {self.venv_path} looks incomplete: "
            f"{self.installer_path} is missing"
        )
        if not self.config.repair_incomplete:
            self.logger.info("Virtual environment already exists, skipping setup")
            return

        self.logger.info("Repairing Python virtual environment...")
        self.create_virtualenv()

        self.logger.info(f"Installing {self.config.tool_package}...")
        self.install_tool()

        self.logger.info("Virtual environment repair complete!")

    def _run(self, command: List[str], operation_name: str) -> CommandResult:
        return self.runner(
            command,
            cwd=self.config.workspace_root,
            logger=self.logger,
            operation_name=operation_name,
        )


def ensure_environment(
    workspace_root: Path, runner: Optional[CommandRunner] = None, **options: Any
) -> None:
    """
    Ensure ``workspace_root/.env`` exists with the packaging tool installed.

    Args:
        workspace_root: Project directory being built
        runner: Process runner (real subprocesses if None)
        **options: Any other ``BootstrapConfig`` field

    Raises:
        BootstrapError: On any failure; the caller should abort the build
    """
    try:
        config = BootstrapConfig(workspace_root=Path(workspace_root), **options)
    except ValueError as e:
        raise ConfigurationError(f"Invalid bootstrap configuration: {e}") from e
    EnvironmentBootstrapper(config, runner=runner).ensure_environment()
