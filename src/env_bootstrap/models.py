import os
from pathlib import Path
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import (
    DEFAULT_INSTALLER_NAME,
    DEFAULT_INTERPRETER,
    DEFAULT_TOOL_PACKAGE,
    INSTALLER_ENV,
    INTERPRETER_ENV,
    REPAIR_ENV,
    TARGET_OS_ENV,
    TOOL_PACKAGE_ENV,
    TRUE_VALUES,
    VENV_DIR_ENV,
    VENV_DIR_NAME,
    WORKSPACE_ROOT_ENV_VARS,
)
from .errors import ConfigurationError
from .platforms import TargetPlatform


class CommandResult(BaseModel):
    """Outcome of a finished external process."""

    command: List[str] = Field(description="Command and arguments that were run")
    returncode: int = Field(description="Process exit status")
    stdout: bytes = Field(default=b"", description="Captured standard output")
    stderr: bytes = Field(default=b"", description="Captured standard error")

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def stderr_text(self) -> str:
        # Build tools emit whatever encoding the locale gives them
        return self.stderr.decode("utf-8", errors="replace")

    @property
    def stdout_text(self) -> str:
        return self.stdout.decode("utf-8", errors="replace")


class BootstrapConfig(BaseModel):
    """
    Everything the bootstrapper needs, passed explicitly.

    The workspace root, interpreter, installer and platform are fields rather
    than ambient process state so callers and tests can choose them.
    """

    model_config = ConfigDict(extra="forbid")

    workspace_root: Path = Field(description="Project directory being built")
    venv_dir_name: str = Field(default=VENV_DIR_NAME)
    interpreter: str = Field(
        default=DEFAULT_INTERPRETER,
        description="Interpreter used to run `-m venv`",
    )
    installer_name: str = Field(
        default=DEFAULT_INSTALLER_NAME,
        description="Installer executable inside the environment",
    )
    tool_package: str = Field(
        default=DEFAULT_TOOL_PACKAGE,
        description="Package installed into a new environment",
    )
    target_platform: TargetPlatform = Field(default_factory=TargetPlatform.detect)
    repair_incomplete: bool = Field(
        default=False,
        description="Reinstall the tool when an existing environment lacks the installer",
    )

    @field_validator("workspace_root")
    @classmethod
    def _existing_directory(cls, value: Path) -> Path:
        # Processes run with this as cwd, so paths derived from it must be absolute
        value = value.absolute()
        if not value.is_dir():
            raise ValueError(f"workspace root {value} is not a directory")
        return value

    @field_validator("venv_dir_name", "interpreter", "installer_name", "tool_package")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("target_platform", mode="before")
    @classmethod
    def _parse_platform(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, TargetPlatform):
            return TargetPlatform.from_name(value)
        return value

    @property
    def venv_path(self) -> Path:
        return self.workspace_root / self.venv_dir_name

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, **overrides: Any
    ) -> "BootstrapConfig":
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``
            **overrides: Explicit values; any that are not None win over the
                environment

        Returns:
            BootstrapConfig

        Raises:
            ConfigurationError: No workspace root was given or found, or a
                value failed validation
        """
        if environ is None:
            environ = os.environ

        values: dict = {}

        for var in WORKSPACE_ROOT_ENV_VARS:
            if environ.get(var):
                values["workspace_root"] = environ[var]
                break

        for field_name, var in (
            ("venv_dir_name", VENV_DIR_ENV),
            ("interpreter", INTERPRETER_ENV),
            ("installer_name", INSTALLER_ENV),
            ("tool_package", TOOL_PACKAGE_ENV),
            ("target_platform", TARGET_OS_ENV),
        ):
            if environ.get(var):
                values[field_name] = environ[var]

        if REPAIR_ENV in environ:
            values["repair_incomplete"] = (
                environ[REPAIR_ENV].strip().lower() in TRUE_VALUES
            )

        values.update({k: v for k, v in overrides.items() if v is not None})

        if not values.get("workspace_root"):
            raise ConfigurationError(
                "Workspace root not set; pass it explicitly or set one of: "
                + ", ".join(WORKSPACE_ROOT_ENV_VARS)
            )

        try:
            return cls(**values)
        except ValueError as e:
            raise ConfigurationError(f"Invalid bootstrap configuration: {e}") from e
