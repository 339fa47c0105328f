# Logger Configuration
NAMESPACE = "env_bootstrap"
"""Application logger namespace for all components."""

# Virtual Environment Layout
VENV_DIR_NAME = ".env"
"""Name of the virtual environment directory inside the workspace root."""

DEFAULT_INTERPRETER = "python3"
"""Interpreter used to create the virtual environment, resolved on PATH."""

DEFAULT_INSTALLER_NAME = "pip3"
"""Installer executable looked up inside the virtual environment."""

DEFAULT_TOOL_PACKAGE = "maturin"
"""Packaging tool installed into a freshly created environment."""

WINDOWS_SCRIPTS_DIR = "Scripts"
"""Executable directory of a virtual environment on Windows."""

POSIX_BIN_DIR = "bin"
"""Executable directory of a virtual environment everywhere else."""

WINDOWS_EXE_SUFFIX = ".exe"
"""Suffix appended to executables on Windows."""

# Environment Variables
WORKSPACE_ROOT_ENV_VARS = ("ENV_BOOTSTRAP_WORKSPACE_ROOT", "CARGO_MANIFEST_DIR")
"""Variables consulted, in order, for the workspace root."""

CARGO_MANIFEST_DIR_ENV = "CARGO_MANIFEST_DIR"
"""Set by cargo when running a build script; enables directive output."""

VENV_DIR_ENV = "ENV_BOOTSTRAP_VENV_DIR"
INTERPRETER_ENV = "ENV_BOOTSTRAP_PYTHON"
INSTALLER_ENV = "ENV_BOOTSTRAP_INSTALLER"
TOOL_PACKAGE_ENV = "ENV_BOOTSTRAP_PACKAGE"
TARGET_OS_ENV = "ENV_BOOTSTRAP_TARGET_OS"
REPAIR_ENV = "ENV_BOOTSTRAP_REPAIR"

TRUE_VALUES = {"1", "true", "yes", "on"}
"""Accepted spellings of an enabled boolean environment variable."""

# Cargo Build Script Directives
CARGO_WARNING_PREFIX = "cargo:warning="
"""Prefix cargo requires before it shows build script output."""

CARGO_RERUN_PREFIX = "cargo:rerun-if-changed="
"""Directive telling cargo when to rerun the build script."""
