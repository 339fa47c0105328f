"""Command line entry point, meant to be called from a build script."""

import logging
import os
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from .bootstrapper import EnvironmentBootstrapper
from .constants import CARGO_MANIFEST_DIR_ENV, NAMESPACE
from .errors import BootstrapError
from .logger import emit_rerun_if_changed, setup_logging
from .models import BootstrapConfig

app = typer.Typer(
    help="Ensure a workspace has a Python virtual environment with a packaging tool installed."
)
console = Console(stderr=True, soft_wrap=True)
logger = logging.getLogger(f"{NAMESPACE}.cli")


@app.command()
def bootstrap(
    workspace_root: Optional[Path] = typer.Option(
        None,
        "--workspace-root",
        "-w",
        help="Project directory (defaults to ENV_BOOTSTRAP_WORKSPACE_ROOT or CARGO_MANIFEST_DIR).",
    ),
    interpreter: Optional[str] = typer.Option(
        None, "--python", help="Interpreter used to create the environment."
    ),
    tool_package: Optional[str] = typer.Option(
        None, "--package", "-p", help="Package to install into a new environment."
    ),
    venv_dir_name: Optional[str] = typer.Option(
        None, "--venv-dir", help="Environment directory name inside the workspace."
    ),
    target_os: Optional[str] = typer.Option(
        None, "--target-os", help="Layout to assume: windows, linux, macos, ..."
    ),
    repair: Optional[bool] = typer.Option(
        None,
        "--repair/--no-repair",
        help="Reinstall the tool if an existing environment lacks the installer.",
    ),
    cargo: Optional[bool] = typer.Option(
        None,
        "--cargo/--no-cargo",
        help="Emit output as cargo build script directives (default: when run by cargo).",
    ),
    rerun_if_changed: List[str] = typer.Option(
        [],
        "--rerun-if-changed",
        help="Path to report as a cargo rerun-if-changed trigger. Repeatable.",
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Overrides LOG_LEVEL."
    ),
) -> None:
    """Create <workspace>/.env and install the packaging tool unless it exists."""
    if cargo is None:
        cargo = bool(os.environ.get(CARGO_MANIFEST_DIR_ENV))

    setup_logging(level=log_level, cargo=cargo)

    if cargo and rerun_if_changed:
        emit_rerun_if_changed(rerun_if_changed)

    try:
        config = BootstrapConfig.from_env(
            workspace_root=workspace_root,
            interpreter=interpreter,
            tool_package=tool_package,
            venv_dir_name=venv_dir_name,
            target_platform=target_os,
            repair_incomplete=repair,
        )
        logger.debug(f"Bootstrap config: {config.model_dump()}")
        EnvironmentBootstrapper(config).ensure_environment()
    except BootstrapError as e:
        console.print(
            f"[red]Error:[/red] {type(e).__name__}: {escape(e.message)}", style="bold"
        )
        raise typer.Exit(1)


def main() -> None:
    app()
