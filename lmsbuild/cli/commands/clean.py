"""Clean command: remove build output."""

from pathlib import Path
from typing import Annotated

import typer

from lmsbuild.cli.decorators import handle_errors
from lmsbuild.cli.helpers import print_result
from lmsbuild.services.orchestrator import create_build_orchestrator


@handle_errors
def clean_command(
    build_dir: Annotated[
        Path,
        typer.Argument(help="Build directory to remove", file_okay=False),
    ],
) -> None:
    """Remove generated build files and the build directory (clean-all)."""
    result = create_build_orchestrator().clean(build_dir)
    print_result(result)
    if not result.is_success():
        raise typer.Exit(1)


def register_commands(app: typer.Typer) -> None:
    """Register clean command with the main app."""
    app.command(name="clean")(clean_command)
