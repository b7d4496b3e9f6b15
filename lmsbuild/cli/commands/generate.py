"""Generate command: write CMakeLists.txt for the resolved configuration."""

from pathlib import Path
from typing import Annotated

import typer

from lmsbuild.adapters import create_file_adapter, create_template_adapter
from lmsbuild.cli.app import AppContext
from lmsbuild.cli.decorators import handle_errors
from lmsbuild.cli.helpers import print_result, print_success_message
from lmsbuild.cli.helpers.parameters import BuildDirOption, DefinitionOption
from lmsbuild.generators.cmake_writer import write_cmake_lists
from lmsbuild.services.orchestrator import create_build_orchestrator


@handle_errors
def generate_command(
    ctx: typer.Context,
    output: Annotated[
        Path,
        typer.Argument(help="Output file or directory for CMakeLists.txt"),
    ],
    definitions: DefinitionOption = None,
    build_dir: BuildDirOption = None,
) -> None:
    """Write a CMakeLists.txt reflecting the resolved configuration.

    With --build-dir the package locator and version files are written
    there as well.
    """
    app_ctx: AppContext = ctx.obj
    config = app_ctx.load_config(definitions)

    file_adapter = create_file_adapter()
    orchestrator = create_build_orchestrator(file_adapter=file_adapter)
    plan = orchestrator.configure(config)

    # A path without a suffix names the output directory
    if not output.suffix and not file_adapter.is_file(output):
        file_adapter.mkdir(output)
    written = write_cmake_lists(
        plan, output, file_adapter=file_adapter, template_adapter=create_template_adapter()
    )
    print_success_message(f"Wrote {written}")

    if build_dir is not None:
        result = orchestrator.materialize(plan, build_dir)
        print_result(result)
        if not result.is_success():
            raise typer.Exit(1)


def register_commands(app: typer.Typer) -> None:
    """Register generate command with the main app."""
    app.command(name="generate")(generate_command)
