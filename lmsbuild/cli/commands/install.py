"""Install-manifest command: list the copies an install would perform."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from lmsbuild.cli.app import AppContext
from lmsbuild.cli.decorators import handle_errors
from lmsbuild.cli.helpers import dump_data
from lmsbuild.cli.helpers.parameters import DefinitionOption, OutputFormatOption
from lmsbuild.services.orchestrator import create_build_orchestrator


@handle_errors
def install_manifest_command(
    ctx: typer.Context,
    prefix: Annotated[
        Path,
        typer.Option("--prefix", help="Installation prefix"),
    ],
    source_dir: Annotated[
        Path,
        typer.Option("--source-dir", "-S", help="Project source directory"),
    ] = Path("."),
    build_dir: Annotated[
        Path,
        typer.Option("--build-dir", "-B", help="Build directory"),
    ] = Path("build"),
    definitions: DefinitionOption = None,
    output_format: OutputFormatOption = "table",
) -> None:
    """List every (source, destination) pair installing to PREFIX would copy."""
    app_ctx: AppContext = ctx.obj
    config = app_ctx.load_config(definitions)

    orchestrator = create_build_orchestrator()
    plan = orchestrator.configure(config)
    entries = orchestrator.install_entries(plan, source_dir, build_dir, prefix)

    if output_format != "table":
        typer.echo(dump_data([entry.to_dict_full() for entry in entries], output_format))
        return

    if not entries:
        typer.echo("Nothing to install")
        return

    table = Table(title=f"Install to {prefix}", show_header=True, header_style="bold cyan")
    table.add_column("Kind", style="cyan")
    table.add_column("Source")
    table.add_column("Destination", style="green")
    for entry in entries:
        table.add_row(str(entry.kind), str(entry.source), str(entry.destination))
    Console().print(table)


def register_commands(app: typer.Typer) -> None:
    """Register install-manifest command with the main app."""
    app.command(name="install-manifest")(install_manifest_command)
