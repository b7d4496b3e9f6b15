"""Package commands: emit the package manifest and locate installed packages."""

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from lmsbuild.cli.app import AppContext
from lmsbuild.cli.decorators import handle_errors
from lmsbuild.cli.helpers import dump_data, print_error_message, print_success_message
from lmsbuild.cli.helpers.parameters import (
    DefinitionOption,
    OutputFormatOption,
    PrefixPathOption,
)
from lmsbuild.packaging.locator import create_package_locator
from lmsbuild.packaging.manifest import emit_package_manifest


@handle_errors
def manifest_command(
    ctx: typer.Context,
    definitions: DefinitionOption = None,
    output_format: OutputFormatOption = "table",
) -> None:
    """Print the package manifest handed to the packaging tool."""
    app_ctx: AppContext = ctx.obj
    config = app_ctx.load_config(definitions)
    manifest = emit_package_manifest(config)

    if output_format != "table":
        typer.echo(dump_data(manifest.to_dict_full(), output_format))
        return

    table = Table(title="Package Manifest", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Generator", manifest.generator)
    table.add_row("Name", manifest.name)
    table.add_row("Version", manifest.version)
    table.add_row("Contact", manifest.contact)
    if manifest.description:
        table.add_row("Description", manifest.description)
    if manifest.vendor:
        table.add_row("Vendor", manifest.vendor)
    table.add_row("Archive", manifest.archive_name)
    Console().print(table)


@handle_errors
def find_package_command(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Package name, e.g. Library")],
    version: Annotated[
        str | None,
        typer.Option("--version", help="Minimum compatible version"),
    ] = None,
    prefix_paths: PrefixPathOption = None,
    output_format: OutputFormatOption = "table",
) -> None:
    """Locate an installed package the way a consuming project would."""
    app_ctx: AppContext = ctx.obj
    config = app_ctx.load_config(prefix_paths=prefix_paths)

    locator = create_package_locator(config.prefix_paths)
    result = locator.find_package(name, version)

    if output_format != "table":
        typer.echo(
            dump_data(
                {
                    "package": name,
                    "found": result.found,
                    "config_file": str(result.config_file) if result.config_file else None,
                    "version": result.version,
                    "searched_paths": [str(p) for p in result.searched_paths],
                },
                output_format,
            )
        )
    elif result.found:
        suffix = f" (found version \"{result.version}\")" if result.version else ""
        print_success_message(f"Found {name}: {result.config_file}{suffix}")
    else:
        for error in result.errors:
            print_error_message(error)

    if not result.found:
        raise typer.Exit(1)


def register_commands(app: typer.Typer) -> None:
    """Register package commands with the main app."""
    app.command(name="manifest")(manifest_command)
    app.command(name="find-package")(find_package_command)
