"""Configure command: resolve options and print the configuration plan."""

from typing import Annotated

import typer

from lmsbuild.cli.app import AppContext
from lmsbuild.cli.decorators import handle_errors
from lmsbuild.cli.helpers import (
    dump_data,
    print_diagnostics,
    print_plan_tables,
    print_result,
)
from lmsbuild.cli.helpers.parameters import (
    BuildDirOption,
    DefinitionOption,
    OutputFormatOption,
    PrefixPathOption,
)
from lmsbuild.packaging.locator import create_package_locator
from lmsbuild.services.orchestrator import create_build_orchestrator


@handle_errors
def configure_command(
    ctx: typer.Context,
    definitions: DefinitionOption = None,
    build_dir: BuildDirOption = None,
    output_format: OutputFormatOption = "table",
    check_deps: Annotated[
        bool,
        typer.Option(
            "--check-deps",
            help="Require the testing framework package to be installed",
        ),
    ] = False,
    prefix_paths: PrefixPathOption = None,
) -> None:
    """Run the configure step and show the resulting plan.

    \b
    Examples:
      lmsbuild configure
      lmsbuild configure -D USE_LIBRARY=OFF
      lmsbuild configure --build-dir build --format json
    """
    app_ctx: AppContext = ctx.obj
    config = app_ctx.load_config(definitions, prefix_paths)

    orchestrator = create_build_orchestrator()
    locator = create_package_locator(config.prefix_paths) if check_deps else None
    plan = orchestrator.configure(config, package_locator=locator)

    materialized = None
    if build_dir is not None:
        materialized = orchestrator.materialize(plan, build_dir)

    if output_format == "table":
        print_diagnostics(plan.diagnostics)
        print_plan_tables(plan)
        if materialized is not None:
            print_result(materialized)
    else:
        typer.echo(dump_data(plan.to_dict_full(), output_format))

    if materialized is not None and not materialized.is_success():
        raise typer.Exit(1)


def register_commands(app: typer.Typer) -> None:
    """Register configure command with the main app.

    Args:
        app: The main Typer app
    """
    app.command(name="configure")(configure_command)
