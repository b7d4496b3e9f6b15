"""Main CLI application for lmsbuild."""

import logging
import sys
from importlib.metadata import distribution
from pathlib import Path
from typing import Annotated, Any

import typer

from lmsbuild.cli.decorators.error_handling import print_stack_trace_if_verbose
from lmsbuild.config.loader import load_project_config, merge_config_data, parse_definitions
from lmsbuild.config.models import ProjectConfig
from lmsbuild.core.logging import setup_logging


__all__ = ["AppContext", "app", "main", "__version__"]

# Version from package metadata directly to avoid circular imports
__version__ = distribution("lmsbuild").version

logger = logging.getLogger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        verbose: int = 0,
        log_file: str | None = None,
        config_file: str | None = None,
        debug: bool = False,
    ):
        self.verbose = verbose
        self.log_file = log_file
        self.config_file = config_file
        self.debug = debug

    @property
    def log_level_name(self) -> str | None:
        """Log level chosen on the command line, or None to defer to config."""
        if self.debug or self.verbose >= 2:
            return "DEBUG"
        if self.verbose == 1:
            return "INFO"
        return None

    def load_config(
        self,
        definitions: list[str] | None = None,
        prefix_paths: list[Path] | None = None,
    ) -> ProjectConfig:
        """Load project configuration with ``-D`` definitions applied."""
        overrides: dict[str, Any] = parse_definitions(definitions or [])
        if prefix_paths:
            overrides = merge_config_data(
                overrides, {"prefix_paths": [str(p) for p in prefix_paths]}
            )
        config = load_project_config(self.config_file, overrides=overrides)

        # Without CLI verbosity flags the config file decides the log level
        if self.log_level_name is None and config.log_level != "WARNING":
            setup_logging(config.log_level, log_file=self.log_file)
        return config


app = typer.Typer(
    name="lmsbuild",
    help=f"""lmsbuild v{__version__}

Configure-time build orchestrator for the Library Management System sample.

Configuration → Target graph → Install rules → Export files → Package manifest

Common workflows:
  • Show the plan:       lmsbuild configure
  • Disable the library: lmsbuild configure -D USE_LIBRARY=OFF
  • Emit CMakeLists:     lmsbuild generate out/ --build-dir build/
  • Locate a package:    lmsbuild find-package Library -p /usr/lib/cmake/LMS""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file")
    ] = None,
    config_file: Annotated[
        str | None,
        typer.Option("-c", "--config", help="Path to configuration file"),
    ] = None,
    show_version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """lmsbuild build orchestrator."""
    if show_version:
        typer.echo(f"lmsbuild v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    app_context = AppContext(
        verbose=verbose, log_file=log_file, config_file=config_file, debug=debug
    )
    ctx.obj = app_context
    setup_logging(app_context.log_level_name or "WARNING", log_file=log_file)


def main() -> int:
    """Main CLI entry point."""
    exit_code = 0
    try:
        app()
    except SystemExit as e:
        exit_code = e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        print_stack_trace_if_verbose()
        exit_code = 1
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
