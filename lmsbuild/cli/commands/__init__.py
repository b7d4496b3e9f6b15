"""CLI command modules."""

import typer

from lmsbuild.cli.commands.clean import register_commands as register_clean_commands
from lmsbuild.cli.commands.configure import (
    register_commands as register_configure_commands,
)
from lmsbuild.cli.commands.generate import register_commands as register_generate_commands
from lmsbuild.cli.commands.install import register_commands as register_install_commands
from lmsbuild.cli.commands.package import register_commands as register_package_commands


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Args:
        app: The main Typer app
    """
    register_configure_commands(app)
    register_generate_commands(app)
    register_package_commands(app)
    register_install_commands(app)
    register_clean_commands(app)
