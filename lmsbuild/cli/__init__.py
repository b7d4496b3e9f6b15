"""CLI interface for lmsbuild."""

from lmsbuild.cli.app import app, main
from lmsbuild.cli.commands import register_all_commands


register_all_commands(app)

__all__ = ["app", "main"]
