"""Helpers for CLI parameters and output."""

from lmsbuild.cli.helpers.output import (
    dump_data,
    print_diagnostics,
    print_error_message,
    print_plan_tables,
    print_result,
    print_success_message,
)


__all__ = [
    "dump_data",
    "print_diagnostics",
    "print_error_message",
    "print_plan_tables",
    "print_result",
    "print_success_message",
]
