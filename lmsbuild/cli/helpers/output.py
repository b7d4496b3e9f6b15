"""Helper functions for CLI output formatting with Rich integration."""

import json
from typing import Any

import typer
import yaml
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from lmsbuild.models.plan import ConfigurationPlan
from lmsbuild.models.results import BaseResult
from lmsbuild.models.target import Visibility


def print_success_message(message: str) -> None:
    Console().print(f"[green]✓[/green] {message}", highlight=False)


def print_error_message(message: str) -> None:
    Console(stderr=True).print(f"[red]✗[/red] {message}", highlight=False)


def print_result(result: BaseResult) -> None:
    """Print operation result with appropriate formatting."""
    for message in result.messages:
        print_success_message(message)
    for error in result.errors:
        print_error_message(error)


def print_diagnostics(diagnostics: tuple[str, ...] | list[str]) -> None:
    """Print configure diagnostics as status lines on stderr."""
    for message in diagnostics:
        typer.echo(f"-- {message}", err=True)


def dump_data(data: Any, output_format: str) -> str:
    """Serialize JSON-compatible data as JSON or YAML."""
    if output_format == "yaml":
        return yaml.safe_dump(data, sort_keys=False)
    return json.dumps(data, indent=2)


def _links(plan: ConfigurationPlan, name: str) -> str:
    target = plan.graph.get(name)
    return ", ".join(
        f"{link.target} ({Visibility(link.visibility).value})" for link in target.links
    )


def print_plan_tables(plan: ConfigurationPlan, console: Console | None = None) -> None:
    """Render a configuration plan as Rich tables."""
    console = console or Console()

    option_text = ", ".join(
        f"{name}={'ON' if value else 'OFF'}" for name, value in plan.options.items()
    )
    console.print(
        Panel(
            f"{plan.project_name} {plan.project_version}\n{option_text}",
            title="Project",
            border_style="blue",
        )
    )

    target_table = Table(title="Targets", show_header=True, header_style="bold cyan")
    target_table.add_column("Name", style="cyan", no_wrap=True)
    target_table.add_column("Kind")
    target_table.add_column("Sources", style="dim")
    target_table.add_column("Links")
    for target in plan.graph.targets:
        target_table.add_row(
            target.name,
            str(target.kind),
            "\n".join(target.sources),
            _links(plan, target.name),
        )
    console.print(target_table)

    if plan.install_rules:
        rule_table = Table(title="Install Rules", show_header=True, header_style="bold cyan")
        rule_table.add_column("Kind", style="cyan")
        rule_table.add_column("Source")
        rule_table.add_column("Destination")
        for rule in plan.install_rules:
            if rule.target:
                source = rule.target
            elif rule.directory:
                source = f"{rule.directory}/ ({rule.pattern})"
            else:
                source = ", ".join(rule.files)
            rule_table.add_row(str(rule.kind), source, rule.destination)
        console.print(rule_table)

    if plan.export is not None:
        export = plan.export
        console.print(
            Panel(
                f"{export.name} -> {export.destination}\n"
                f"{export.locator_file}, {export.version_file}\n"
                f"{export.package_name} {export.version} ({export.compatibility})",
                title="Export",
                border_style="green",
            )
        )

    manifest = plan.manifest
    console.print(
        Panel(
            f"{manifest.generator}: {manifest.name} {manifest.version}\n"
            f"Contact: {manifest.contact}",
            title="Package",
            border_style="magenta",
        )
    )
