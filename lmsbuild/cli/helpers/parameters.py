"""Reusable typer parameter annotations."""

from pathlib import Path
from typing import Annotated

import typer


OUTPUT_FORMATS = ("table", "json", "yaml")


def complete_output_formats(incomplete: str) -> list[str]:
    """Tab completion for output formats."""
    return [fmt for fmt in OUTPUT_FORMATS if fmt.startswith(incomplete)]


def validate_output_format(value: str) -> str:
    value = value.lower()
    if value not in OUTPUT_FORMATS:
        raise typer.BadParameter(f"must be one of: {', '.join(OUTPUT_FORMATS)}")
    return value


OutputFormatOption = Annotated[
    str,
    typer.Option(
        "--format",
        "-f",
        help="Output format: table|json|yaml (default: table)",
        autocompletion=complete_output_formats,
        callback=validate_output_format,
    ),
]

DefinitionOption = Annotated[
    list[str] | None,
    typer.Option(
        "-D",
        "--define",
        help="Set an option, e.g. -D USE_LIBRARY=OFF or -D CMAKE_PREFIX_PATH=/opt/lms",
    ),
]

PrefixPathOption = Annotated[
    list[Path] | None,
    typer.Option(
        "--prefix-path",
        "-p",
        help="Installation prefix to search for packages (repeatable)",
    ),
]

BuildDirOption = Annotated[
    Path | None,
    typer.Option(
        "--build-dir",
        "-B",
        help="Build directory receiving generated files",
        file_okay=False,
    ),
]
