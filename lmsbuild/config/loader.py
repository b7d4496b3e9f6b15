"""
Project configuration loading for lmsbuild.

Configuration is read from the first YAML file found in:
1. Command-line provided config file
2. ``lmsbuild.yaml`` or ``.lmsbuild.yml`` in the current directory
3. The user's XDG config directory

Explicit overrides (e.g. ``-D`` definitions from the CLI) are merged on top
of the file data, and ``LMSBUILD_*`` environment variables win over both.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from lmsbuild.config.models import ProjectConfig
from lmsbuild.core.errors import ConfigError
from lmsbuild.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)


def generate_config_paths(cli_config_path: str | Path | None = None) -> list[Path]:
    """Generate a list of config paths to search in order of precedence."""
    config_paths: list[Path] = []

    if cli_config_path:
        config_paths.append(Path(cli_config_path).expanduser().resolve())

    config_paths.extend([Path.cwd() / "lmsbuild.yaml", Path.cwd() / ".lmsbuild.yml"])

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    config_root = (
        Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"
    ) / "lmsbuild"
    config_paths.extend([config_root / "config.yaml", config_root / "config.yml"])

    return config_paths


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}", {"path": str(path)}) from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e}", {"path": str(path)}) from e

    if not isinstance(data, dict):
        raise ConfigError(
            "Config file must contain a mapping at the top level", {"path": str(path)}
        )
    return data


def merge_config_data(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``overrides`` into a copy of ``base``."""
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config_data(merged[key], value)
        elif isinstance(value, list) and isinstance(merged.get(key), list):
            merged[key] = [*merged[key], *(v for v in value if v not in merged[key])]
        else:
            merged[key] = value
    return merged


def load_project_config(
    cli_config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> ProjectConfig:
    """Load and validate the project configuration.

    Args:
        cli_config_path: Config file given on the command line. It must exist.
        overrides: Values merged over the file data

    Returns:
        Validated ProjectConfig

    Raises:
        ConfigError: If the file is missing, malformed or fails validation
    """
    if cli_config_path and not Path(cli_config_path).expanduser().exists():
        raise ConfigError(
            "Config file not found", {"path": str(Path(cli_config_path).expanduser())}
        )

    config_data: dict[str, Any] = {}
    found_path: Path | None = None
    for candidate in generate_config_paths(cli_config_path):
        if candidate.is_file():
            config_data = _read_yaml(candidate)
            found_path = candidate
            break

    if found_path:
        logger.debug("config_file_loaded", path=str(found_path))
    else:
        logger.debug("config_file_not_found", using="defaults")

    if overrides:
        config_data = merge_config_data(config_data, overrides)

    try:
        config = ProjectConfig(**config_data)
    except ValidationError as e:
        context = {"path": str(found_path)} if found_path else None
        raise ConfigError(f"Invalid project configuration: {e}", context) from e

    logger.debug(
        "config_resolved",
        project=config.project.name,
        version=config.project.version,
        options=dict(config.options),
    )
    return config


def parse_definitions(definitions: list[str]) -> dict[str, Any]:
    """Turn ``NAME=VALUE`` cache definitions into config overrides.

    ``CMAKE_PREFIX_PATH`` is split on ``;`` and ``os.pathsep`` and becomes
    ``prefix_paths``; every other definition is treated as an option value.
    A bare ``NAME`` is shorthand for ``NAME=ON``.
    """
    options: dict[str, str] = {}
    prefix_paths: list[str] = []
    for definition in definitions:
        name, sep, value = definition.partition("=")
        name = name.strip()
        # Allow NAME:BOOL=VALUE typed definitions
        name = name.split(":", 1)[0]
        if not name:
            raise ConfigError("Empty definition name", {"definition": definition})
        if not sep:
            value = "ON"
        if name == "CMAKE_PREFIX_PATH":
            for chunk in value.replace(";", os.pathsep).split(os.pathsep):
                if chunk.strip():
                    prefix_paths.append(chunk.strip())
        else:
            options[name.upper()] = value

    overrides: dict[str, Any] = {}
    if options:
        overrides["options"] = options
    if prefix_paths:
        overrides["prefix_paths"] = prefix_paths
    return overrides
