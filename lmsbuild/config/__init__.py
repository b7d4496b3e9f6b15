"""Configuration package for lmsbuild."""

from lmsbuild.config.loader import (
    generate_config_paths,
    load_project_config,
    merge_config_data,
    parse_definitions,
)
from lmsbuild.config.models import (
    ExportConfig,
    LayoutConfig,
    PackageConfig,
    ProjectConfig,
    ProjectInfo,
    UnitTestConfig,
)


__all__ = [
    "ExportConfig",
    "LayoutConfig",
    "PackageConfig",
    "ProjectConfig",
    "ProjectInfo",
    "UnitTestConfig",
    "generate_config_paths",
    "load_project_config",
    "merge_config_data",
    "parse_definitions",
]
