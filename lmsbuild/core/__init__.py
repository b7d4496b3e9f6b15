"""Core infrastructure for lmsbuild: errors and logging."""

from lmsbuild.core.errors import (
    ConfigError,
    DependencyNotFoundError,
    FileSystemError,
    GraphError,
    InstallPlanError,
    LmsBuildError,
    TemplateError,
    VersionError,
)


__all__ = [
    "ConfigError",
    "DependencyNotFoundError",
    "FileSystemError",
    "GraphError",
    "InstallPlanError",
    "LmsBuildError",
    "TemplateError",
    "VersionError",
]
