"""Exception hierarchy for lmsbuild.

Every error raised while configuring the project derives from
``LmsBuildError``. Configuration is one-shot, so none of these are retried:
they abort the configure step and are reported by the CLI.
"""

from typing import Any


class LmsBuildError(Exception):
    """Base class for all lmsbuild errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} ({details})"


class ConfigError(LmsBuildError):
    """Invalid or unreadable project configuration."""


class VersionError(ConfigError):
    """A version string or compatibility policy could not be parsed."""


class GraphError(LmsBuildError):
    """The target graph violates an invariant (missing target, cycle, ...)."""


class InstallPlanError(LmsBuildError):
    """An install rule or export descriptor is inconsistent with the graph."""


class DependencyNotFoundError(LmsBuildError):
    """A required external package could not be located."""


class TemplateError(LmsBuildError):
    """A generated file template failed to render."""


class FileSystemError(LmsBuildError):
    """A file operation on the build or install tree failed."""


def create_file_error(
    path: Any, operation: str, error: Exception, context: dict[str, Any] | None = None
) -> FileSystemError:
    """Wrap a low-level OS error into a ``FileSystemError`` with context."""
    full_context = {"path": str(path), "operation": operation}
    if context:
        full_context.update(context)
    return FileSystemError(f"File operation '{operation}' failed: {error}", full_context)


def create_template_error(
    template: str, operation: str, error: Exception, context: dict[str, Any] | None = None
) -> TemplateError:
    """Wrap a Jinja2 failure into a ``TemplateError`` with context."""
    full_context = {"template": template, "operation": operation}
    if context:
        full_context.update(context)
    return TemplateError(
        f"Template operation '{operation}' failed: {error}", full_context
    )
