"""Error handling decorators for CLI commands."""

import logging
import sys
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer

from lmsbuild.core.errors import (
    ConfigError,
    DependencyNotFoundError,
    FileSystemError,
    GraphError,
    InstallPlanError,
    LmsBuildError,
)
from lmsbuild.core.structlog_logger import get_struct_logger


__all__ = ["handle_errors", "print_stack_trace_if_verbose"]

logger = get_struct_logger(__name__)


def _fail(event: str, error: Exception) -> typer.Exit:
    logger.error(event, error=str(error))
    typer.echo(f"Error: {error}", err=True)
    print_stack_trace_if_verbose()
    return typer.Exit(1)


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to handle common exceptions in CLI commands.

    Configuration failures are fatal: the error is reported and the command
    exits with status 1.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ConfigError as e:
            raise _fail("configuration_error", e) from e
        except DependencyNotFoundError as e:
            raise _fail("dependency_not_found", e) from e
        except (GraphError, InstallPlanError) as e:
            raise _fail("plan_error", e) from e
        except FileSystemError as e:
            raise _fail("filesystem_error", e) from e
        except LmsBuildError as e:
            raise _fail("lmsbuild_error", e) from e
        except FileNotFoundError as e:
            raise _fail("file_not_found", e) from e
        except (typer.Exit, typer.Abort):
            raise
        except Exception as e:
            exc_info = logging.getLogger().isEnabledFor(logging.DEBUG)
            logger.error("unexpected_error", error=str(e), exc_info=exc_info)
            typer.echo(f"Unexpected error: {e}", err=True)
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e

    return wrapper


def print_stack_trace_if_verbose() -> None:
    """Print stack trace if verbose/debug mode is enabled."""
    if any(arg in sys.argv for arg in ["-v", "-vv", "--verbose", "--debug"]):
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
