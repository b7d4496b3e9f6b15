"""Structlog logger factory and utilities for lmsbuild."""

import logging
from typing import Any

import structlog


def get_struct_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger with the given name.

    Args:
        name: The logger name, usually __name__

    Returns:
        A bound structlog logger instance

    Note: For exception logging with debug stack traces, use this pattern:
        try:
            # some operation
        except Exception as e:
            exc_info = logging.getLogger().isEnabledFor(logging.DEBUG)
            logger.error("operation_failed", error=str(e), exc_info=exc_info)
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]


class StructlogMixin:
    """Mixin giving services a logger bound to the service name."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._logger: structlog.stdlib.BoundLogger | None = None

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        """Get or create a logger for this service with bound context."""
        if getattr(self, "_logger", None) is None:
            self._logger = get_struct_logger(self.__class__.__module__).bind(
                service=self.__class__.__name__
            )
        return self._logger  # type: ignore[return-value]

    def log_error_with_context(
        self, message: str, error: Exception, **context: Any
    ) -> None:
        """Log an error, attaching a stack trace only in debug mode."""
        exc_info = logging.getLogger().isEnabledFor(logging.DEBUG)
        self.logger.error(message, error=str(error), exc_info=exc_info, **context)
