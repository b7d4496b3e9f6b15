"""Logging setup for lmsbuild.

structlog sits on top of stdlib logging: structlog events are wrapped for
``ProcessorFormatter`` and every handler picks its own renderer. Console
output goes to stderr so that plans printed on stdout can be piped.
"""

import logging
import shutil
import sys
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any, TextIO

import structlog
from rich.console import Console
from rich.traceback import Traceback
from structlog.stdlib import BoundLogger
from structlog.typing import ExcInfo, Processor


# Third-party loggers that only speak up when lmsbuild runs at DEBUG
QUIET_LOGGERS = ("jinja2", "pydantic", "markdown_it")


def truncate_timestamp(
    logger: Any, log_method: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Move ``timestamp_raw`` to ``timestamp`` with millisecond precision."""
    raw = event_dict.pop("timestamp_raw", None)
    if raw is not None:
        event_dict["timestamp"] = raw[:-3]
    return event_dict


def _console_timestamp(log_level: int) -> list[Processor]:
    # Debug sessions are short, the date only adds noise
    fmt = "%H:%M:%S.%f" if log_level < logging.INFO else "%Y-%m-%d %H:%M:%S.%f"
    return [
        structlog.processors.TimeStamper(fmt=fmt, key="timestamp_raw"),
        truncate_timestamp,
    ]


def _base_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]


def configure_structlog(log_level: int = logging.INFO) -> None:
    """Configure structlog to hand events over to stdlib handlers."""
    processors: list[Processor] = [structlog.stdlib.filter_by_level]
    processors += _base_processors()

    if log_level < logging.INFO:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            )
        )

    processors += _console_timestamp(log_level)
    processors += [
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        # Must stay last so each handler can choose a renderer
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def rich_traceback(sio: TextIO, exc_info: ExcInfo) -> None:
    """Render *exc_info* into *sio* with rich, hiding CLI framework frames."""
    term_width, _ = shutil.get_terminal_size((80, 123))
    sio.write("\n")
    Console(file=sio, color_system="truecolor").print(
        Traceback.from_exception(
            *exc_info,
            extra_lines=1,
            width=term_width,
            max_frames=5,
            suppress=["click", "typer", "jinja2", "pydantic"],
        ),
    )


def _console_handler(log_level: int, json_logs: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(exception_formatter=rich_traceback)
    )
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_base_processors()
            + [structlog.dev.set_exc_info]
            + _console_timestamp(log_level),
            processor=renderer,
        )
    )
    return handler


def _file_handler(log_file: str | Path, log_level: int) -> logging.Handler:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setLevel(log_level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_base_processors()
            + [
                structlog.dev.set_exc_info,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
            processor=structlog.processors.JSONRenderer(),
        )
    )
    return handler


def setup_logging(
    log_level_name: str = "WARNING",
    log_file: str | Path | None = None,
    json_logs: bool = False,
) -> BoundLogger:
    """Configure root logging and structlog for the whole process.

    Args:
        log_level_name: Level name such as ``"INFO"``; unknown names fall
            back to WARNING
        log_file: Optional path that receives every event as a JSON line
        json_logs: Render console output as JSON instead of colored text

    Returns:
        A structlog logger bound to the root logger
    """
    log_level = getattr(logging, log_level_name.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    configure_structlog(log_level=log_level)

    root_logger.handlers = [_console_handler(log_level, json_logs)]
    if log_file:
        root_logger.addHandler(_file_handler(log_file, log_level))

    quiet_level = logging.DEBUG if log_level <= logging.DEBUG else logging.WARNING
    for name in QUIET_LOGGERS:
        quiet = logging.getLogger(name)
        quiet.handlers = []
        quiet.propagate = True
        quiet.setLevel(quiet_level)

    return structlog.get_logger()  # type: ignore[no-any-return]


def get_logger(name: str | None = None) -> BoundLogger:
    """Get a structlog logger instance."""
    return structlog.get_logger(name)  # type: ignore[no-any-return]
