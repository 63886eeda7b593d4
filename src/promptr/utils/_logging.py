"""Logging utilities for promptr.

This module provides a standalone structlog logger factory. Diagnostics go to
standard error by default so they never mix with the rendered prompt on
standard output. The logger is self-contained and does not modify global
structlog configuration.
"""

import atexit
import logging
import sys
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TextIO, cast

import structlog

if TYPE_CHECKING:
    from collections.abc import Mapping

    from structlog.typing import FilteringBoundLogger

LogFormatType = Literal["json", "text"]

DEFAULT_LOG_LEVEL = "warning"


def _log_level_from_string(
    level: str | None,
    *,
    environ: "Mapping[str, str] | None" = None,
) -> int:
    """Convert a log level string to a logging level integer.

    The level is determined by (in order of precedence):
    1. PROMPTR_DEBUG environment variable (if set, enables DEBUG level)
    2. The `level` argument (if provided)
    3. PROMPTR_LOG_LEVEL environment variable
    4. Default: WARNING

    Args:
        level: Log level string (debug, info, warning, error), or None.
        environ: Environment to consult. Defaults to the process environment.

    Returns:
        The logging level as an integer.
    """
    if environ is None:
        debug = getenv("PROMPTR_DEBUG", None)
        env_level = getenv("PROMPTR_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    else:
        debug = environ.get("PROMPTR_DEBUG")
        env_level = environ.get("PROMPTR_LOG_LEVEL", DEFAULT_LOG_LEVEL)

    if debug:
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    effective = level if level else env_level
    return log_levels.get(effective.upper(), logging.WARNING)


def create_logger(
    *,
    level: str | None = None,
    log_format: LogFormatType = "text",
    log_file: str = "",
    stream: TextIO | None = None,
    environ: "Mapping[str, str] | None" = None,
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a standalone structlog logger for diagnostics.

    Args:
        level: Log level threshold (debug, info, warning, error). Falls back to
            PROMPTR_LOG_LEVEL, then warning. PROMPTR_DEBUG forces debug.
        log_format: Output format, either "json" or "text".
        log_file: Path to a log file. Empty writes to `stream` instead. A file
            that cannot be opened falls back to `stream` with a warning.
        stream: Stream used when no file is configured. Defaults to stderr.
        environ: Environment to consult for overrides.

    Returns:
        A configured FilteringBoundLogger instance.
    """
    effective_level = _log_level_from_string(level, environ=environ)

    destination = stream if stream is not None else sys.stderr
    file_error: OSError | None = None
    if log_file:
        log_path = Path(log_file).expanduser()
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handle = log_path.open("a", encoding="utf-8")
        except OSError as e:
            file_error = e
        else:
            atexit.register(handle.close)
            destination = handle
    logger_factory = structlog.WriteLoggerFactory(file=destination)

    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
    ]

    if log_format == "json":
        # Timestamps only in JSON; text output stays byte-stable between runs
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    wrapper_class = structlog.make_filtering_bound_logger(effective_level)

    logger = cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            logger_factory(),
            processors=processors,
            wrapper_class=wrapper_class,
            context_class=dict,
        ),
    )
    if file_error is not None:
        logger.warning("log_file_unavailable", path=log_file, error=str(file_error))
    return logger


def create_null_logger() -> "FilteringBoundLogger":  # noqa: UP037
    """Create a logger that discards its output.

    Returns:
        A FilteringBoundLogger whose messages are never written anywhere.
    """
    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.ReturnLogger(),
            processors=[structlog.dev.ConsoleRenderer(colors=False)],
            wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
            context_class=dict,
        ),
    )
