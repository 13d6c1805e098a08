"""
Centralized logging configuration for the curve-series pipeline.

Provides structured logging with JSON formatting support, a context manager
for attaching fields (curve id, export format, ...) to every message in a
scope, and lazy configuration.

Usage:
    from curve_series.core.logging import get_logger, setup_logging

    setup_logging(level="DEBUG", json_format=True)

    logger = get_logger(__name__)
    logger.info("Export written", extra={"rows": 183})
"""

import json
import logging
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator

_ROOT_LOGGER = "curve_series"

# Fields attached by LogContext
_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})

# Extra attributes promoted to top-level JSON keys
_PROMOTED_ATTRS = ("curve_id", "curve_count", "rows", "format", "path", "duration_seconds")


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a single JSON object.

        Args:
            record: The log record to format.

        Returns:
            JSON-formatted string.
        """
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        ctx = _log_context.get()
        if ctx:
            log_data["context"] = ctx

        for attr in _PROMOTED_ATTRS:
            if hasattr(record, attr):
                log_data[attr] = getattr(record, attr)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["exception_type"] = record.exc_info[0].__name__ if record.exc_info[0] else None

        return json.dumps(log_data, default=str)


_logging_configured = False


def setup_logging(
    level: str | None = None,
    log_file: Path | None = None,
    json_format: bool = False,
) -> None:
    """Configure package logging.

    Subsequent calls replace the previous handlers.

    Args:
        level: Log level name. Defaults to the configured log level.
        log_file: Optional file path; file output is always JSON.
        json_format: Use JSON formatting on the console.
    """
    global _logging_configured

    # Import here to avoid circular imports
    from curve_series.config import get_settings

    level = level or get_settings().log_level

    root_logger = logging.getLogger(_ROOT_LOGGER)
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG)
    if json_format:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    root_logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

    _logging_configured = True
    root_logger.debug(f"Logging configured: level={level}, file={log_file}, json={json_format}")


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package root, configuring logging on first use.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Configured logger instance.
    """
    if not _logging_configured:
        setup_logging()

    if not name.startswith(_ROOT_LOGGER):
        name = f"{_ROOT_LOGGER}.{name}"

    return logging.getLogger(name)


class LogContext:
    """Context manager adding key-value fields to every log message in scope.

    Example:
        with LogContext(curve_id=str(curve.id)):
            logger.debug("Stroke committed")
    """

    def __init__(self, **context: Any):
        self.context = context
        self._token = None

    def __enter__(self) -> "LogContext":
        current = _log_context.get()
        self._token = _log_context.set({**current, **self.context})
        return self

    def __exit__(self, *args: Any) -> None:
        if self._token is not None:
            _log_context.reset(self._token)


def current_context() -> dict[str, Any]:
    """Return a copy of the fields set by enclosing LogContext blocks."""
    return dict(_log_context.get())


@contextmanager
def log_operation(
    logger: logging.Logger,
    operation: str,
    level: int = logging.INFO,
) -> Iterator[None]:
    """Log the start and end of an operation with its duration.

    Args:
        logger: Logger to use.
        operation: Operation name for logging.
        level: Log level for the start and completion messages.
    """
    start = time.perf_counter()
    logger.log(level, f"Starting: {operation}")
    try:
        yield
    except Exception as e:
        elapsed = time.perf_counter() - start
        logger.error(
            f"Failed: {operation}",
            extra={
                "duration_seconds": round(elapsed, 4),
                "error": str(e),
                "error_type": type(e).__name__,
            },
            exc_info=True,
        )
        raise
    elapsed = time.perf_counter() - start
    logger.log(level, f"Completed: {operation}", extra={"duration_seconds": round(elapsed, 4)})
