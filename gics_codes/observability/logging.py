"""
Structured logging for the GICS code library.

Records carry an optional ``data`` dict next to the message. The library
only emits records under the ``gics_codes`` logger; applications that
want output call setup_logging(), which reads LoggingConfig.

Events:
    INFO   one per loaded definition table (version, codes, source)
    DEBUG  one per rejected code (code preview, version, reason)
    INFO   completion and latency of timed operations
"""

import json
import logging
import sys
import time
import traceback
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, TypeVar

from ..config import LoggingConfig, get_logging_config

ROOT_LOGGER_NAME = "gics_codes"

MAX_SEQUENCE_ITEMS = 10


# --- Truncation ---


def truncate(text: str, max_length: int) -> str:
    """Cut text to max_length characters, marking the cut with '...'."""
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text


def truncate_data(data: Mapping[str, Any], max_length: int) -> dict[str, Any]:
    """
    Bound the size of structured log data.

    Strings are truncated, nested mappings are walked, and sequences keep
    their first ten items.
    """
    result: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, str):
            result[key] = truncate(value, max_length)
        elif isinstance(value, Mapping):
            result[key] = truncate_data(value, max_length)
        elif isinstance(value, list | tuple):
            items = [
                truncate(item, max_length) if isinstance(item, str) else item
                for item in value[:MAX_SEQUENCE_ITEMS]
            ]
            if len(value) > MAX_SEQUENCE_ITEMS:
                items.append(f"... and {len(value) - MAX_SEQUENCE_ITEMS} more")
            result[key] = items
        else:
            result[key] = value
    return result


# --- Formatters ---


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Fields: level, logger, message, timestamp, service (when given),
    data, error (type, message, details of library errors, last frames)
    and source location for warnings and above.
    """

    def __init__(
        self,
        service: Mapping[str, str] | None = None,
        max_message_length: int = 1000,
        max_data_length: int = 500,
        include_timestamp: bool = True,
    ):
        super().__init__()
        self.service = dict(service) if service else None
        self.max_message_length = max_message_length
        self.max_data_length = max_data_length
        self.include_timestamp = include_timestamp

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": truncate(record.getMessage(), self.max_message_length),
        }

        if self.include_timestamp:
            entry["timestamp"] = datetime.fromtimestamp(record.created, UTC).isoformat()

        if self.service:
            entry["service"] = self.service

        data = getattr(record, "data", None)
        if data:
            entry["data"] = truncate_data(data, self.max_data_length)

        if record.exc_info:
            entry["error"] = self._format_exception(record.exc_info)

        if record.levelno >= logging.WARNING:
            entry["source"] = {
                "file": _package_relative(record.pathname),
                "line": record.lineno,
                "function": record.funcName,
            }

        return json.dumps(entry, default=str, ensure_ascii=False)

    def _format_exception(self, exc_info) -> dict[str, Any]:
        exc_type, exc_value, exc_tb = exc_info

        error: dict[str, Any] = {
            "type": exc_type.__name__ if exc_type else "Unknown",
            "message": truncate(str(exc_value), self.max_data_length) if exc_value else "",
        }

        # GICSException subclasses carry structured details
        details = getattr(exc_value, "details", None)
        if isinstance(details, Mapping) and details:
            error["details"] = truncate_data(details, self.max_data_length)

        if exc_tb:
            error["stack"] = [
                {
                    "file": _package_relative(frame.filename),
                    "line": frame.lineno,
                    "function": frame.name,
                }
                for frame in traceback.extract_tb(exc_tb)[-5:]
            ]

        return error


class TextFormatter(logging.Formatter):
    """Single-line human-readable records for local development."""

    def __init__(self, max_data_items: int = 5):
        super().__init__()
        self.max_data_items = max_data_items

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, UTC).strftime("%Y-%m-%d %H:%M:%S")
        line = f"{timestamp} [{record.levelname:8}] {record.name}: {record.getMessage()}"

        data = getattr(record, "data", None)
        if data:
            items = list(data.items())[: self.max_data_items]
            line = f"{line} | " + " ".join(f"{k}={str(v)[:50]}" for k, v in items)

        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"

        return line


def _package_relative(pathname: str) -> str:
    index = pathname.find(ROOT_LOGGER_NAME)
    return pathname[index:] if index >= 0 else pathname


# --- Logger Wrapper ---


class StructuredLogger:
    """A logger wrapper that attaches a ``data`` dict to each record."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _log(self, level: int, message: str, data: dict[str, Any] | None = None, **kwargs):
        extra = {"data": data} if data else {}
        self.logger.log(level, message, extra=extra, stacklevel=3, **kwargs)

    def is_enabled_for(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)

    def debug(self, message: str, data: dict[str, Any] | None = None, **kwargs):
        self._log(logging.DEBUG, message, data, **kwargs)

    def info(self, message: str, data: dict[str, Any] | None = None, **kwargs):
        self._log(logging.INFO, message, data, **kwargs)

    def warning(self, message: str, data: dict[str, Any] | None = None, **kwargs):
        self._log(logging.WARNING, message, data, **kwargs)

    def error(self, message: str, data: dict[str, Any] | None = None, **kwargs):
        self._log(logging.ERROR, message, data, **kwargs)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger (name is typically __name__)."""
    return StructuredLogger(name)


# --- Setup ---


def setup_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """
    Configure output for the ``gics_codes`` logger.

    Installs a stderr handler in the configured format and, when
    log_file is set, a rotating JSON file handler. Replaces handlers
    installed by earlier calls. The root logger is left untouched.

    Args:
        config: Logging settings; read from GICS_* environment
            variables when omitted

    Returns:
        The configured package logger
    """
    from .. import __version__

    config = config or get_logging_config()

    json_formatter = JSONFormatter(
        service={
            "name": config.service_name,
            "version": __version__,
            "environment": config.environment,
        },
        max_message_length=config.max_message_length,
        max_data_length=config.max_data_length,
    )

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(config.log_level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(json_formatter if config.log_format == "json" else TextFormatter())
    package_logger.addHandler(console_handler)

    if config.log_file:
        file_path = Path(config.log_file)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=config.log_max_size_mb * 1024 * 1024,
            backupCount=config.log_retention_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(json_formatter)
        package_logger.addHandler(file_handler)

    return package_logger


# --- Decorators ---

F = TypeVar("F", bound=Callable[..., Any])


def log_operation(operation_name: str):
    """
    Log the duration of a synchronous operation.

    Success is logged at INFO with latency_ms; failures at ERROR before
    the exception propagates.
    """

    def decorator(func: F) -> F:
        logger = get_logger(func.__module__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            logger.debug(f"Starting: {operation_name}")

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                latency_ms = int((time.perf_counter() - start_time) * 1000)
                logger.error(
                    f"Failed: {operation_name}",
                    data={"latency_ms": latency_ms, "error": str(e)[:200]},
                )
                raise

            latency_ms = int((time.perf_counter() - start_time) * 1000)
            logger.info(f"Completed: {operation_name}", data={"latency_ms": latency_ms})
            return result

        return wrapper  # type: ignore

    return decorator
