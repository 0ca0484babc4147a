"""
Observability module for the GICS code library.
"""

from .logging import (
    JSONFormatter,
    StructuredLogger,
    TextFormatter,
    get_logger,
    log_operation,
    setup_logging,
    truncate,
    truncate_data,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_operation",
    "truncate",
    "truncate_data",
    "JSONFormatter",
    "TextFormatter",
    "StructuredLogger",
]
