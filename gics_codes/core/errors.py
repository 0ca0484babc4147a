"""
Custom exceptions for the GICS code library.

Provides a small exception hierarchy with:
- Categorized errors for handling decisions
- Structured details for debugging and error reporting

An invalid classification code is not an error: it is modelled as a
``GICS`` instance with ``is_valid == False``. Exceptions are reserved for
setup problems that need intervention, such as an unknown definition
version or an unreadable definition table.
"""

from collections.abc import Iterable
from enum import Enum
from typing import Any


# --- Error Categories ---


class ErrorCategory(str, Enum):
    """Categories of errors for handling decisions."""

    CONFIGURATION = "configuration"  # Config or data setup error, fail fast
    PERMANENT = "permanent"  # Anything else, don't retry


# --- Base Exception ---


class GICSException(Exception):
    """
    Base exception for all GICS library errors.

    Attributes:
        message: Human-readable error message
        category: Error category for handling decisions
        details: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.PERMANENT,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for structured error reporting."""
        result = {
            "error": self.message,
            "category": self.category.value,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {self.cause})"
        return self.message


# --- Specific Exceptions ---


class ConfigurationError(GICSException):
    """Configuration or setup error - requires intervention."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        details = details or {}
        if config_key:
            details["config_key"] = config_key

        super().__init__(
            message=message, category=ErrorCategory.CONFIGURATION, details=details, cause=cause
        )


class UnsupportedVersionError(ConfigurationError):
    """The requested definition version is not among the loaded tables."""

    def __init__(self, version: Any, available_versions: Iterable[str]):
        available = list(available_versions)
        super().__init__(
            message=(
                f"Unsupported GICS version: {version}. "
                f"Available versions are {', '.join(available)}"
            ),
            config_key="GICS_DEFAULT_VERSION",
            details={"version": str(version), "available_versions": available},
        )
        self.version = version
        self.available_versions = available


class DefinitionTableError(ConfigurationError):
    """A definition table could not be loaded or is structurally unusable."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        version: str | None = None,
        cause: Exception | None = None,
    ):
        details = {}
        if source:
            details["source"] = source
        if version:
            details["version"] = version

        super().__init__(
            message=message, config_key="GICS_DEFINITIONS_PATH", details=details, cause=cause
        )
