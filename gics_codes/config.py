"""
Configuration for the GICS code library.

Uses Pydantic for validation and environment variable loading.
Every setting has a clear purpose, sensible default, and validation.

Environment Variables:
    GICS_DEFINITIONS_PATH: Directory holding one <YYYYMMDD>.json table per version
    GICS_DEFAULT_VERSION: Version used when none is requested (default: latest)

    Logging:
    GICS_LOG_LEVEL: Log level - DEBUG, INFO, WARNING, ERROR (default: INFO)
    GICS_LOG_FORMAT: Log format - json or text (default: json)
    GICS_LOG_FILE: Log file path (logs to stderr if not set)
    GICS_SERVICE_NAME: Service name for log records (default: gics-codes)
    GICS_ENVIRONMENT: Environment name (default: development)
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Tables shipped with the package
BUNDLED_DEFINITIONS_PATH = Path(__file__).parent / "definitions"


class DefinitionsConfig(BaseSettings):
    """
    Configuration for the definition tables.

    Environment variables use the GICS_ prefix (e.g., GICS_DEFINITIONS_PATH).
    """

    model_config = SettingsConfigDict(
        env_prefix="GICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    definitions_path: Path = Field(
        default=BUNDLED_DEFINITIONS_PATH,
        description="Directory of definition tables, one <YYYYMMDD>.json file per version",
    )
    default_version: str | None = Field(
        default=None,
        pattern=r"^\d{8}$",
        description="Version used when none is requested (latest loaded version if unset)",
    )

    @field_validator("definitions_path", mode="before")
    @classmethod
    def resolve_definitions_path(cls, v: Any) -> Any:
        """Convert string paths to Path objects; empty means bundled tables."""
        if v is None or v == "":
            return BUNDLED_DEFINITIONS_PATH
        if isinstance(v, str):
            return Path(v).expanduser()
        return v

    @field_validator("default_version", mode="before")
    @classmethod
    def normalize_default_version(cls, v: Any) -> Any:
        """Accept integer version identifiers such as 20230318."""
        if v is None or v == "":
            return None
        return str(v)

    def to_dict(self) -> dict:
        """Convert config to dictionary for logging/debugging."""
        return {
            "definitions_path": str(self.definitions_path),
            "default_version": self.default_version,
        }


class LoggingConfig(BaseSettings):
    """
    Configuration for structured logging.

    Supports JSON and text formats with sensitive data handling.
    Environment variables use the GICS_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="GICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Log level and format
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="json",
        description="Log format: 'json' for production, 'text' for development",
        pattern=r"^(json|text)$",
    )

    # Output configuration
    log_file: str | None = Field(
        default=None, description="Log file path (logs to stderr if not set)"
    )
    log_max_size_mb: int = Field(
        default=100, ge=1, le=1000, description="Maximum log file size in MB"
    )
    log_retention_count: int = Field(
        default=5, ge=1, le=30, description="Number of rotated log files to keep"
    )

    # Sensitive data handling
    max_message_length: int = Field(
        default=1000, ge=100, le=10000, description="Maximum length for log messages"
    )
    max_data_length: int = Field(
        default=500, ge=50, le=5000, description="Maximum length for data field values"
    )

    # Service metadata for log records
    service_name: str = Field(default="gics-codes", description="Service name for log records")
    environment: str = Field(
        default="development", description="Environment name (development, staging, production)"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v

    def to_dict(self) -> dict:
        """Convert config to dictionary for logging/debugging."""
        return {
            "log_level": self.log_level,
            "log_format": self.log_format,
            "log_file": self.log_file,
            "service_name": self.service_name,
            "environment": self.environment,
        }


class AppConfig(BaseModel):
    """
    Combined application configuration.

    Provides a single entry point for all configuration with validation.
    """

    definitions: DefinitionsConfig = Field(default_factory=DefinitionsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def validate_startup(self) -> list[str]:
        """
        Validate configuration for startup.

        Returns list of warnings (empty if all OK).
        Raises ConfigurationError for fatal issues.
        """
        from .core.errors import ConfigurationError

        warnings = []

        definitions_path = self.definitions.definitions_path
        if not definitions_path.is_dir():
            raise ConfigurationError(
                f"Definitions directory not found: {definitions_path}",
                config_key="GICS_DEFINITIONS_PATH",
            )

        if definitions_path.resolve() != BUNDLED_DEFINITIONS_PATH.resolve():
            warnings.append(f"Using external definition tables from {definitions_path}")

        if self.logging.log_level == "DEBUG" and self.logging.environment == "production":
            warnings.append("Debug logging is enabled - not recommended for production")

        return warnings

    def to_dict(self) -> dict:
        """Convert full config to dictionary."""
        return {
            "definitions": self.definitions.to_dict(),
            "logging": self.logging.to_dict(),
        }


# Singleton instance management
_config_instance: AppConfig | None = None


def get_config() -> AppConfig:
    """
    Get the application configuration singleton.

    Creates and validates config on first call.
    Subsequent calls return the cached instance.

    Returns:
        AppConfig: The validated application configuration

    Raises:
        ConfigurationError: If configuration is invalid
    """
    global _config_instance

    if _config_instance is None:
        config = AppConfig()
        warnings = config.validate_startup()
        for warning in warnings:
            logger.warning(f"Configuration warning: {warning}")
        _config_instance = config

    return _config_instance


def reset_config() -> None:
    """
    Reset the configuration singleton.

    Useful for testing or reloading configuration.
    """
    global _config_instance
    _config_instance = None


def get_definitions_config() -> DefinitionsConfig:
    """Get definitions configuration (convenience function)."""
    return get_config().definitions


def get_logging_config() -> LoggingConfig:
    """Get logging configuration (convenience function)."""
    return get_config().logging
