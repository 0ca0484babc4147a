"""
GICS Codes

Lookup, validation, and hierarchy navigation for Global Industry
Classification Standard codes (sector, industry group, industry,
sub-industry) against versioned definition tables.

Usage:
    from gics_codes import GICS

    gics = GICS("10101010")
    gics.sector.name              # "Energy"
    gics.is_within(GICS("10"))    # True
"""

__version__ = "0.1.0"

from .config import (
    AppConfig,
    DefinitionsConfig,
    LoggingConfig,
    get_config,
    get_definitions_config,
    get_logging_config,
    reset_config,
)
from .core.errors import (
    ConfigurationError,
    DefinitionTableError,
    GICSException,
    UnsupportedVersionError,
)
from .core.gics import GICS
from .core.registry import DefinitionRegistry, DefinitionTable, get_registry, reset_registry
from .models.gics_models import Definition, GICSLevel

__all__ = [
    # Version
    "__version__",
    # Config
    "AppConfig",
    "DefinitionsConfig",
    "LoggingConfig",
    "get_config",
    "get_definitions_config",
    "get_logging_config",
    "reset_config",
    # Core
    "GICS",
    "DefinitionRegistry",
    "DefinitionTable",
    "get_registry",
    "reset_registry",
    # Errors
    "GICSException",
    "ConfigurationError",
    "UnsupportedVersionError",
    "DefinitionTableError",
    # Models
    "Definition",
    "GICSLevel",
]
