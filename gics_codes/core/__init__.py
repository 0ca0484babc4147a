"""
Core modules for the GICS code library.
"""

from .errors import (
    ConfigurationError,
    DefinitionTableError,
    ErrorCategory,
    GICSException,
    UnsupportedVersionError,
)
from .gics import GICS
from .registry import DefinitionRegistry, DefinitionTable, get_registry, reset_registry
from .validation import (
    DEFAULT_FORMAT,
    CodeFormat,
    code_depth,
    is_valid_level,
    is_well_formed,
    rejection_reason,
    syntax_error,
)

__all__ = [
    # Code model
    "GICS",
    # Registry
    "DefinitionRegistry",
    "DefinitionTable",
    "get_registry",
    "reset_registry",
    # Errors
    "ErrorCategory",
    "GICSException",
    "ConfigurationError",
    "UnsupportedVersionError",
    "DefinitionTableError",
    # Validation
    "CodeFormat",
    "DEFAULT_FORMAT",
    "code_depth",
    "is_valid_level",
    "is_well_formed",
    "rejection_reason",
    "syntax_error",
]
