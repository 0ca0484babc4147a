"""
Code syntax validation for GICS codes.

Provides the structural checks shared by the code model and the
definition registry. Nothing here raises for a bad code: validity of a
classification code is data, reported as booleans and reasons.
"""

from collections.abc import Container
from dataclasses import dataclass
from typing import Any


# --- Configuration ---


@dataclass(frozen=True)
class CodeFormat:
    """Structural constraints of a GICS code."""

    min_length: int = 2
    max_length: int = 8
    segment_width: int = 2

    @property
    def max_depth(self) -> int:
        return self.max_length // self.segment_width


# Default format
DEFAULT_FORMAT = CodeFormat()


# --- Depth ---


def code_depth(code: str | None, fmt: CodeFormat = DEFAULT_FORMAT) -> int:
    """
    Structural depth of a code: 1 for a sector, 4 for a sub-industry.

    Returns 0 for None or an empty code.
    """
    if not code:
        return 0
    return len(code) // fmt.segment_width


def is_valid_level(level: Any, fmt: CodeFormat = DEFAULT_FORMAT) -> bool:
    """Check that a level argument is an integer between 1 and the max depth."""
    if isinstance(level, bool) or not isinstance(level, int):
        return False
    return 1 <= level <= fmt.max_depth


# --- Code Validators ---


def is_well_formed(code: Any, fmt: CodeFormat = DEFAULT_FORMAT) -> bool:
    """
    Check code syntax without consulting a definition table.

    A well-formed code is a non-empty string with an even length
    between 2 and 8 characters.
    """
    return syntax_error(code, fmt) is None


def syntax_error(code: Any, fmt: CodeFormat = DEFAULT_FORMAT) -> str | None:
    """Describe why a code is syntactically invalid, or None if it is well formed."""
    if code is None:
        return "code is missing"
    if not isinstance(code, str):
        return f"code must be a string, got {type(code).__name__}"
    if not code:
        return "code is empty"
    if not fmt.min_length <= len(code) <= fmt.max_length:
        return f"code must be {fmt.min_length}-{fmt.max_length} characters, got {len(code)}"
    if len(code) % fmt.segment_width:
        return f"code length must be a multiple of {fmt.segment_width}"
    return None


def rejection_reason(
    code: Any, known_codes: Container[str], fmt: CodeFormat = DEFAULT_FORMAT
) -> str | None:
    """
    Describe why a code is not valid against a definition table.

    Args:
        code: The candidate code
        known_codes: The codes defined by the table (any container)
        fmt: Structural constraints

    Returns:
        None if the code is valid, otherwise a short human-readable reason
    """
    reason = syntax_error(code, fmt)
    if reason is not None:
        return reason
    if code not in known_codes:
        return "code is not defined in this version"
    return None
