"""
Data models for the GICS code library.
"""

from .gics_models import Definition, GICSLevel

__all__ = [
    "Definition",
    "GICSLevel",
]
