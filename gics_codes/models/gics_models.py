"""
Domain models for GICS codes.

Clear, purposeful data structures that represent the GICS classification system.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class GICSLevel(str, Enum):
    """
    The 4 hierarchical levels in the GICS classification system.

    Every level adds a 2-digit segment to its parent's code, so the
    level is fully determined by code length.
    """

    SECTOR = "sector"  # 2-digit (e.g., "10" - Energy)
    INDUSTRY_GROUP = "industry_group"  # 4-digit (e.g., "1010" - Energy)
    INDUSTRY = "industry"  # 6-digit (e.g., "101010" - Energy Equipment & Services)
    SUB_INDUSTRY = "sub_industry"  # 8-digit (e.g., "10101010" - Oil & Gas Drilling)

    @property
    def depth(self) -> int:
        """Structural depth of this level (1 = sector, 4 = sub-industry)."""
        return _LEVEL_ORDER.index(self) + 1

    @property
    def code_length(self) -> int:
        """Number of characters in a code at this level."""
        return self.depth * 2

    @classmethod
    def from_depth(cls, depth: int) -> "GICSLevel | None":
        """Determine level from structural depth, None outside 1-4."""
        if isinstance(depth, bool) or not isinstance(depth, int):
            return None
        if 1 <= depth <= len(_LEVEL_ORDER):
            return _LEVEL_ORDER[depth - 1]
        return None

    @classmethod
    def from_code_length(cls, code: str) -> "GICSLevel | None":
        """Determine level from code length."""
        length = len(code.strip())
        if length % 2:
            return None
        return cls.from_depth(length // 2)


_LEVEL_ORDER = (
    GICSLevel.SECTOR,
    GICSLevel.INDUSTRY_GROUP,
    GICSLevel.INDUSTRY,
    GICSLevel.SUB_INDUSTRY,
)


@dataclass(frozen=True)
class Definition:
    """
    The definition of a single GICS code within one table version.

    Entries are values: the code is stamped on at lookup time and an
    entry is never modified after it has been handed out.
    """

    code: str
    name: str
    description: str | None = None

    @property
    def level(self) -> GICSLevel | None:
        """The GICS level this definition sits at."""
        return GICSLevel.from_code_length(self.code)

    @property
    def parent_code(self) -> str | None:
        """Get the immediate parent code, None for sectors."""
        if len(self.code) <= 2:
            return None
        return self.code[:-2]

    def get_hierarchy_path(self) -> list[str]:
        """
        Returns the complete hierarchical path of codes for this definition.

        Example: ["10", "1010", "101010", "10101010"]
        """
        return [self.code[:end] for end in range(2, len(self.code) + 1, 2)]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, omitting an absent description."""
        result = asdict(self)
        if result["description"] is None:
            del result["description"]
        return result

    def __str__(self) -> str:
        return f"{self.code} {self.name}"
