"""
The GICS code model.

A GICS instance is one classification code bound to one definition
version. Everything about it is computed at construction: whether the
code is valid, and the definitions of each level it spans.

The hierarchy is implicit in the code itself. Each level appends a
2-digit segment, so ancestry is string-prefix containment and the
level of a code is its length divided by two.

Invalid codes do not raise. They produce an instance with
is_valid == False whose queries answer None, False or an empty list,
and which acts as the virtual root when listing children.
"""

from typing import Any

from ..models.gics_models import Definition, GICSLevel
from ..observability.logging import get_logger
from .registry import DefinitionRegistry, get_registry
from .validation import DEFAULT_FORMAT, code_depth, is_valid_level, rejection_reason

logger = get_logger(__name__)


class GICS:
    """
    Represents a GICS code.

    Valid GICS codes are strings 2 to 8 characters long, with even
    length, that exist in the chosen definition version. Anything else
    yields an invalid instance (code is None). An empty GICS() is
    invalid but can still be used to query the definitions, e.g. to
    list all sectors.

    Args:
        code: GICS code to parse
        version: Definition version (YYYYMMDD). The latest loaded version
            is used when omitted.
        registry: Registry to resolve the version against. The
            process-wide registry is used when omitted.

    Raises:
        ConfigurationError: If the version is not supported
    """

    __slots__ = ("_code", "_version", "_registry", "_table", "_is_valid", "_levels")

    def __init__(
        self,
        code: str | None = None,
        version: str | int | None = None,
        *,
        registry: DefinitionRegistry | None = None,
    ):
        registry = registry if registry is not None else get_registry()
        table = registry.resolve(version)

        reason = rejection_reason(code, table)
        is_valid = reason is None

        if is_valid:
            levels = tuple(
                table[code[:end]] if len(code) >= end else None
                for end in range(
                    DEFAULT_FORMAT.segment_width,
                    DEFAULT_FORMAT.max_length + 1,
                    DEFAULT_FORMAT.segment_width,
                )
            )
        else:
            logger.debug(
                "Rejected GICS code",
                data={"code": repr(code)[:20], "version": table.version, "reason": reason},
            )
            code = None
            levels = (None,) * DEFAULT_FORMAT.max_depth

        object.__setattr__(self, "_code", code)
        object.__setattr__(self, "_version", table.version)
        object.__setattr__(self, "_registry", registry)
        object.__setattr__(self, "_table", table)
        object.__setattr__(self, "_is_valid", is_valid)
        object.__setattr__(self, "_levels", levels)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} objects are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} objects are immutable")

    # --- Identity ---

    @property
    def code(self) -> str | None:
        """The GICS code, or None when the input was not a valid code."""
        return self._code

    @property
    def version(self) -> str:
        """The definition version this code was resolved against."""
        return self._version

    @property
    def is_valid(self) -> bool:
        return self._is_valid

    @property
    def depth(self) -> int:
        """Structural depth: 1 (sector) to 4 (sub-industry), 0 when invalid."""
        return code_depth(self._code)

    @property
    def level_type(self) -> GICSLevel | None:
        """The GICS level of this code itself, None when invalid."""
        return GICSLevel.from_depth(self.depth)

    # --- Levels ---

    def level(self, gics_level: int) -> Definition | None:
        """
        Gets the definition of the given level for this GICS object.

        Args:
            gics_level: 1 (Sector), 2 (Industry Group), 3 (Industry) or
                4 (Sub-Industry)

        Returns:
            The Definition of that level, or None if this GICS is invalid,
            does not reach that level, or the level is out of range.
            Keep in mind that only level 4 usually has a description.
        """
        if not self._is_valid or not is_valid_level(gics_level):
            return None
        return self._levels[gics_level - 1]

    @property
    def sector(self) -> Definition | None:
        """Definition of the sector of this GICS (level 1)."""
        return self.level(1)

    @property
    def industry_group(self) -> Definition | None:
        """Definition of the industry group of this GICS (level 2)."""
        return self.level(2)

    @property
    def industry(self) -> Definition | None:
        """Definition of the industry of this GICS (level 3)."""
        return self.level(3)

    @property
    def sub_industry(self) -> Definition | None:
        """Definition of the sub-industry of this GICS (level 4)."""
        return self.level(4)

    @property
    def definition(self) -> Definition | None:
        """Definition of the code itself, i.e. its deepest level."""
        return self.level(self.depth)

    @property
    def hierarchy(self) -> tuple[Definition, ...]:
        """Definitions of every level this code spans, broadest first."""
        return tuple(d for d in self._levels if d is not None)

    @property
    def parent(self) -> "GICS | None":
        """The GICS one level up in the same version, None for sectors and invalid codes."""
        if not self._is_valid or self.depth <= 1:
            return None
        return GICS(
            self._code[: -DEFAULT_FORMAT.segment_width], self._version, registry=self._registry
        )

    # --- Children ---

    @property
    def children(self) -> list[Definition]:
        """
        Gets all the child level elements of this GICS level.

        For a sector this is every industry group in it. An invalid (or
        empty) GICS returns all sectors; a sub-industry returns [].
        """
        return self.get_children(1)

    def get_children(self, depth: int = 1) -> list[Definition]:
        """
        Gets the descendants exactly `depth` levels below this GICS.

        For a sector, depth=1 gives its industry groups and depth=2 its
        industries. An invalid (or empty) GICS acts as the root, so
        depth=1 gives every sector.

        Results follow the definition table's order.
        """
        if not is_valid_level(depth):
            return []

        if not self._is_valid:
            return self._table.at_depth(depth)

        target_depth = self.depth + depth
        return [
            definition
            for code, definition in self._table.items()
            if code_depth(code) == target_depth and code.startswith(self._code)
        ]

    def find_child(self, child_name: str) -> Definition | None:
        """
        Gets the definition of the descendant matching the provided name.

        Lookup is breadth first: every child one level down is checked
        before any two levels down, and so on, so the shallowest match
        wins. Names must match exactly.
        """
        depth = 1
        while True:
            children = self.get_children(depth)
            if not children:
                return None

            for child in children:
                if child.name == child_name:
                    return child

            depth += 1

    # --- Relationships ---

    def is_same(self, another_gics: "GICS | None") -> bool:
        """
        Determines if this GICS is the same as the given one.

        Both must either be invalid, or be valid with the exact same
        code. The definition version is not compared.
        """
        if not isinstance(another_gics, GICS):
            return False
        if self._is_valid != another_gics.is_valid:
            return False
        return not self._is_valid or self._code == another_gics.code

    def is_within(self, another_gics: "GICS | None") -> bool:
        """
        Determines if this GICS is a sub-component of the given one.

        For example, 101010 is within 10. Invalid GICS belong to nothing
        and contain nothing, and a GICS is not within itself.
        """
        if not self._is_valid or not isinstance(another_gics, GICS) or not another_gics.is_valid:
            return False
        return self._code != another_gics.code and self._code.startswith(another_gics.code)

    def is_immediate_within(self, another_gics: "GICS | None") -> bool:
        """
        Determines if this GICS is within the given one at the most immediate level.

        For example, 1010 is immediately within 10, but 101010 is not.
        """
        return (
            self.is_within(another_gics)
            and len(self._code) == len(another_gics.code) + DEFAULT_FORMAT.segment_width
        )

    def contains(self, another_gics: "GICS | None") -> bool:
        """Determines if this GICS contains the given one. For example, 10 contains 101010."""
        return isinstance(another_gics, GICS) and another_gics.is_within(self)

    def contains_immediate(self, another_gics: "GICS | None") -> bool:
        """Determines if this GICS contains the given one one level down (10 contains 1010)."""
        return isinstance(another_gics, GICS) and another_gics.is_immediate_within(self)

    # --- Representation ---

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization and logging."""

        def _level_dict(definition: Definition | None) -> dict[str, Any] | None:
            return definition.to_dict() if definition is not None else None

        return {
            "code": self._code,
            "version": self._version,
            "is_valid": self._is_valid,
            "sector": _level_dict(self.sector),
            "industry_group": _level_dict(self.industry_group),
            "industry": _level_dict(self.industry),
            "sub_industry": _level_dict(self.sub_industry),
        }

    def __repr__(self) -> str:
        return f"GICS({self._code!r}, version={self._version!r})"

    def __str__(self) -> str:
        definition = self.definition
        if definition is None:
            return f"Invalid GICS ({self._version})"
        return str(definition)
