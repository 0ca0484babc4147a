"""
Unit tests for GICS domain models.
"""

import pytest

from gics_codes.models.gics_models import Definition, GICSLevel


class TestGICSLevel:
    """Tests for the level enumeration."""

    def test_values(self):
        """Levels serialize as readable strings."""
        assert GICSLevel.SECTOR == "sector"
        assert GICSLevel.INDUSTRY_GROUP == "industry_group"
        assert GICSLevel.INDUSTRY == "industry"
        assert GICSLevel.SUB_INDUSTRY == "sub_industry"

    def test_depth_and_code_length(self):
        """Each level is one segment deeper than the last."""
        assert [level.depth for level in GICSLevel] == [1, 2, 3, 4]
        assert [level.code_length for level in GICSLevel] == [2, 4, 6, 8]

    @pytest.mark.parametrize(
        "depth,expected",
        [(1, GICSLevel.SECTOR), (4, GICSLevel.SUB_INDUSTRY), (0, None), (5, None), (True, None)],
    )
    def test_from_depth(self, depth, expected):
        """from_depth maps 1-4 to levels and everything else to None."""
        assert GICSLevel.from_depth(depth) == expected

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("10", GICSLevel.SECTOR),
            ("1010", GICSLevel.INDUSTRY_GROUP),
            ("101010", GICSLevel.INDUSTRY),
            ("10101010", GICSLevel.SUB_INDUSTRY),
            ("101", None),
            ("1010101010", None),
        ],
    )
    def test_from_code_length(self, code, expected):
        """from_code_length uses the code's length only."""
        assert GICSLevel.from_code_length(code) == expected


class TestDefinition:
    """Tests for a single code's definition."""

    def test_level_and_parent(self):
        """Level and parent code follow the code."""
        definition = Definition(code="101020", name="Oil, Gas & Consumable Fuels")
        assert definition.level == GICSLevel.INDUSTRY
        assert definition.parent_code == "1010"

    def test_sector_has_no_parent(self):
        """Sectors have no parent code."""
        assert Definition(code="10", name="Energy").parent_code is None

    def test_hierarchy_path(self):
        """The path lists every ancestor code, broadest first."""
        definition = Definition(code="10101010", name="Oil & Gas Drilling")
        assert definition.get_hierarchy_path() == ["10", "1010", "101010", "10101010"]

    def test_to_dict(self):
        """to_dict omits a missing description."""
        assert Definition(code="10", name="Energy").to_dict() == {"code": "10", "name": "Energy"}
        assert Definition(code="10", name="Energy", description="Oil").to_dict() == {
            "code": "10",
            "name": "Energy",
            "description": "Oil",
        }

    def test_str(self):
        """str shows code and name."""
        assert str(Definition(code="45", name="Information Technology")) == (
            "45 Information Technology"
        )

    def test_equality_and_hash(self):
        """Definitions are values."""
        a = Definition(code="10", name="Energy")
        b = Definition(code="10", name="Energy")
        assert a == b
        assert len({a, b}) == 1

    def test_frozen(self):
        """Definitions cannot be modified."""
        definition = Definition(code="10", name="Energy")
        with pytest.raises(AttributeError):
            definition.description = "changed"
