"""Tests for weld number extraction from component records."""

from weld_numbering import weld_numbers_from_components


class TestWeldNumbersFromComponents:
    """Tests for weld_numbers_from_components()."""

    def test_extracts_weld_numbers(self) -> None:
        """Test extracting weld numbers in input order."""
        components = [
            {"id": "c1", "identity_key": {"weld_number": "W-051"}},
            {"id": "c2", "identity_key": {"weld_number": "W-050"}},
        ]

        assert weld_numbers_from_components(components) == ["W-051", "W-050"]

    def test_skips_missing_identity_key(self) -> None:
        """Test that components without an identity key are skipped."""
        components = [
            {"id": "c1"},
            {"id": "c2", "identity_key": None},
            {"id": "c3", "identity_key": {"weld_number": "FW-01"}},
        ]

        assert weld_numbers_from_components(components) == ["FW-01"]

    def test_skips_non_mapping_identity_key(self) -> None:
        """Test that malformed identity keys are skipped."""
        components = [
            {"identity_key": "W-001"},
            {"identity_key": ["W-002"]},
        ]

        assert weld_numbers_from_components(components) == []

    def test_skips_non_string_weld_number(self) -> None:
        """Test that non-string weld numbers are skipped."""
        components = [
            {"identity_key": {"weld_number": 42}},
            {"identity_key": {"weld_number": None}},
            {"identity_key": {"drawing_norm": "P-101", "seq": 1}},
            {"identity_key": {"weld_number": "42"}},
        ]

        assert weld_numbers_from_components(components) == ["42"]

    def test_skips_none_records(self) -> None:
        """Test that empty rows are skipped."""
        assert weld_numbers_from_components([None, {}]) == []

    def test_custom_identity_field(self) -> None:
        """Test reading from a differently named identity column."""
        components = [{"identity": {"weld_number": "W-001"}}]

        assert weld_numbers_from_components(components, identity_field="identity") == ["W-001"]

    def test_keeps_duplicates(self) -> None:
        """Test that duplicate weld numbers are kept."""
        components = [
            {"identity_key": {"weld_number": "W-001"}},
            {"identity_key": {"weld_number": "W-001"}},
        ]

        assert weld_numbers_from_components(components) == ["W-001", "W-001"]
