"""Unit tests for quantity detection."""
import pytest
from homekitchen.services.ordering.quantity import extract_quantity, strip_quantity


class TestExtractQuantity:
    """Test quantity patterns and their priority."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("2x siomai", 2),
            ("2 x siomai", 2),
            ("siomai x3", 3),
            ("Siomai X4", 4),
            ("3- turon", 3),
            ("turon - 4", 4),
            ("5 turon", 5),
            ("turon 6", 6),
            ("12x ribs", 12),
        ],
    )
    def test_numeric_patterns(self, text, expected):
        """Test each numeric form is recognized."""
        assert extract_quantity(text) == expected

    def test_first_pattern_wins(self):
        """Test '<N>x' beats a trailing number."""
        assert extract_quantity("2x ribs 5") == 2

    def test_leading_number_beats_trailing(self):
        """Test a number at line start beats one at line end."""
        assert extract_quantity("3 ribs 5") == 3

    def test_written_numbers(self):
        """Test spelled out numbers in both languages."""
        assert extract_quantity("three turon") == 3
        assert extract_quantity("dalawa siomai") == 2
        assert extract_quantity("ribs, TEN please") == 10

    def test_written_number_whole_word(self):
        """Test numbers hidden inside words are ignored."""
        assert extract_quantity("someone ordered ribs") == 1

    def test_one_order_of(self):
        """Test 'one order of' is a single item."""
        assert extract_quantity("one order of ribs") == 1

    def test_defaults_to_one(self):
        """Test lines without a quantity order one."""
        assert extract_quantity("ribs") == 1
        assert extract_quantity("") == 1

    def test_zero_counts_as_one(self):
        """Test a zero quantity still orders one."""
        assert extract_quantity("0x ribs") == 1


class TestStripQuantity:
    """Test removing quantity markers from a line."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("2x honey ribs", "honey ribs"),
            ("siomai x3", "siomai"),
            ("3- turon", "turon"),
            ("turon - 4", "turon"),
            ("5 turon", "turon"),
            ("turon 6", "turon"),
            ("ribs", "ribs"),
        ],
    )
    def test_numeric_markers_removed(self, text, expected):
        """Test the numeric marker is removed and the item kept."""
        assert strip_quantity(text) == expected

    def test_written_quantity_removed(self):
        """Test the written number that gave the quantity is removed."""
        assert strip_quantity("three turon") == "turon"
        assert strip_quantity("one order of ribs") == "order of ribs"

    def test_only_quantity_left_empty(self):
        """Test a bare quantity strips down to nothing."""
        assert strip_quantity("2x") == ""
