"""Unit tests for edit-distance similarity."""
import pytest
from homekitchen.services.ordering.similarity import edit_distance, similarity


class TestEditDistance:
    """Test Levenshtein distance."""

    def test_identical_strings(self):
        """Test identical strings have distance 0."""
        assert edit_distance("siomai", "siomai") == 0

    def test_classic_example(self):
        """Test kitten -> sitting needs three edits."""
        assert edit_distance("kitten", "sitting") == 3

    def test_single_substitution(self):
        """Test one changed letter is one edit."""
        assert edit_distance("ribs", "rips") == 1

    def test_case_insensitive(self):
        """Test case differences are not edits."""
        assert edit_distance("RIBS", "ribs") == 0

    def test_against_empty(self):
        """Test distance to empty string is the length."""
        assert edit_distance("", "turon") == 5
        assert edit_distance("turon", "") == 5


class TestSimilarity:
    """Test 0-100 similarity score."""

    def test_same_string_scores_100(self):
        """Test a string is fully similar to itself."""
        for text in ["a", "ribs", "Honey Pork Ribs"]:
            assert similarity(text, text) == 100

    def test_both_empty_scores_100(self):
        """Test two empty strings count as identical."""
        assert similarity("", "") == 100

    def test_one_empty_scores_0(self):
        """Test empty against non-empty scores 0."""
        assert similarity("", "ribs") == 0

    def test_one_letter_off(self):
        """Test ribs vs rips is 3 of 4 letters right."""
        assert similarity("ribs", "rips") == 75

    def test_completely_different(self):
        """Test strings sharing nothing score 0."""
        assert similarity("abc", "xyz") == 0

    def test_rounds_to_nearest(self):
        """Test 4/7 rounds to 57."""
        assert similarity("kitten", "sitting") == 57

    def test_rounds_half_up(self):
        """Test 62.5 rounds up to 63."""
        assert similarity("abcdefgh", "abcdexyz") == 63

    @pytest.mark.parametrize(
        "first,second",
        [("ribs", "rips"), ("siomai", "Siomai (10pcs)"), ("", "turon"), ("honey ribs", "honey pork ribs")],
    )
    def test_symmetric(self, first, second):
        """Test argument order does not matter."""
        assert similarity(first, second) == similarity(second, first)

    @pytest.mark.parametrize(
        "first,second",
        [("İİ", ""), ("", "İİ"), ("İ", "i"), ("İstanbul", "istanbul")],
    )
    def test_score_in_range_when_lowercase_changes_length(self, first, second):
        """Test characters that grow when lowercased keep the score within 0-100."""
        assert 0 <= similarity(first, second) <= 100

    def test_lowercase_expansion_against_empty(self):
        """Test a lowercase expansion against empty scores 0, not negative."""
        assert similarity("İİ", "") == 0
