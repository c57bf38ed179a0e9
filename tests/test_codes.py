"""Tests for code strings and the algorithm registry."""

import pytest
from gedsoundex import Algorithm, algorithms, soundex, soundex_codes_match
from gedsoundex.core.codes import join_codes, shared_codes, split_codes, unique_codes


class TestSoundexCodesMatch:
    """Tests for comparing code strings."""

    def test_shared_code_matches(self):
        assert soundex_codes_match("097500:097400", "097400")

    def test_no_shared_code(self):
        assert not soundex_codes_match("097500:097400", "645740")

    def test_identical_code_strings_match(self):
        assert soundex_codes_match("645740", "645740")

    @pytest.mark.parametrize("other", ["", "645740", "N000:Y620"])
    def test_empty_never_matches(self, other):
        """Test that an empty code string matches nothing, not even itself."""
        assert not soundex_codes_match("", other)
        assert not soundex_codes_match(other, "")

    def test_custom_delimiter(self):
        assert soundex_codes_match("A100|B200", "B200", delimiter='|')


class TestCodeHelpers:
    """Tests for building and splitting code strings."""

    def test_unique_codes_keeps_first_occurrence(self):
        assert unique_codes(["B", "A", "B", "C", "A"], 10) == ["B", "A", "C"]

    def test_unique_codes_limit(self):
        assert unique_codes(["A", "B", "A", "C"], 2) == ["A", "B"]

    def test_join_codes(self):
        assert join_codes(["645740", "645740", "097500"], 36) == "645740:097500"

    def test_join_no_codes(self):
        assert join_codes([], 36) == ""

    def test_split_codes(self):
        assert split_codes("097500:097400") == ["097500", "097400"]
        assert split_codes("") == []

    def test_shared_codes(self):
        assert shared_codes("097500:097400:645740", "645740:097400") == ["097400", "645740"]


class TestAlgorithms:
    """Tests for choosing an algorithm by identifier."""

    def test_supported_algorithms(self):
        assert algorithms() == {'std': 'Russell', 'dm': 'Daitch-Mokotoff'}

    def test_russell_by_identifier(self):
        assert soundex("New York", "std") == "N000:Y620:N620"

    def test_daitch_mokotoff_by_identifier(self):
        assert soundex("Auerbach", "dm") == "097500:097400"

    def test_default_is_daitch_mokotoff(self):
        assert soundex("Moskowitz") == "645740"

    def test_enum_accepted(self):
        assert soundex("Robert", Algorithm.RUSSELL) == "R163"

    def test_unknown_algorithm(self):
        with pytest.raises(ValueError, match="Unknown soundex algorithm"):
            soundex("Robert", "metaphone")
