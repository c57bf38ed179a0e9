"""
Tests for soundex name matching.
"""

import pytest
from gedsoundex.matching import SoundexMatcher, SoundexMatch


CANDIDATES = ['Smith', 'Muskievicz', 'Moskovitz', 'Moskowitz']


class TestSoundexMatcher:
    """Tests for SoundexMatcher class."""

    def test_codes_for(self):
        matcher = SoundexMatcher('dm')
        assert matcher.codes_for('Auerbach') == '097500:097400'

    def test_codes_for_is_cached(self):
        """Test that repeated lookups give the same code string."""
        matcher = SoundexMatcher('dm')
        assert matcher.codes_for('Moskowitz') is matcher.codes_for('Moskowitz')

    def test_matches_daitch_mokotoff(self):
        matcher = SoundexMatcher('dm')
        assert matcher.matches('Moskowitz', 'Moskovitz')
        assert not matcher.matches('Moskowitz', 'Smith')

    def test_matches_russell(self):
        matcher = SoundexMatcher('std')
        assert matcher.matches('Smith', 'Smyth')
        assert not matcher.matches('Smith', 'Jones')

    def test_unknown_algorithm(self):
        with pytest.raises(ValueError):
            SoundexMatcher('nysiis')

    def test_find_matches_ranked_by_similarity(self):
        """Test that matches are ordered by spelling similarity."""
        matcher = SoundexMatcher('dm')

        matches = matcher.find_matches('Moskowitz', CANDIDATES)

        assert [m.name for m in matches] == ['Moskowitz', 'Moskovitz', 'Muskievicz']
        assert matches[0].is_exact
        assert not matches[1].is_exact
        assert all(isinstance(m, SoundexMatch) for m in matches)

    def test_find_matches_shared_codes(self):
        matcher = SoundexMatcher('dm')

        matches = matcher.find_matches('Moskowitz', CANDIDATES)

        assert all(m.shared_codes == ['645740'] for m in matches)

    def test_find_matches_limit(self):
        matcher = SoundexMatcher('dm')

        matches = matcher.find_matches('Moskowitz', CANDIDATES, limit=2)

        assert len(matches) == 2
        assert matches[0].name == 'Moskowitz'

    @pytest.mark.parametrize("limit", [0, -1])
    def test_find_matches_invalid_limit(self, limit):
        """Test that a limit below 1 is rejected rather than ignored."""
        matcher = SoundexMatcher('dm')
        with pytest.raises(ValueError):
            matcher.find_matches('Moskowitz', CANDIDATES, limit=limit)

    def test_find_matches_no_codes(self):
        """Test that a query without sounds matches nothing."""
        matcher = SoundexMatcher('dm')
        assert matcher.find_matches('123', CANDIDATES) == []

    def test_find_matches_none_found(self):
        matcher = SoundexMatcher('std')
        assert matcher.find_matches('Jones', CANDIDATES) == []
