"""Tests for the Daitch-Mokotoff sound table."""

import pytest
from gedsoundex.data import DM_SOUNDS, MAX_KEY_LENGTH, TRANSFORM_NAMES, is_vowel


class TestSoundTable:
    """Consistency checks on the sound table."""

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            DM_SOUNDS['Q'] = ('0', '5', '5', '5')

    def test_keys_fit_in_seven_bytes(self):
        """Test that no key is longer than the lookup window."""
        for key in DM_SOUNDS:
            assert 1 <= len(key) <= MAX_KEY_LENGTH
            assert len(key.encode('utf-8')) <= 7

    def test_entries_are_whole_triplets(self):
        """Test that every entry is a vowel flag followed by sound triplets."""
        for key, entry in DM_SOUNDS.items():
            assert len(entry) >= 4, key
            assert (len(entry) - 1) % 3 == 0, key

    def test_sounds_are_digits(self):
        for key, entry in DM_SOUNDS.items():
            assert entry[0] in ('0', '1'), key
            assert all(sound == '' or sound.isdigit() for sound in entry[1:]), key

    @pytest.mark.parametrize("key", ['A', 'E', 'I', 'O', 'U', 'Y', 'AU', 'А', 'Α', 'א', 'ע'])
    def test_vowels(self, key):
        assert is_vowel(DM_SOUNDS[key])

    @pytest.mark.parametrize("key", ['B', 'CH', 'SCHTSCH', 'Б', 'Β', 'ב', 'ب'])
    def test_consonants(self, key):
        assert not is_vowel(DM_SOUNDS[key])

    def test_scripts_covered(self):
        """Test that all five scripts have entries."""
        for key in ('Z', 'Ж', 'Ζ', 'ז', 'ز'):
            assert key in DM_SOUNDS


class TestTransformRules:
    """Checks on the name transformation rules."""

    def test_placeholder_removed_then_restored(self):
        """Test that the placeholder is stripped first and expanded last."""
        assert TRANSFORM_NAMES[10] == ('\x01', '')
        assert TRANSFORM_NAMES[-1] == ('\x01', 'יי')

    def test_rules_are_pairs(self):
        assert all(len(rule) == 2 for rule in TRANSFORM_NAMES)
