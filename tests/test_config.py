"""Tests for soundex configuration."""

import pytest
from gedsoundex import SoundexConfig


def test_defaults():
    """Test that defaults fit a 255-character storage column."""
    config = SoundexConfig()

    assert config.delimiter == ':'
    assert config.russell_max_codes == 51
    assert config.dm_max_codes == 36
    assert 51 * 4 + 50 <= 255
    assert 36 * 6 + 35 <= 255


@pytest.mark.parametrize("kwargs", [
    {'delimiter': ''},
    {'russell_max_codes': 0},
    {'dm_max_codes': -1},
    {'max_word_length': 0},
    {'max_abjad_word_length': 0},
])
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        SoundexConfig(**kwargs)


def test_no_word_length_limit():
    assert SoundexConfig(max_word_length=None).max_word_length is None
