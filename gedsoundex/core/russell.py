"""
Russell soundex.

The classic American soundex: the first letter of a word followed by three
digits. Multi-word names also get a code for the words run together, so that
"New York" can match "Newyork".
"""

import logging
from typing import List, Optional

from ..config import SoundexConfig
from .codes import join_codes

logger = logging.getLogger(__name__)

# Letters that are not listed code to '0': vowels, H, W and Y. They are not
# written out, but they separate two letters with the same code.
RUSSELL_CODES = {
    'B': '1', 'F': '1', 'P': '1', 'V': '1',
    'C': '2', 'G': '2', 'J': '2', 'K': '2', 'Q': '2', 'S': '2', 'X': '2', 'Z': '2',
    'D': '3', 'T': '3',
    'L': '4',
    'M': '5', 'N': '5',
    'R': '6',
}

CODE_LENGTH = 4

# Code of a word with no letters at all
NO_SOUND = '0000'


def russell_word(word: str) -> str:
    """
    Calculate the soundex code of a single word.

    Only the ASCII letters A-Z are coded; everything else is skipped.

    Args:
        word: Word to encode

    Returns:
        4-character code, "0000" if the word has no letters, "" if it is empty
    """
    if not word:
        return ""

    result = []
    last = None

    for char in word:
        if not char.isascii() or not char.isalpha():
            continue

        char = char.upper()
        code = RUSSELL_CODES.get(char, '0')

        if not result:
            result.append(char)
        elif code != last and code != '0':
            result.append(code)

        last = code

        if len(result) == CODE_LENGTH:
            break

    return ''.join(result).ljust(CODE_LENGTH, '0')


class RussellSoundex:
    """Generates Russell soundex code strings for names."""

    def __init__(self, config: Optional[SoundexConfig] = None):
        """
        Initialize the encoder.

        Args:
            config: Soundex configuration
        """
        self.config = config or SoundexConfig()

    def encode_word(self, word: str) -> List[str]:
        """Codes for one word: a single code, or none for unrecognisable sounds."""
        code = russell_word(word)
        if code and code != NO_SOUND:
            return [code]
        return []

    def encode(self, text: str) -> str:
        """
        Generate the Russell soundex code string for a text.

        Args:
            text: Name or place text, words separated by spaces

        Returns:
            Colon-delimited 4-character codes, or "" if nothing is recognisable
        """
        words = text.split(' ')
        codes = []

        for word in words:
            codes.extend(self.encode_word(word))

        # Combine words, e.g. "New York" as "NewYork"
        if len(words) > 1:
            codes.extend(self.encode_word(text.replace(' ', '')))

        logger.debug(f"Russell soundex of {text!r}: {codes}")

        return join_codes(codes, self.config.russell_max_codes, self.config.delimiter)


_default_encoder = RussellSoundex()


def russell_soundex(text: str) -> str:
    """Generate Russell soundex codes for a text, e.g. "N000:Y620:N620" for "New York"."""
    return _default_encoder.encode(text)
