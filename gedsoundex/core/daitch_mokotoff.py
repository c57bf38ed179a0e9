"""
Daitch-Mokotoff soundex.

Designed for Slavic, Germanic and Yiddish surnames, D-M soundex codes a word as
six digits. Letter groups that can be pronounced in more than one way fork the
code, so one word can produce several codes.

The encoder walks the word left to right, matching the longest chunk found in
the sound table. Which sound a chunk takes depends on its position: at the
start of the word, before a vowel, or elsewhere. Every live branch of the code
is carried along; a branch is complete once it holds six sounds.

Coding table and algorithm by Gerry Kroll, with analysis by Meliza Amity.
"""

import logging
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from ..config import SoundexConfig
from ..data.dm_sounds import DM_SOUNDS, MAX_KEY_LENGTH, TRANSFORM_NAMES, is_vowel
from ..utils.script import is_abjad
from .codes import join_codes, unique_codes

logger = logging.getLogger(__name__)

CODE_LENGTH = 6

# Columns of a sound table entry
START_OF_WORD = 1
BEFORE_VOWEL = 2
OTHER = 3

# Columns repeat in triplets, one triplet per alternative pronunciation
TRIPLET = 3


class Branch(NamedTuple):
    """
    One candidate code under construction, as an immutable value.

    Only what decides the branch's future is kept: the first six digits, the
    number of sounds, and the last sound. Digits past the sixth are cut from
    every code anyway, so branches that agree on all four fields produce the
    same codes at the same point and can be merged. The root has no sound.
    """
    digits: str
    sound: Optional[str]
    depth: int
    closed: bool = False

    def extend(self, sound: str) -> 'Branch':
        """Add a sound to the code."""
        return Branch((self.digits + sound)[:CODE_LENGTH], sound, self.depth + 1)

    def close(self) -> 'Branch':
        """Mark the last sound as ended, so an identical sound after it is not a repeat."""
        return self._replace(closed=True)

    def repeats(self, sound: str) -> bool:
        """True if the sound continues the branch's last sound."""
        return not self.closed and self.sound == sound

    def code(self) -> str:
        """The sounds of the branch, zero-filled to six digits. Empty if it has none."""
        if not self.digits:
            return ''
        return self.digits.ljust(CODE_LENGTH, '0')


ROOT = Branch('', None, 0)


def transform_name(word: str) -> str:
    """Upper-case a word and apply the transformation rules, in order."""
    name = word.upper()
    for old, new in TRANSFORM_NAMES:
        name = name.replace(old, new)
    return name


def find_chunk(name: str, position: int) -> str:
    """
    Find the longest sound table key at a position.

    Args:
        name: Transformed word
        position: Index into the word

    Returns:
        The matching key, or "" if no key starts here
    """
    chunk = name[position:position + MAX_KEY_LENGTH]
    while chunk:
        if chunk in DM_SOUNDS:
            return chunk
        chunk = chunk[:-1]
    return chunk


def _finish(branches: Iterable[Branch], result: List[str]) -> None:
    for branch in branches:
        code = branch.code()
        # Only return codes from recognisable sounds
        if code:
            result.append(code)


class DaitchMokotoffEncoder:
    """Generates Daitch-Mokotoff soundex code strings for names."""

    def __init__(self, config: Optional[SoundexConfig] = None):
        """
        Initialize the encoder.

        Args:
            config: Soundex configuration
        """
        self.config = config or SoundexConfig()

    def encode(self, text: str) -> str:
        """
        Generate the D-M soundex code string for a text.

        Args:
            text: Name or place text, words separated by spaces

        Returns:
            Colon-delimited 6-digit codes, or "" if nothing is recognisable
        """
        words = text.split(' ')
        codes = []

        for word in words:
            codes.extend(self.encode_word(word))

        # Combine words, e.g. "New York" as "NewYork"
        if len(words) > 1:
            codes.extend(self.encode_word(text.replace(' ', '')))

        return join_codes(codes, self.config.dm_max_codes, self.config.delimiter)

    def encode_word(self, word: str) -> List[str]:
        """
        Calculate the D-M soundex codes of a single word.

        Args:
            word: Word to encode, in any supported script

        Returns:
            Distinct 6-digit codes, in the order they were generated
        """
        limit = self.config.max_word_length
        if limit is not None and len(word) > limit:
            logger.warning(f"Truncating {len(word)}-character word to {limit} characters")
            word = word[:limit]

        name = transform_name(word)

        # Hebrew and Arabic are written without vowels, so a repeated sound
        # may be a genuine double consonant.
        no_vowels = is_abjad(name)

        limit = self.config.max_abjad_word_length
        if no_vowels and limit is not None and len(name) > limit:
            logger.warning(f"Truncating {len(name)}-character Hebrew/Arabic word to {limit} characters")
            name = name[:limit]

        result: List[str] = []
        branches: List[Branch] = [ROOT]
        position = 0
        at_start = True
        max_branches = 1

        while branches and position < len(name):
            chunk = find_chunk(name, position)
            if not chunk:
                # Not in table: skip this character
                position += 1
                continue

            entry = DM_SOUNDS[chunk]
            position += len(chunk)

            if at_start:
                column = START_OF_WORD
                at_start = False
            else:
                next_chunk = find_chunk(name, position) if position < len(name) else ''
                if next_chunk and is_vowel(DM_SOUNDS[next_chunk]):
                    column = BEFORE_VOWEL
                else:
                    column = OTHER

            branches = self._apply_entry(entry, column, branches, no_vowels, result)
            max_branches = max(max_branches, len(branches))

        _finish(branches, result)

        codes = unique_codes(result, len(result))
        logger.debug(f"D-M soundex of {word!r}: {codes} ({max_branches} branches at most)")

        return codes

    @staticmethod
    def _apply_entry(
        entry: Tuple[str, ...],
        column: int,
        branches: List[Branch],
        no_vowels: bool,
        result: List[str]
    ) -> List[Branch]:
        """
        Apply the sounds of one table entry to every live branch.

        Completed branches are finished into `result`.

        Returns:
            The branches still under construction
        """
        # Branches are keys here so identical forks are kept only once
        partial: Dict[Branch, None] = {}

        for sound in entry[column::TRIPLET]:
            # An empty sound means 'ignore this chunk in this state'
            if sound == '':
                for branch in branches:
                    partial[branch.close()] = None
                continue

            for branch in branches:
                if not branch.repeats(sound):
                    forks = (branch.extend(sound),)
                elif no_vowels:
                    # Keep both the single and the doubled sound
                    forks = (branch, branch.extend(sound))
                else:
                    forks = (branch,)

                for fork in forks:
                    if fork.depth < CODE_LENGTH:
                        partial[fork] = None
                    else:
                        _finish((fork,), result)

        return list(partial)


_default_encoder = DaitchMokotoffEncoder()


def daitch_mokotoff_soundex(text: str) -> str:
    """Generate D-M soundex codes for a text, e.g. "645740" for "Moskowitz"."""
    return _default_encoder.encode(text)
