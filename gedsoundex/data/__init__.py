"""Static operand data for the phonetic encoders."""

from .dm_sounds import DM_SOUNDS, TRANSFORM_NAMES, MAX_KEY_LENGTH, is_vowel

__all__ = ['DM_SOUNDS', 'TRANSFORM_NAMES', 'MAX_KEY_LENGTH', 'is_vowel']
