"""
Phonetic encoders.

Russell and Daitch-Mokotoff soundex, plus helpers for the colon-delimited
code strings they produce.
"""

from .codes import soundex_codes_match, shared_codes, split_codes
from .daitch_mokotoff import DaitchMokotoffEncoder, daitch_mokotoff_soundex
from .russell import RussellSoundex, russell_soundex
from .soundex import Algorithm, algorithms, get_algorithm, soundex

__all__ = [
    'Algorithm',
    'DaitchMokotoffEncoder',
    'RussellSoundex',
    'algorithms',
    'daitch_mokotoff_soundex',
    'get_algorithm',
    'russell_soundex',
    'shared_codes',
    'soundex',
    'soundex_codes_match',
    'split_codes',
]
