"""GedSoundex - Phonetic matching of genealogical names with Russell and Daitch-Mokotoff soundex."""

__version__ = "0.1.0"

from .config import SoundexConfig
from .core.codes import soundex_codes_match
from .core.daitch_mokotoff import DaitchMokotoffEncoder, daitch_mokotoff_soundex
from .core.russell import RussellSoundex, russell_soundex
from .core.soundex import Algorithm, algorithms, soundex

__all__ = [
    'Algorithm',
    'DaitchMokotoffEncoder',
    'RussellSoundex',
    'SoundexConfig',
    'algorithms',
    'daitch_mokotoff_soundex',
    'russell_soundex',
    'soundex',
    'soundex_codes_match',
]
