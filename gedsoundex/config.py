"""Configuration for the soundex encoders."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SoundexConfig:
    """Configuration for soundex encoding and code storage."""

    # Separator between codes in a stored code string
    delimiter: str = ":"

    # A 255-character column holds 51 4-character codes plus 50 delimiters
    russell_max_codes: int = 51

    # ... or 36 6-character codes plus 35 delimiters
    dm_max_codes: int = 36

    # Longer words are truncated before Daitch-Mokotoff encoding, which can
    # fork exponentially on ambiguous input. None disables the limit.
    max_word_length: Optional[int] = 100

    # Hebrew and Arabic words keep both the single and the doubled reading of
    # a repeated sound, so their branches do not collapse and cost grows much
    # faster with length. None leaves only max_word_length.
    max_abjad_word_length: Optional[int] = 24

    def __post_init__(self):
        if not self.delimiter:
            raise ValueError("delimiter must not be empty")
        if self.russell_max_codes < 1 or self.dm_max_codes < 1:
            raise ValueError(
                f"Code limits must be positive: russell_max_codes={self.russell_max_codes}, "
                f"dm_max_codes={self.dm_max_codes}"
            )
        if self.max_word_length is not None and self.max_word_length < 1:
            raise ValueError(f"max_word_length must be positive, got {self.max_word_length}")
        if self.max_abjad_word_length is not None and self.max_abjad_word_length < 1:
            raise ValueError(
                f"max_abjad_word_length must be positive, got {self.max_abjad_word_length}"
            )
