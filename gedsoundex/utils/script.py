"""
Writing-system detection for names.

Identifies the script of a piece of text by its first character that belongs
to a known script, returning an ISO 15924 code ('Latn', 'Hebr', 'Arab', ...).
Spaces, digits, punctuation and combining marks carry no script and are
skipped.
"""

from typing import Optional, Tuple

# (script, first code point, last code point), checked in order.
SCRIPT_RANGES: Tuple[Tuple[str, int, int], ...] = (
    ('Latn', 0x0041, 0x005A),
    ('Latn', 0x0061, 0x007A),
    ('Latn', 0x00AA, 0x00AA),
    ('Latn', 0x00BA, 0x00BA),
    ('Latn', 0x00C0, 0x00D6),
    ('Latn', 0x00D8, 0x00F6),
    ('Latn', 0x00F8, 0x02AF),
    ('Grek', 0x0370, 0x03FF),
    ('Cyrl', 0x0400, 0x052F),
    ('Armn', 0x0530, 0x058F),
    ('Hebr', 0x0591, 0x05F4),
    ('Arab', 0x0600, 0x06FF),
    ('Syrc', 0x0700, 0x074F),
    ('Arab', 0x0750, 0x077F),
    ('Thaa', 0x0780, 0x07BF),
    ('Arab', 0x08A0, 0x08FF),
    ('Deva', 0x0900, 0x097F),
    ('Beng', 0x0980, 0x09FF),
    ('Thai', 0x0E00, 0x0E7F),
    ('Geor', 0x10A0, 0x10FF),
    ('Hang', 0x1100, 0x11FF),
    ('Latn', 0x1E00, 0x1EFF),
    ('Grek', 0x1F00, 0x1FFF),
    ('Latn', 0x2C60, 0x2C7F),
    ('Cyrl', 0x2DE0, 0x2DFF),
    ('Hira', 0x3040, 0x309F),
    ('Kana', 0x30A0, 0x30FF),
    ('Hani', 0x3400, 0x4DBF),
    ('Hani', 0x4E00, 0x9FFF),
    ('Cyrl', 0xA640, 0xA69F),
    ('Latn', 0xA720, 0xA7FF),
    ('Hang', 0xAC00, 0xD7AF),
    ('Latn', 0xFB00, 0xFB06),
    ('Armn', 0xFB13, 0xFB17),
    ('Hebr', 0xFB1D, 0xFB4F),
    ('Arab', 0xFB50, 0xFDFF),
    ('Arab', 0xFE70, 0xFEFF),
    ('Latn', 0xFF21, 0xFF3A),
    ('Latn', 0xFF41, 0xFF5A),
)

DEFAULT_SCRIPT = 'Latn'

# Scripts normally written without vowels
ABJAD_SCRIPTS = frozenset({'Hebr', 'Arab'})


def char_script(char: str) -> Optional[str]:
    """
    Get the script of a single character.

    Args:
        char: A one-character string

    Returns:
        ISO 15924 script code, or None for characters without a script
    """
    code_point = ord(char)

    # ASCII letters are by far the most common case
    if 0x41 <= code_point <= 0x5A or 0x61 <= code_point <= 0x7A:
        return 'Latn'

    for script, first, last in SCRIPT_RANGES:
        if first <= code_point <= last:
            return script

    return None


def text_script(text: str) -> str:
    """
    Get the script of a piece of text.

    Args:
        text: Text to examine

    Returns:
        Script of the first character with a known script, or 'Latn' if none
    """
    for char in text:
        script = char_script(char)
        if script is not None:
            return script

    return DEFAULT_SCRIPT


def is_abjad(text: str) -> bool:
    """True if the text is written in Hebrew or Arabic script."""
    return text_script(text) in ABJAD_SCRIPTS
