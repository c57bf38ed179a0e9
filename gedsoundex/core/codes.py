"""
Code sets: the colon-delimited code strings stored alongside names.

A code set is an ordered list of fixed-width codes with no repeats, capped at
the number of codes that fit the storage column.
"""

from typing import Iterable, List

DELIMITER = ':'


def unique_codes(codes: Iterable[str], limit: int) -> List[str]:
    """
    Remove repeated codes, keeping the first occurrence of each.

    Args:
        codes: Codes in generation order
        limit: Maximum number of codes to keep

    Returns:
        At most `limit` distinct codes
    """
    return list(dict.fromkeys(codes))[:limit]


def join_codes(codes: Iterable[str], limit: int, delimiter: str = DELIMITER) -> str:
    """Build a code string from codes in generation order."""
    return delimiter.join(unique_codes(codes, limit))


def split_codes(codes: str, delimiter: str = DELIMITER) -> List[str]:
    """Split a code string into its codes. An empty string has no codes."""
    if not codes:
        return []
    return codes.split(delimiter)


def soundex_codes_match(codes1: str, codes2: str, delimiter: str = DELIMITER) -> bool:
    """
    Check whether two code strings share at least one code.

    Empty code strings never match anything, including each other.

    Args:
        codes1: First code string, e.g. "645740:645750"
        codes2: Second code string

    Returns:
        True if the code strings have a code in common
    """
    if codes1 and codes2:
        return not set(codes1.split(delimiter)).isdisjoint(codes2.split(delimiter))

    return False


def shared_codes(codes1: str, codes2: str, delimiter: str = DELIMITER) -> List[str]:
    """Codes present in both code strings, in the order of the first."""
    other = set(split_codes(codes2, delimiter))
    return [code for code in split_codes(codes1, delimiter) if code in other]
