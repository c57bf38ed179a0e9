"""
Soundex algorithm registry.

Callers store the identifier of the algorithm alongside the codes and use it
to encode search terms the same way.
"""

from enum import Enum
from typing import Dict

from .daitch_mokotoff import daitch_mokotoff_soundex
from .russell import russell_soundex


class Algorithm(Enum):
    """Supported soundex algorithms."""
    RUSSELL = "std"
    DAITCH_MOKOTOFF = "dm"


ALGORITHM_NAMES = {
    Algorithm.RUSSELL: "Russell",
    Algorithm.DAITCH_MOKOTOFF: "Daitch-Mokotoff",
}

_ENCODERS = {
    Algorithm.RUSSELL: russell_soundex,
    Algorithm.DAITCH_MOKOTOFF: daitch_mokotoff_soundex,
}


def algorithms() -> Dict[str, str]:
    """Which algorithms are supported, as identifier -> display name."""
    return {algorithm.value: name for algorithm, name in ALGORITHM_NAMES.items()}


def get_algorithm(algorithm) -> Algorithm:
    """
    Resolve an algorithm identifier.

    Args:
        algorithm: An Algorithm, or its identifier ("std" or "dm")

    Returns:
        The matching Algorithm

    Raises:
        ValueError: If the identifier is unknown
    """
    if isinstance(algorithm, Algorithm):
        return algorithm
    try:
        return Algorithm(algorithm)
    except ValueError:
        raise ValueError(
            f"Unknown soundex algorithm: {algorithm!r} (expected one of {', '.join(algorithms())})"
        ) from None


def soundex(text: str, algorithm="dm") -> str:
    """
    Generate soundex codes for a text with the chosen algorithm.

    Args:
        text: Name or place text
        algorithm: "std" (Russell) or "dm" (Daitch-Mokotoff)

    Returns:
        Colon-delimited code string
    """
    return _ENCODERS[get_algorithm(algorithm)](text)
