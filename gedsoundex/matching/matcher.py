"""
Name matching with soundex codes.

Finds the names in a list that sound like a query name, and ranks them by
spelling similarity.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from rapidfuzz import fuzz

from ..config import SoundexConfig
from ..core.codes import shared_codes, soundex_codes_match
from ..core.daitch_mokotoff import DaitchMokotoffEncoder
from ..core.russell import RussellSoundex
from ..core.soundex import Algorithm, get_algorithm

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SoundexMatch:
    """A candidate name that shares a soundex code with the query."""
    name: str
    codes: str
    shared_codes: List[str] = field(default_factory=list)
    similarity: float = 0.0

    @property
    def is_exact(self) -> bool:
        """True if the names are spelled the same (ignoring case)."""
        return self.similarity >= 100.0


class SoundexMatcher:
    """
    Matches names by soundex code.

    Two names match when their code strings share at least one code. Matches
    are ranked by rapidfuzz string similarity, so "Moskowitz" ranks
    "Moskovitz" above "Muskievicz".
    """

    def __init__(self, algorithm="dm", config: Optional[SoundexConfig] = None):
        """
        Initialize the matcher.

        Args:
            algorithm: "std" (Russell) or "dm" (Daitch-Mokotoff)
            config: Soundex configuration
        """
        self.algorithm = get_algorithm(algorithm)
        self.config = config or SoundexConfig()

        if self.algorithm is Algorithm.RUSSELL:
            self.encoder = RussellSoundex(self.config)
        else:
            self.encoder = DaitchMokotoffEncoder(self.config)

        self._cache: Dict[str, str] = {}

    def codes_for(self, name: str) -> str:
        """
        Get the code string for a name.

        Args:
            name: Name to encode

        Returns:
            Colon-delimited code string
        """
        codes = self._cache.get(name)
        if codes is None:
            codes = self.encoder.encode(name)
            self._cache[name] = codes
        return codes

    def matches(self, name1: str, name2: str) -> bool:
        """True if two names share a soundex code."""
        return soundex_codes_match(
            self.codes_for(name1), self.codes_for(name2), self.config.delimiter
        )

    def find_matches(
        self,
        query: str,
        candidates: Iterable[str],
        limit: Optional[int] = None
    ) -> List[SoundexMatch]:
        """
        Find the candidates that sound like the query.

        Args:
            query: Name to search for
            candidates: Names to search
            limit: Maximum number of matches to return, or None for all

        Returns:
            Matches sorted by similarity (highest first)
        """
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")

        query_codes = self.codes_for(query)
        if not query_codes:
            logger.debug(f"No soundex codes for {query!r}; nothing can match")
            return []

        matches = []

        for candidate in candidates:
            codes = self.codes_for(candidate)
            if not soundex_codes_match(query_codes, codes, self.config.delimiter):
                continue

            matches.append(SoundexMatch(
                name=candidate,
                codes=codes,
                shared_codes=shared_codes(query_codes, codes, self.config.delimiter),
                similarity=fuzz.ratio(query.upper(), candidate.upper())
            ))

        # Sort by similarity (highest first); sort is stable for ties
        matches.sort(key=lambda m: m.similarity, reverse=True)

        logger.debug(f"{len(matches)} soundex matches for {query!r}")

        if limit is not None:
            matches = matches[:limit]

        return matches
