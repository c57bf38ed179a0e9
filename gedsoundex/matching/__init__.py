"""
Soundex-based name matching.

This module finds names that sound alike using soundex codes, ranking them by
fuzzy string similarity.
"""

from .matcher import SoundexMatcher, SoundexMatch

__all__ = ['SoundexMatcher', 'SoundexMatch']
