"""Utility helpers for phonetic encoding."""

from .script import text_script, char_script, is_abjad

__all__ = ['text_script', 'char_script', 'is_abjad']
