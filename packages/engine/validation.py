"""
Shape checks for candidate words and single letters.

A candidate is acceptable iff:
  - it is a string
  - it is a-z only (after strip + lowercase)
  - it has exact length N

Membership in a dictionary is NOT checked here; that's the oracle's job
(packages.dictionary).
"""

from __future__ import annotations

from typing import Optional

from .enumerator import ALPHABET, WORD_LENGTH


def clean_word(word, N: int = WORD_LENGTH) -> Optional[str]:
    """
    Return the normalized (stripped, lowercased) word, or None if it isn't a
    clean N-letter a-z token.
    """
    if not isinstance(word, str):
        return None

    w = word.strip().lower()

    # str.isalpha() accepts non-ASCII letters; only a-z are valid here
    if len(w) != N or any(c not in ALPHABET for c in w):
        return None
    return w


def is_candidate_word(word, N: int = WORD_LENGTH) -> bool:
    return clean_word(word, N) is not None


def clean_letter(value) -> Optional[str]:
    """Lowercased single a-z letter, or None."""
    if not isinstance(value, str) or len(value) != 1:
        return None
    c = value.lower()
    return c if c in ALPHABET else None
