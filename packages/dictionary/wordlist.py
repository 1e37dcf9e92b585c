"""
Dictionary oracle backed by a word-list file.

Reads a plain list, one word per line. Hunspell .aff/.dic pairs go through
HunspellDictionary instead, which applies the affix rules.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Set

from packages.datasets.io import load_words
from .base import BaseDictionary, DictionaryUnavailableError

log = logging.getLogger(__name__)


class WordListDictionary(BaseDictionary):
    id = "wordlist"

    def __init__(self, path: Optional[Path | str] = None, *, words: Optional[Iterable[str]] = None):
        if words is None:
            if path is None:
                raise ValueError("WordListDictionary needs a path or words")
            try:
                words = load_words(path)
            except (OSError, UnicodeDecodeError) as e:
                raise DictionaryUnavailableError(
                    f"Dictionary file could not be loaded: {path} ({e})") from e
            if not words:
                raise DictionaryUnavailableError(f"Dictionary file is empty: {path}")
            log.info("Loaded %d dictionary words from %s", len(words), path)

        self.path = str(path) if path is not None else None
        self._words: Set[str] = {w.strip().lower() for w in words}

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "WordListDictionary":
        return cls(words=words)

    def check(self, word: str) -> bool:
        return word.lower() in self._words

    def __len__(self) -> int:
        return len(self._words)
