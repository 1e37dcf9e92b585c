"""
Filter-an-existing-list source.

Strategy:
  - Start from a list of known five-letter words (in memory or a file).
  - Drop every word containing a denied letter; keep list order.

The list is assumed to hold real words already, so no oracle is needed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from packages.datasets.io import load_words
from packages.engine.constraints import WordConstraints, has_no_denied_characters
from packages.engine.validation import clean_word
from .base import BaseWordSource, WordListUnavailableError, register

log = logging.getLogger(__name__)


def clean_word_list(words: Iterable) -> List[str]:
    """
    Keep clean five-letter a-z tokens (lowercased), dropping anything else
    and repeated entries. Order preserved.
    """
    seen = set()
    out: List[str] = []
    for w in words:
        cw = clean_word(w)
        if cw is None or cw in seen:
            continue
        seen.add(cw)
        out.append(cw)
    return out


@register
class WordListSource(BaseWordSource):
    id = "wordlist"
    name = "Word list"
    prevalidated = True

    def __init__(self, words: Optional[Iterable[str]] = None, path: Optional[Path | str] = None):
        self.path = str(path) if path is not None else None
        self._words: Optional[List[str]] = clean_word_list(words) if words is not None else None

    def load(self) -> List[str]:
        """Return the cleaned list, reading the file on first use."""
        if self._words is None:
            self._words = self._fetch()
        return self._words

    def _fetch(self) -> List[str]:
        if self.path is None:
            raise ValueError("WordListSource needs words or a path")
        try:
            words = clean_word_list(load_words(self.path))
        except (OSError, UnicodeDecodeError) as e:
            raise WordListUnavailableError(f"Failed to load word list {self.path} ({e})") from e
        log.info("Loaded %d five-letter words from %s", len(words), self.path)
        return words

    def candidates(self, constraints: WordConstraints) -> Iterator[str]:
        denied = constraints.denied_chars
        for w in self.load():
            if has_no_denied_characters(w, denied):
                yield w

    def estimate(self, constraints: WordConstraints) -> Optional[int]:
        return len(self.load())
