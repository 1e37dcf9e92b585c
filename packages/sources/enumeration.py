"""
Generate-then-filter source.

Strategy:
  - Build the allowed alphabet (a-z minus denied letters).
  - Lazily enumerate every five-letter string over it.

Nothing here is a real word yet; pair this source with a dictionary oracle.
"""

from __future__ import annotations

from typing import Iterator, Optional

from packages.engine.constraints import WordConstraints
from packages.engine.enumerator import WORD_LENGTH, allowed_alphabet, count_words, enumerate_words
from .base import BaseWordSource, register


@register
class EnumerationSource(BaseWordSource):
    id = "enumerate"
    name = "Enumerate alphabet"

    def __init__(self, length: int = WORD_LENGTH):
        self.length = int(length)

    def candidates(self, constraints: WordConstraints) -> Iterator[str]:
        alphabet = allowed_alphabet(constraints.denied_chars)
        return enumerate_words(alphabet, self.length)

    def estimate(self, constraints: WordConstraints) -> Optional[int]:
        return count_words(allowed_alphabet(constraints.denied_chars), self.length)
