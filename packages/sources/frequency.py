"""
Word list built from wordfreq's most common English words.

Keeps the five-letter, purely alphabetic entries of top_n_list(lang, n_top),
most frequent first. Works offline; wordfreq bundles its data.
"""

from __future__ import annotations

from typing import List

from wordfreq import top_n_list

from .base import register
from .wordlist import WordListSource, clean_word_list

DEFAULT_N_TOP = 50000


@register
class FrequencyWordSource(WordListSource):
    id = "wordfreq"
    name = "wordfreq top words"

    def __init__(self, lang: str = "en", n_top: int = DEFAULT_N_TOP):
        super().__init__()
        self.lang = lang
        self.n_top = int(n_top)

    def _fetch(self) -> List[str]:
        return clean_word_list(top_n_list(self.lang, self.n_top))
