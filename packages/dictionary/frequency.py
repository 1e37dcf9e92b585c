"""
Dictionary oracle backed by wordfreq.

wordfreq ships its frequency tables inside the package, so this oracle works
with no data files. A string counts as a word when its Zipf frequency (log10
of occurrences per billion words) reaches `min_zipf`; 0.0 means wordfreq has
never seen it.
"""

from __future__ import annotations

import logging

from wordfreq import zipf_frequency

from .base import BaseDictionary, DictionaryUnavailableError

log = logging.getLogger(__name__)

DEFAULT_MIN_ZIPF = 2.0


class FrequencyDictionary(BaseDictionary):
    id = "wordfreq"

    def __init__(self, lang: str = "en", min_zipf: float = DEFAULT_MIN_ZIPF):
        self.lang = lang
        self.min_zipf = float(min_zipf)
        # Touch the tables once so a broken install fails here, not mid-solve
        try:
            zipf_frequency("the", lang)
        except (LookupError, OSError, ValueError) as e:
            raise DictionaryUnavailableError(
                f"wordfreq data for {lang!r} is unavailable ({e})") from e
        log.info("Using wordfreq dictionary (lang=%s, min_zipf=%.2f)", lang, self.min_zipf)

    def check(self, word: str) -> bool:
        return zipf_frequency(word, self.lang) >= self.min_zipf
