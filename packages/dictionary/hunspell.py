"""
Dictionary oracle backed by a hunspell .aff/.dic pair.

spylls applies the affix rules, so inflected forms (plurals from `word/S`,
past tenses, ...) are recognized, not just the stems listed in the .dic.
The path may name either file of the pair or their common stem:
`en_EN`, `en_EN.dic` and `en_EN.aff` all load the same dictionary.
"""

from __future__ import annotations

import logging
from pathlib import Path

from spylls.hunspell import Dictionary

from .base import BaseDictionary, DictionaryUnavailableError

log = logging.getLogger(__name__)

HUNSPELL_SUFFIXES = (".dic", ".aff")


def is_hunspell_path(path: Path | str) -> bool:
    return Path(path).suffix.lower() in HUNSPELL_SUFFIXES


class HunspellDictionary(BaseDictionary):
    id = "hunspell"

    def __init__(self, path: Path | str):
        p = Path(path)
        stem = p.with_suffix("") if is_hunspell_path(p) else p
        self.path = str(stem)

        for suffix in HUNSPELL_SUFFIXES:
            if not stem.with_name(stem.name + suffix).exists():
                raise DictionaryUnavailableError(
                    f"Dictionary files not found: expected {stem}.aff and {stem}.dic")
        try:
            self._dictionary = Dictionary.from_files(str(stem))
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise DictionaryUnavailableError(
                f"Dictionary files could not be loaded: {stem} ({e})") from e
        log.info("Loaded hunspell dictionary %s", stem)

    def check(self, word: str) -> bool:
        return self._dictionary.lookup(word)
