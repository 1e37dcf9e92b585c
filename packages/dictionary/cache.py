"""
Process-wide dictionary oracle.

Lifecycle:
  - created lazily by the first get_dictionary() call that needs it
  - shared read-only by every solve after that
  - torn down only by clear_dictionary_cache() (process exit, tests)

Initialization happens at most once under a lock. If it fails nothing is
cached, so the next call tries again and raises the same
DictionaryUnavailableError if the data is still missing.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional

from .base import BaseDictionary
from .frequency import FrequencyDictionary
from .hunspell import HunspellDictionary, is_hunspell_path
from .wordlist import WordListDictionary

log = logging.getLogger(__name__)

_lock = threading.Lock()
_dictionary: Optional[BaseDictionary] = None
_source: Optional[str] = None


def _source_key(path: Optional[Path | str]) -> str:
    if path is None:
        return "wordfreq"
    p = Path(path).resolve()
    # en_EN.dic and en_EN.aff name the same hunspell dictionary
    return str(p.with_suffix("")) if is_hunspell_path(p) else str(p)


def _build(path: Optional[Path | str]) -> BaseDictionary:
    if path is None:
        return FrequencyDictionary()
    if is_hunspell_path(path):
        return HunspellDictionary(path)
    return WordListDictionary(path)


def get_dictionary(path: Optional[Path | str] = None) -> BaseDictionary:
    """
    Return the shared oracle, building it on first use.

    With `path`, the oracle is a HunspellDictionary for `.dic`/`.aff` paths
    and a WordListDictionary over the file otherwise; without, it is the
    wordfreq-backed FrequencyDictionary. Asking for a different backing
    source once one is cached is a ValueError: the oracle is never
    swapped mid-process.
    """
    global _dictionary, _source

    key = _source_key(path)
    with _lock:
        if _dictionary is None:
            _dictionary = _build(path)
            _source = key
            log.info("Dictionary initialized (%s)", key)
        elif _source != key:
            raise ValueError(
                f"Dictionary already initialized from {_source}; refusing to reload from {key}")
        return _dictionary


def clear_dictionary_cache() -> None:
    global _dictionary, _source
    with _lock:
        _dictionary = None
        _source = None
