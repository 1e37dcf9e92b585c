from __future__ import annotations
from .base import (
    BaseWordSource,
    REGISTRY,
    WordListUnavailableError,
    create_source,
    get_source_ids,
    register,
)

from .enumeration import EnumerationSource
from .wordlist import WordListSource, clean_word_list
from .remote import RemoteWordListSource, DEFAULT_WORD_LIST_URL, fetch_word_list, clear_word_list_cache
from .frequency import FrequencyWordSource

__all__ = [
    "BaseWordSource",
    "REGISTRY",
    "WordListUnavailableError",
    "create_source",
    "get_source_ids",
    "register",
    "EnumerationSource",
    "WordListSource",
    "clean_word_list",
    "RemoteWordListSource",
    "DEFAULT_WORD_LIST_URL",
    "fetch_word_list",
    "clear_word_list_cache",
    "FrequencyWordSource",
]
