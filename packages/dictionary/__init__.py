from .base import BaseDictionary, DictionaryUnavailableError
from .wordlist import WordListDictionary
from .hunspell import HunspellDictionary
from .frequency import FrequencyDictionary, DEFAULT_MIN_ZIPF
from .cache import get_dictionary, clear_dictionary_cache

__all__ = [
    "BaseDictionary",
    "DictionaryUnavailableError",
    "WordListDictionary",
    "HunspellDictionary",
    "FrequencyDictionary",
    "DEFAULT_MIN_ZIPF",
    "get_dictionary",
    "clear_dictionary_cache",
]
