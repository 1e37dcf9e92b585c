"""
Word list fetched over HTTP.

The payload is JSON: either {"words": [...]} or a bare list. Each URL is
fetched at most once per process; later sources for the same URL share the
cached list. Failures raise WordListUnavailableError and are not retried.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List

import requests

from .base import WordListUnavailableError, register
from .wordlist import WordListSource, clean_word_list

log = logging.getLogger(__name__)

DEFAULT_WORD_LIST_URL = "https://raw.githubusercontent.com/darkermango/5-Letter-words/main/words.json"
DEFAULT_TIMEOUT = 30

_cache_lock = threading.Lock()
_cache: Dict[str, List[str]] = {}


def fetch_word_list(url: str = DEFAULT_WORD_LIST_URL, timeout: float = DEFAULT_TIMEOUT) -> List[str]:
    """
    Download and clean a JSON word list (no caching).
    """
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
        data = r.json()
    except (requests.RequestException, ValueError) as e:
        raise WordListUnavailableError(f"Failed to load word list from {url} ({e})") from e

    words = data.get("words", []) if isinstance(data, dict) else data
    if not isinstance(words, list):
        raise WordListUnavailableError(f"Unexpected word list payload from {url}")
    return clean_word_list(words)


def clear_word_list_cache() -> None:
    with _cache_lock:
        _cache.clear()


@register
class RemoteWordListSource(WordListSource):
    id = "remote"
    name = "Remote word list"

    def __init__(self, url: str = DEFAULT_WORD_LIST_URL, timeout: float = DEFAULT_TIMEOUT):
        super().__init__()
        self.url = url
        self.timeout = timeout

    def _fetch(self) -> List[str]:
        with _cache_lock:
            if self.url not in _cache:
                _cache[self.url] = fetch_word_list(self.url, self.timeout)
                log.info("Fetched %d words from %s", len(_cache[self.url]), self.url)
            return _cache[self.url]
