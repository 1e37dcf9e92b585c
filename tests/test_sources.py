import pytest
import requests

from packages.engine import WordConstraints
from packages.sources import (
    EnumerationSource,
    RemoteWordListSource,
    WordListSource,
    WordListUnavailableError,
    create_source,
    get_source_ids,
)
from packages.sources import remote


def test_registry_lists_all_sources():
    assert get_source_ids() == ["enumerate", "remote", "wordfreq", "wordlist"]
    assert isinstance(create_source("enumerate"), EnumerationSource)
    with pytest.raises(ValueError):
        create_source("nope")


def test_enumeration_source_excludes_denied_letters():
    src = EnumerationSource()
    c = WordConstraints(denied_chars=list("abcdefghijklmnopqrstuvw"))  # leaves x, y, z
    words = list(src.candidates(c))
    assert src.estimate(c) == 3 ** 5 == len(words)
    assert words[0] == "xxxxx" and words[-1] == "zzzzz"
    assert src.prevalidated is False


def test_wordlist_source_cleans_and_filters(words_file):
    src = create_source("wordlist", path=words_file)
    assert src.load() == ["crate", "cacti", "catch", "hello", "zebra", "abide"]
    c = WordConstraints(denied_chars=["h"])
    assert list(src.candidates(c)) == ["crate", "cacti", "zebra", "abide"]
    assert src.prevalidated is True


def test_wordlist_source_in_memory_keeps_order():
    src = WordListSource(words=["Zebra", "apple", "bad", "apple"])
    assert list(src.candidates(WordConstraints())) == ["zebra", "apple"]


def test_wordlist_source_missing_file(tmp_path):
    src = WordListSource(path=tmp_path / "missing.txt")
    with pytest.raises(WordListUnavailableError):
        list(src.candidates(WordConstraints()))


class _FakeResponse:
    def __init__(self, payload, status=200):
        self._payload = payload
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} error")

    def json(self):
        return self._payload


def test_remote_source_fetches_once(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        return _FakeResponse({"words": ["CRANE", "slate", "toolong", 5]})

    monkeypatch.setattr(remote.requests, "get", fake_get)
    a = RemoteWordListSource(url="https://example.test/words.json")
    b = RemoteWordListSource(url="https://example.test/words.json")
    assert list(a.candidates(WordConstraints())) == ["crane", "slate"]
    assert list(b.candidates(WordConstraints(denied_chars=["c"]))) == ["slate"]
    assert calls == ["https://example.test/words.json"]


def test_remote_source_accepts_bare_list(monkeypatch):
    monkeypatch.setattr(remote.requests, "get", lambda url, timeout: _FakeResponse(["pilot"]))
    assert list(create_source("remote", url="https://example.test/a").candidates(WordConstraints())) == ["pilot"]


def test_remote_source_failure_is_distinct_and_not_cached(monkeypatch):
    monkeypatch.setattr(remote.requests, "get", lambda url, timeout: _FakeResponse({}, status=503))
    src = RemoteWordListSource(url="https://example.test/down")
    with pytest.raises(WordListUnavailableError):
        list(src.candidates(WordConstraints()))

    monkeypatch.setattr(remote.requests, "get", lambda url, timeout: _FakeResponse(["crane"]))
    assert list(RemoteWordListSource(url="https://example.test/down").candidates(WordConstraints())) == ["crane"]


def test_wordfreq_source_has_common_words():
    src = create_source("wordfreq", n_top=3000)
    words = src.load()
    assert "about" in words and "their" in words
    assert all(len(w) == 5 for w in words)
