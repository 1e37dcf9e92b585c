import pytest

from packages.dictionary import (
    DictionaryUnavailableError,
    FrequencyDictionary,
    HunspellDictionary,
    WordListDictionary,
    clear_dictionary_cache,
    get_dictionary,
)


def test_wordlist_dictionary_from_words():
    d = WordListDictionary.from_words(["Crane", "slate"])
    assert d.check("crane") is True
    assert d.check("CRANE") is True
    assert d.check("crate") is False
    assert "slate" in d


def test_wordlist_dictionary_missing_file_is_unavailable(tmp_path):
    with pytest.raises(DictionaryUnavailableError):
        WordListDictionary(tmp_path / "missing.dic")


def test_wordlist_dictionary_empty_file_is_unavailable(tmp_path):
    p = tmp_path / "empty.txt"
    p.write_text("\n", encoding="utf-8")
    with pytest.raises(DictionaryUnavailableError):
        WordListDictionary(p)


def test_frequency_dictionary():
    d = FrequencyDictionary()
    assert d.check("about") is True
    assert d.check("qxzvj") is False


def test_get_dictionary_is_a_lazy_singleton(words_file):
    d1 = get_dictionary(words_file)
    d2 = get_dictionary(words_file)
    assert d1 is d2
    assert d1.check("cacti")


def test_get_dictionary_refuses_to_swap_backing_data(words_file, tmp_path):
    get_dictionary(words_file)
    other = tmp_path / "other.txt"
    other.write_text("slate\n", encoding="utf-8")
    with pytest.raises(ValueError):
        get_dictionary(other)


def test_get_dictionary_failure_is_not_cached(tmp_path):
    p = tmp_path / "late.txt"
    with pytest.raises(DictionaryUnavailableError):
        get_dictionary(p)
    p.write_text("crane\n", encoding="utf-8")
    assert get_dictionary(p).check("crane")
    clear_dictionary_cache()


def _hunspell_pair(tmp_path):
    (tmp_path / "en_EN.aff").write_text("SET UTF-8\n\nSFX S Y 1\nSFX S 0 s .\n", encoding="utf-8")
    dic = tmp_path / "en_EN.dic"
    dic.write_text("2\nbird/S\ncrate\n", encoding="utf-8")
    return dic


def test_hunspell_dictionary_applies_affixes(tmp_path):
    d = HunspellDictionary(_hunspell_pair(tmp_path))
    assert d.check("bird") is True
    assert d.check("birds") is True
    assert d.check("crate") is True
    assert d.check("crates") is False
    assert d.check("zzzzz") is False


def test_hunspell_dictionary_accepts_aff_or_stem(tmp_path):
    _hunspell_pair(tmp_path)
    assert HunspellDictionary(tmp_path / "en_EN.aff").check("birds")
    assert HunspellDictionary(tmp_path / "en_EN").check("birds")


def test_hunspell_dictionary_missing_aff_is_unavailable(tmp_path):
    dic = tmp_path / "en_EN.dic"
    dic.write_text("1\ncrate\n", encoding="utf-8")
    with pytest.raises(DictionaryUnavailableError):
        HunspellDictionary(dic)


def test_get_dictionary_dispatches_dic_to_hunspell(tmp_path):
    dic = _hunspell_pair(tmp_path)
    d = get_dictionary(dic)
    assert isinstance(d, HunspellDictionary)
    assert d.check("birds")
    # the .aff path names the same dictionary
    assert get_dictionary(tmp_path / "en_EN.aff") is d
