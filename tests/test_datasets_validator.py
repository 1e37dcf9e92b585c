from pathlib import Path
from packages.datasets import load_words, pretty_summary, validate_wordlist


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "raise", "stare", "trace", "cared"])

    rep = validate_wordlist(str(words), 5, strict=True)
    assert rep["passed"] is True
    assert rep["count"] == 5 and rep["unique_count"] == 5
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and "words=5" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    # wrong length, invalid chars, uppercase and a duplicate
    words = tmp_path / "words_5.txt"
    words.write_text("crane\ncranes\n???\nCRANE\ncrane\n", encoding="utf-8")

    rep = validate_wordlist(str(words), 5)
    # a dictionary may contain other lengths: only strict mode fails on them
    assert rep["passed"] is True
    assert rep["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])

    strict = validate_wordlist(str(words), 5, strict=True)
    assert strict["passed"] is False


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "nope.txt"))
    assert rep["passed"] is False and rep["exists"] is False
    assert any("not found" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_load_words_plain(tmp_path: Path):
    plain = tmp_path / "words.txt"
    _write(plain, ["Crane", "", "  slate  "])
    assert load_words(plain) == ["crane", "slate"]
