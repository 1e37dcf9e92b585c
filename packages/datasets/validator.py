"""
Word-list validator for wordfinder.

What this module does:
- Validate one word list (a dictionary file or a precomputed candidate list).
- Enforce formatting rules (lowercase, a–z only, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("data/words_5.txt", N=5)
    print(pretty_summary(rep))

Lines of other lengths are normal in a full dictionary, so `passed` only
requires a readable file with at least one valid word; `strict=True` also
fails on invalid lines and duplicates (use it for candidate lists that are
meant to be pre-validated).
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine.enumerator import ALPHABET


@dataclass
class ValidationReport:
    """Diagnostics and metadata for one word-list file."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have exact length N
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and len(w) == N and all(c in ALPHABET for c in w):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(path: str, N: int = 5, *, strict: bool = False) -> Dict:
    """
    Validate a word-list file for length-N words.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema).
    """
    p = Path(path)
    if not p.exists():
        rep = ValidationReport(N, path, False, 0, "", 0, 0, False,
                               [f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    unique_count = len(set(words))

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(words) != unique_count:
        issues.append("word list contains duplicate lines")

    passed = bool(words)
    if strict:
        passed = passed and invalid == 0 and len(words) == unique_count

    rep = ValidationReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=unique_count,
        invalid_lines=invalid,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=2315 (uniq=2315, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
