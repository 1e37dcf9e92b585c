"""
Build WordConstraints from a history of (guess, pattern) pairs.

Pattern conventions (one char per letter of the guess):
  - 'G'  : green  = letter is at this position
  - 'Y'  : yellow = letter is in the word, but not here
  - '-'  : gray   = letter is absent (or present fewer times than guessed)
'.' and 'B' are also read as gray; case doesn't matter.

A gray letter is only denied globally when no guess in the history marks the
same letter green or yellow. Otherwise it just rules the letter out at that
position (the usual duplicate-letter case, e.g. "speed" against "abide").
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from .constraints import WordConstraints
from .enumerator import WORD_LENGTH
from .validation import clean_word

GREEN, YELLOW, GRAY = "G", "Y", "-"
_PATTERN_ALIASES = {"G": GREEN, "Y": YELLOW, "-": GRAY, ".": GRAY, "B": GRAY}

History = Iterable[Tuple[str, str]]  # (guess, pattern)


def normalize_pattern(pattern: str, N: int = WORD_LENGTH) -> str:
    """
    Canonicalize a feedback pattern to 'G' / 'Y' / '-'.
    Raises ValueError on a wrong length or unknown char.
    """
    p = pattern.strip().upper()
    if len(p) != N:
        raise ValueError(f"pattern must have {N} chars; got {pattern!r}")
    try:
        return "".join(_PATTERN_ALIASES[c] for c in p)
    except KeyError as e:
        raise ValueError(f"unknown pattern char {e.args[0]!r} in {pattern!r}") from e


def constraints_from_history(history: History) -> WordConstraints:
    """
    Fold every (guess, pattern) pair into a single WordConstraints.

    Guesses that aren't clean five-letter words are skipped (an unfinished
    row in a UI grid), but a malformed pattern for a valid guess is an error.
    """
    rows: List[Tuple[str, str]] = []
    for guess, pattern in history:
        w = clean_word(guess)
        if w is None:
            continue
        rows.append((w, normalize_pattern(pattern)))

    accepted: List[str] = []
    known: Dict[int, str] = {}
    rejected: Dict[int, List[str]] = {}

    def _reject(pos: int, c: str) -> None:
        bucket = rejected.setdefault(pos, [])
        if c not in bucket:
            bucket.append(c)

    # Pass 1: greens and yellows establish which letters are present
    for word, patt in rows:
        for i, (c, f) in enumerate(zip(word, patt), start=1):
            if f == GREEN:
                accepted.append(c)
                known[i] = c
            elif f == YELLOW:
                accepted.append(c)
                _reject(i, c)

    # Pass 2: grays deny a letter unless it was seen present somewhere
    present = set(accepted)
    denied: List[str] = []
    for word, patt in rows:
        for i, (c, f) in enumerate(zip(word, patt), start=1):
            if f != GRAY:
                continue
            if c in present:
                if known.get(i) != c:
                    _reject(i, c)
            else:
                denied.append(c)

    return WordConstraints(
        accepted_chars=accepted,
        denied_chars=denied,
        known_positions=known,
        rejected_positions=rejected,
    )


def parse_history_arg(arg: str) -> Tuple[str, str]:
    """
    Parse the CLI form 'guess:pattern', e.g. 'crane:-Y--G'.
    """
    guess, sep, pattern = arg.partition(":")
    if not sep:
        raise ValueError(f"expected GUESS:PATTERN, got {arg!r}")
    w = clean_word(guess)
    if w is None:
        raise ValueError(f"guess must be a five-letter word, got {guess!r}")
    return w, normalize_pattern(pattern)
