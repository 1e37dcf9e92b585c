"""
Exhaustive candidate generation.

enumerate_words() is a generator: with a full alphabet it would produce
26**5 = 11,881,376 strings, so nothing is ever materialised. Denying even a
few letters shrinks the space quickly (21**5 ~ 4.1M, 18**5 ~ 1.9M).
"""

from __future__ import annotations

from itertools import product
from typing import Iterable, Iterator

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
WORD_LENGTH = 5


def allowed_alphabet(denied_chars: Iterable[str] = ()) -> str:
    """ALPHABET minus the denied letters, still in a-z order."""
    denied = set(denied_chars)
    return "".join(c for c in ALPHABET if c not in denied)


def _unique(alphabet: Iterable[str]) -> str:
    seen = set()
    out = []
    for c in alphabet:
        if c not in seen:
            seen.add(c)
            out.append(c)
    return "".join(out)


def enumerate_words(alphabet: Iterable[str], length: int = WORD_LENGTH) -> Iterator[str]:
    """
    Yield every `length`-letter string over `alphabet`.

    Order is the Cartesian product order: position 1 varies slowest, the last
    position fastest. Repeated letters within a word are allowed; repeated
    letters in `alphabet` itself are collapsed so no string is produced twice.
    """
    letters = _unique(alphabet)
    for combo in product(letters, repeat=length):
        yield "".join(combo)


def count_words(alphabet: Iterable[str], length: int = WORD_LENGTH) -> int:
    """Number of strings enumerate_words() will produce."""
    return len(_unique(alphabet)) ** length
