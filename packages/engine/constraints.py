"""
Constraint matching for five-letter candidates.

Given:
  - a candidate word (lowercase, length 5)
  - a WordConstraints value built from the feedback seen so far

Return:
  - True iff the word is consistent with ALL of that feedback.

Four independent checks make up a full match:
  1) required presence   : every accepted letter occurs somewhere
  2) known positions     : word[p - 1] == letter for each green (p is 1-indexed)
  3) rejected positions  : word[p - 1] is not one of the letters ruled out at p
  4) denied letters      : no globally absent letter occurs anywhere

Word sources already exclude denied letters (either by shrinking the alphabet
before enumeration or by pre-filtering a word list), so the solve loop only
runs checks 1-3 via `matches_position_constraints`. `matches` runs all four.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple


def _dedupe(chars: Iterable[str]) -> Tuple[str, ...]:
    seen = set()
    out: List[str] = []
    for c in chars:
        if c not in seen:
            seen.add(c)
            out.append(c)
    return tuple(out)


@dataclass(frozen=True)
class WordConstraints:
    """
    Everything known about the hidden word.

    Char collections are stored as de-duplicated tuples (insertion order is
    kept so the value can be echoed back as it came in). Position maps are
    read-only and keyed by 1-indexed position.
    """
    accepted_chars: Tuple[str, ...] = ()
    denied_chars: Tuple[str, ...] = ()
    known_positions: Mapping[int, str] = field(default_factory=dict)
    rejected_positions: Mapping[int, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # frozen=True: coerce through object.__setattr__
        object.__setattr__(self, "accepted_chars", _dedupe(self.accepted_chars))
        object.__setattr__(self, "denied_chars", _dedupe(self.denied_chars))
        known = {int(p): c for p, c in dict(self.known_positions).items()}
        rejected = {int(p): _dedupe(cs) for p, cs in dict(self.rejected_positions).items()}
        known = dict(sorted(known.items()))
        rejected = dict(sorted(rejected.items()))
        object.__setattr__(self, "known_positions", MappingProxyType(known))
        object.__setattr__(self, "rejected_positions", MappingProxyType(rejected))

    def __hash__(self) -> int:
        # mappingproxy isn't hashable; hash item snapshots instead
        return hash((
            self.accepted_chars,
            self.denied_chars,
            tuple(self.known_positions.items()),
            tuple(self.rejected_positions.items()),
        ))

    def is_empty(self) -> bool:
        return not (
            self.accepted_chars
            or self.denied_chars
            or self.known_positions
            or any(self.rejected_positions.values())
        )

    def to_dict(self) -> Dict:
        """Wire form (camelCase keys, lists instead of tuples)."""
        return {
            "acceptedChars": list(self.accepted_chars),
            "deniedChars": list(self.denied_chars),
            "knownPositions": dict(self.known_positions),
            "rejectedPositions": {p: list(cs) for p, cs in self.rejected_positions.items()},
        }


def has_all_required_characters(word: str, accepted_chars: Iterable[str]) -> bool:
    """Every accepted letter occurs at least once, anywhere in `word`."""
    return all(c in word for c in accepted_chars)


def has_correct_known_positions(word: str, known_positions: Mapping[int, str]) -> bool:
    """
    Each known (position, letter) pair is satisfied.

    Positions are 1-indexed: position 1 -> word[0]. A position past the end
    of the word can never match.
    """
    for pos, letter in known_positions.items():
        i = pos - 1
        if i < 0 or i >= len(word) or word[i] != letter:
            return False
    return True


def has_valid_rejected_positions(
        word: str, rejected_positions: Mapping[int, Iterable[str]]
) -> bool:
    """No letter sits at a position where it has been ruled out."""
    for pos, letters in rejected_positions.items():
        i = pos - 1
        if 0 <= i < len(word) and word[i] in letters:
            return False
    return True


def has_no_denied_characters(word: str, denied_chars: Iterable[str]) -> bool:
    return not any(c in word for c in denied_chars)


def matches_position_constraints(word: str, constraints: WordConstraints) -> bool:
    """
    Checks 1-3 (presence, known, rejected), cheapest first.

    Use this when the candidate stream has already had denied letters removed.
    """
    return (
        has_all_required_characters(word, constraints.accepted_chars)
        and has_correct_known_positions(word, constraints.known_positions)
        and has_valid_rejected_positions(word, constraints.rejected_positions)
    )


def matches(word: str, constraints: WordConstraints) -> bool:
    """Full match: checks 1-3 plus global denial."""
    return (
        matches_position_constraints(word, constraints)
        and has_no_denied_characters(word, constraints.denied_chars)
    )


matches_all_constraints = matches
