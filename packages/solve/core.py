"""
Solve orchestrator.

- iter_matches: run a candidate stream through the constraint checks and the
                optional dictionary oracle, lazily.
- solve:        pick candidates from a word source and collect the matches
                into a SolveResult.

Pipeline per candidate (cheapest and most selective checks first):
  1) required presence
  2) known positions
  3) rejected positions
  4) dictionary.check(word), only if a dictionary was given

Denied letters never reach this loop: every word source excludes them.

These functions are UI-agnostic so the CLI, the HTTP API, or a notebook can
call them unchanged. Oracle and word-list failures propagate as their own
exception types; matching nothing is a normal result.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Union

from packages.dictionary.base import BaseDictionary
from packages.engine.constraints import (
    WordConstraints,
    has_all_required_characters,
    has_correct_known_positions,
    has_valid_rejected_positions,
)
from packages.sources import BaseWordSource, create_source

log = logging.getLogger(__name__)


@dataclass
class SolveResult:
    """Outcome of one solve. `words` keeps the order candidates were produced in."""
    words: List[str]
    constraints: WordConstraints
    success: bool = True
    count: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.count = len(self.words)

    def to_dict(self) -> Dict:
        return {
            "success": self.success,
            "count": self.count,
            "words": list(self.words),
            "constraints": self.constraints.to_dict(),
        }


def iter_matches(
        candidates: Iterable[str],
        constraints: WordConstraints,
        dictionary: Optional[BaseDictionary] = None,
) -> Iterator[str]:
    """
    Yield the candidates that pass every check, in input order.
    """
    accepted = constraints.accepted_chars
    known = constraints.known_positions
    rejected = constraints.rejected_positions

    for w in candidates:
        if not has_all_required_characters(w, accepted):
            continue
        if not has_correct_known_positions(w, known):
            continue
        if not has_valid_rejected_positions(w, rejected):
            continue
        # Oracle last: by far the most expensive check
        if dictionary is not None and not dictionary.check(w):
            continue
        yield w


def solve(
        constraints: WordConstraints,
        source: Union[BaseWordSource, str],
        dictionary: Optional[BaseDictionary] = None,
        *,
        limit: Optional[int] = None,
) -> SolveResult:
    """
    Find every word consistent with `constraints`.

    Args:
        constraints: validated WordConstraints (see packages.engine.normalize)
        source:      a BaseWordSource, or a registered source id
        dictionary:  oracle applied last; omit it for pre-validated word lists
        limit:       stop after this many matches (None = all, must be >= 0)

    Returns:
        SolveResult(success=True, words, count, constraints)

    Raises:
        DictionaryUnavailableError / WordListUnavailableError from the
        oracle or the source, untouched.
    """
    if isinstance(source, str):
        source = create_source(source)

    if limit is not None and limit < 0:
        raise ValueError(f"limit must be >= 0; got {limit}")

    t0 = time.perf_counter()
    words: List[str] = []
    if limit != 0:
        for w in iter_matches(source.candidates(constraints), constraints, dictionary):
            words.append(w)
            if limit is not None and len(words) >= limit:
                break

    log.debug("solve(source=%s) -> %d words in %.1f ms",
              source.id, len(words), (time.perf_counter() - t0) * 1000.0)
    return SolveResult(words=words, constraints=constraints)
