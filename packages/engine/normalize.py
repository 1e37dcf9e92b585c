"""
Turn untrusted input into a well-formed WordConstraints.

Two entry shapes:
  - parse_constraints_from_body : a decoded JSON object (HTTP POST body, UI state)
  - parse_constraints_from_query: flat string values (HTTP query string, CLI flags)

Invalid pieces are dropped, never raised. Only a body that isn't an object
at all yields None, so the caller can reject the request instead of solving
with no constraints.
"""

from __future__ import annotations

import json
from typing import Dict, List, Mapping, Optional

from .constraints import WordConstraints
from .enumerator import WORD_LENGTH
from .validation import clean_letter


def _position(key) -> Optional[int]:
    """Coerce a map key to a 1-indexed position in [1, WORD_LENGTH]."""
    if isinstance(key, bool):
        return None
    try:
        pos = int(str(key).strip())
    except ValueError:
        return None
    return pos if 1 <= pos <= WORD_LENGTH else None


def _letters(values) -> List[str]:
    """Keep single letters from a list; anything that isn't a list gives []."""
    if not isinstance(values, (list, tuple)):
        return []
    out = []
    for v in values:
        c = clean_letter(v)
        if c is not None:
            out.append(c)
    return out


def _known_positions(raw) -> Dict[int, str]:
    out: Dict[int, str] = {}
    if not isinstance(raw, Mapping):
        return out
    for key, value in raw.items():
        pos = _position(key)
        c = clean_letter(value)
        if pos is not None and c is not None:
            out[pos] = c
    return out


def _rejected_positions(raw) -> Dict[int, List[str]]:
    out: Dict[int, List[str]] = {}
    if not isinstance(raw, Mapping):
        return out
    for key, value in raw.items():
        pos = _position(key)
        if pos is not None and isinstance(value, (list, tuple)):
            out[pos] = _letters(value)
    return out


def parse_constraints_from_body(body) -> Optional[WordConstraints]:
    """
    Validate a structured payload with the wire field names
    (acceptedChars, deniedChars, knownPositions, rejectedPositions).

    Returns None when `body` is not an object.
    """
    if not isinstance(body, Mapping):
        return None

    return WordConstraints(
        accepted_chars=_letters(body.get("acceptedChars")),
        denied_chars=_letters(body.get("deniedChars")),
        known_positions=_known_positions(body.get("knownPositions")),
        rejected_positions=_rejected_positions(body.get("rejectedPositions")),
    )


def _split_chars(raw) -> List[str]:
    """'a, b,C' -> ['a', 'b', 'c']; empty or non-string input gives []."""
    if not isinstance(raw, str) or not raw.strip():
        return []
    return _letters([part.strip() for part in raw.split(",")])


def _json_map(raw):
    if isinstance(raw, Mapping):
        return raw
    if not isinstance(raw, str) or not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except (ValueError, RecursionError):
        # malformed JSON is dropped like any other invalid field
        return {}


def parse_constraints_from_query(query: Mapping) -> WordConstraints:
    """
    Validate flat query-style input: comma-separated char lists and
    JSON-encoded position maps. Always returns a WordConstraints (an empty
    query means "solve everything").
    """
    if not isinstance(query, Mapping):
        query = {}

    return WordConstraints(
        accepted_chars=_split_chars(query.get("acceptedChars")),
        denied_chars=_split_chars(query.get("deniedChars")),
        known_positions=_known_positions(_json_map(query.get("knownPositions"))),
        rejected_positions=_rejected_positions(_json_map(query.get("rejectedPositions"))),
    )
