from .constraints import (
    WordConstraints,
    has_all_required_characters,
    has_correct_known_positions,
    has_valid_rejected_positions,
    has_no_denied_characters,
    matches,
    matches_all_constraints,
    matches_position_constraints,
)
from .enumerator import ALPHABET, WORD_LENGTH, allowed_alphabet, enumerate_words, count_words
from .feedback import constraints_from_history, parse_history_arg
from .normalize import parse_constraints_from_body, parse_constraints_from_query
from .validation import clean_word, is_candidate_word

__all__ = [
    "WordConstraints",
    "has_all_required_characters",
    "has_correct_known_positions",
    "has_valid_rejected_positions",
    "has_no_denied_characters",
    "matches",
    "matches_all_constraints",
    "matches_position_constraints",
    "ALPHABET",
    "WORD_LENGTH",
    "allowed_alphabet",
    "enumerate_words",
    "count_words",
    "constraints_from_history",
    "parse_history_arg",
    "parse_constraints_from_body",
    "parse_constraints_from_query",
    "clean_word",
    "is_candidate_word",
]
