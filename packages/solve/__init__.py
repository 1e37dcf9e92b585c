from .core import SolveResult, iter_matches, solve
from .io import write_words_csv, write_manifest

__all__ = ["SolveResult", "iter_matches", "solve", "write_words_csv", "write_manifest"]
