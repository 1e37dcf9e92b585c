from __future__ import annotations
from typing import Dict, Iterator, List, Optional, Type

from packages.engine.constraints import WordConstraints

# ---- Global word-source registry ----
REGISTRY: Dict[str, Type["BaseWordSource"]] = {}


class WordListUnavailableError(RuntimeError):
    """A word list (file or remote) could not be obtained."""


def register(cls: Type["BaseWordSource"]) -> Type["BaseWordSource"]:
    """
    Decorator: @register on a source class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate source id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that word sources inherit ----
class BaseWordSource:
    """
    Produces five-letter candidates for a solve.

    Contract: candidates() never yields a word containing one of
    constraints.denied_chars. How that's achieved (shrinking the alphabet,
    filtering a list) is up to the source; the solve loop only runs the
    presence/position checks afterwards.
    """
    id = "base"
    name = "Base"

    # True when the candidates are already real words and need no oracle
    prevalidated = False

    def candidates(self, constraints: WordConstraints) -> Iterator[str]:
        raise NotImplementedError("Override in subclass")

    def estimate(self, constraints: WordConstraints) -> Optional[int]:
        """Upper bound on the number of candidates (None if unknown)."""
        return None


def create_source(source_id: str, **kwargs) -> BaseWordSource:
    """
    Factory: instantiate a registered source by id.
    """
    try:
        cls = REGISTRY[source_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown source id: {source_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_source_ids() -> List[str]:
    """
    Return all registered source ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
