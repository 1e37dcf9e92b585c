from __future__ import annotations


class DictionaryUnavailableError(RuntimeError):
    """The backing data for a dictionary oracle could not be loaded."""


class BaseDictionary:
    """
    Answers "is this string a real word?".

    Subclasses load their data in __init__ and raise DictionaryUnavailableError
    if they can't, so a missing dictionary is never mistaken for "not a word".
    """
    id = "base"

    def check(self, word: str) -> bool:
        raise NotImplementedError("Override in subclass")

    def __contains__(self, word: str) -> bool:
        return self.check(word)
