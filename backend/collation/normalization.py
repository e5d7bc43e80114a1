"""
Word Normalization Strategies
=============================

Default canonizer and comparator used when a word is built. Callers may
substitute any callable that maps a string to a string.
"""

import unicodedata
from typing import Protocol


class NormalizationStrategy(Protocol):
    """A pure ``str -> str`` transformation applied to word content"""

    def __call__(self, word: str) -> str:
        ...


def lowercase_canonizer(word: str) -> str:
    """Default canonical form: locale-independent lower case"""
    return word.lower()


def unicode_normalize(word: str) -> str:
    """
    Default comparison form: strip accents from the lower-cased word.

    Each character is decomposed on its own (NFKD) and only the first code
    point of the decomposition is kept, so combining marks drop out and
    compatibility variants fold to their base letter. The kept code point is
    lower-cased again because compatibility decompositions such as "ℌ" can
    yield capitals.
    """
    return "".join(unicodedata.normalize("NFKD", char)[0].lower() for char in word.lower())
