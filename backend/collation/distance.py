"""
Lexical Distance
================

Comparator and edit distance used by the aligner to score candidate matches
between comparison forms.
"""

import logging
import unicodedata
from functools import lru_cache
from typing import Sequence

import numpy as np

from .collation_config import DISTANCE_CACHE_SIZE, EDIT_COSTS
from .normalization import unicode_normalize

logger = logging.getLogger(__name__)


def _require_str(value, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")


def comparator(word: str) -> str:
    """Reduce a string to its accent-insensitive, lower-cased comparison key"""
    _require_str(word, "word")
    return unicode_normalize(word)


def strip_combining_marks(text: str) -> str:
    """Drop every code point in the Unicode combining mark categories (Mn, Mc, Me)"""
    return "".join(char for char in text if not unicodedata.category(char).startswith("M"))


def distance(a: str, b: str) -> int:
    """
    Edit distance between two comparison forms.

    Combining marks are removed from both strings before scoring, so a
    stray accent on either side costs nothing. Costs come from
    ``EDIT_COSTS``; there is no transposition discount.
    """
    _require_str(a, "a")
    _require_str(b, "b")
    return _edit_distance(strip_combining_marks(a), strip_combining_marks(b),
                          EDIT_COSTS["indel"], EDIT_COSTS["substitution"])


@lru_cache(maxsize=DISTANCE_CACHE_SIZE)
def _edit_distance(s1: str, s2: str, indel: int, substitution: int) -> int:
    """Wagner-Fischer distance, one row at a time"""
    if len(s1) < len(s2):
        return _edit_distance(s2, s1, indel, substitution)

    if len(s2) == 0:
        return len(s1) * indel

    previous_row = [j * indel for j in range(len(s2) + 1)]
    for i, c1 in enumerate(s1):
        current_row = [(i + 1) * indel]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + indel
            deletions = current_row[j] + indel
            substitutions = previous_row[j] + (substitution if c1 != c2 else 0)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def distance_matrix(left: Sequence[str], right: Sequence[str]) -> np.ndarray:
    """
    Pairwise distances between two lists of comparison forms.

    Returns:
        Integer array of shape (len(left), len(right)) where cell [i, j]
        holds ``distance(left[i], right[j])``.
    """
    matrix = np.zeros((len(left), len(right)), dtype=np.int64)
    for i, a in enumerate(left):
        for j, b in enumerate(right):
            matrix[i, j] = distance(a, b)
    logger.debug(f"Scored {matrix.size} candidate pairs")
    return matrix
