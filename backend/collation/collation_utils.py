"""
Collation Utilities
===================

Error type and punctuation helpers shared by the word model and its schemas.
"""

import logging
import unicodedata
from typing import Dict, Iterable, List, Tuple, Union

from .collation_config import ASCII_PUNCTUATION

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Raised when a word cannot be built from the options it was given"""
    pass


def is_punctuation(char: str) -> bool:
    """
    Language-agnostic punctuation test for a single character.

    Any Unicode P* category counts, plus the ASCII symbols that the POSIX
    punct class includes.
    """
    return char in ASCII_PUNCTUATION or unicodedata.category(char).startswith("P")


def split_punctuation(text: str) -> Tuple[str, List[Dict[str, Union[str, int]]]]:
    """
    Separate punctuation from word content.

    Returns:
        Tuple of (stripped content, punctuation marks). Each mark records
        its offset in ``text`` itself, not in the stripped content.
    """
    content = []
    marks = []
    for pos, char in enumerate(text):
        if is_punctuation(char):
            marks.append({"char": char, "pos": pos})
        else:
            content.append(char)
    return "".join(content), marks


def restore_punctuation(text: str, marks: Iterable[Dict[str, Union[str, int]]]) -> str:
    """
    Re-insert punctuation marks into stripped content, lowest offset first.

    Raises:
        ValidationError: if an offset points past the end of the string
            being rebuilt.
    """
    restored = text
    for mark in sorted(marks, key=lambda m: m["pos"]):
        pos = mark["pos"]
        if pos < 0 or pos > len(restored):
            raise ValidationError(
                f"Punctuation {mark['char']!r} at offset {pos} lies outside {restored!r}"
            )
        restored = restored[:pos] + mark["char"] + restored[pos:]
    return restored
