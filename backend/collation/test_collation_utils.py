from __future__ import annotations

import pytest

from .collation_utils import ValidationError, is_punctuation, restore_punctuation, split_punctuation


@pytest.mark.parametrize("char", [".", ";", "(", "«", "¿", "։", "·", "$", "+", "~"])
def test_is_punctuation_true(char: str) -> None:
    assert is_punctuation(char)


@pytest.mark.parametrize("char", ["a", "ε", "Ա", "7", " ", "\u0301", "ß"])
def test_is_punctuation_false(char: str) -> None:
    assert not is_punctuation(char)


def test_split_punctuation_offsets() -> None:
    content, marks = split_punctuation("a,b.")
    assert content == "ab"
    assert marks == [{"char": ",", "pos": 1}, {"char": ".", "pos": 3}]


def test_restore_punctuation_rejects_offset_past_end() -> None:
    with pytest.raises(ValidationError):
        restore_punctuation("ab", [{"char": ".", "pos": 3}])
