from __future__ import annotations

import numpy as np
import pytest

from .distance import comparator, distance, distance_matrix, strip_combining_marks


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("bedwange", "bedvanghe", 3),
        ("swaer", "suaer", 2),
        ("the", "teh", 2),
        ("", "abc", 3),
        ("abc", "", 3),
        ("kitten", "sitting", 5),
    ],
)
def test_distance_known_pairs(a: str, b: str, expected: int) -> None:
    assert distance(a, b) == expected


@pytest.mark.parametrize("value", ["", "a", "bedwange", "εστιν"])
def test_distance_to_self_is_zero(value: str) -> None:
    assert distance(value, value) == 0


@pytest.mark.parametrize("a, b", [("bedwange", "bedvanghe"), ("swaer", "suaer"), ("", "xyz"), ("ab", "ba")])
def test_distance_is_symmetric(a: str, b: str) -> None:
    assert distance(a, b) == distance(b, a)


def test_distance_ignores_combining_marks() -> None:
    plain = "estin"
    marked = "e\u0313\u0301stin\u0301"
    assert distance(plain, marked) == distance(plain, plain) == 0
    assert distance(marked, "estn") == distance(plain, "estn")


def test_distance_triangle_inequality() -> None:
    words = ["bedwange", "bedvanghe", "bedwanghe", "swaer", "suaer", ""]
    for a in words:
        for b in words:
            for c in words:
                assert distance(a, c) <= distance(a, b) + distance(b, c)


def test_distance_is_case_sensitive() -> None:
    assert distance("A", "a") > 0


def test_distance_rejects_non_strings() -> None:
    with pytest.raises(TypeError):
        distance("abc", None)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        distance(123, "abc")  # type: ignore[arg-type]


def test_strip_combining_marks() -> None:
    assert strip_combining_marks("e\u0301te\u0300") == "ete"
    assert strip_combining_marks("plain") == "plain"


def test_comparator_matches_default_normalization() -> None:
    assert comparator("abcd") == "abcd"
    assert comparator("\u1f1c\u03c3\u03c4\u03b9\u03bd") == "\u03b5\u03c3\u03c4\u03b9\u03bd"
    assert comparator(comparator("Caf\u00e9")) == comparator("Caf\u00e9")


def test_comparator_rejects_non_strings() -> None:
    with pytest.raises(TypeError):
        comparator(b"abcd")  # type: ignore[arg-type]


def test_distance_matrix_shape_and_values() -> None:
    matrix = distance_matrix(["bedwange", "swaer"], ["bedvanghe", "suaer", "swaer"])
    assert matrix.shape == (2, 3)
    assert matrix.dtype == np.int64
    assert matrix[0, 0] == 3
    assert matrix[1, 1] == 2
    assert matrix[1, 2] == 0


def test_distance_matrix_empty_side() -> None:
    assert distance_matrix([], ["a"]).shape == (0, 1)
