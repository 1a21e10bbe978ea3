"""
Tests for the Levenshtein edit distance used by fuzzy menu matching.
"""

import itertools

import pytest

from services.edit_distance import edit_distance

SAMPLES = ["", "a", "abc", "kitten", "sitting", "김치찌개", "김치찌게", "된장찌개", "파스타", "피자"]


@pytest.mark.parametrize("s", SAMPLES)
def test_distance_to_self_is_zero(s):
    assert edit_distance(s, s) == 0


@pytest.mark.parametrize("a,b", list(itertools.combinations(SAMPLES, 2)))
def test_distance_is_symmetric(a, b):
    assert edit_distance(a, b) == edit_distance(b, a)


def test_distance_from_empty_is_length():
    assert edit_distance("", "abc") == 3
    assert edit_distance("abc", "") == 3


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("김치찌개", "김치찌게", 1),
        ("파스타", "파스타면", 1),
        ("된장찌개", "김치찌개", 2),
        ("가나다", "라마바", 3),
    ],
)
def test_known_distances(a, b, expected):
    assert edit_distance(a, b) == expected


def test_hangul_syllables_count_as_single_characters():
    """
    Verifies:
    - One differing syllable costs 1, not the number of UTF-8 bytes
    """
    assert edit_distance("찌개", "찌게") == 1
    assert edit_distance("국", "밥") == 1


def test_triangle_inequality_holds_for_sampled_triples():
    for a, b, c in itertools.permutations(SAMPLES, 3):
        assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)
