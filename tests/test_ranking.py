import pytest

from searchcore.ranking import (
    EXACT_MATCH_IN_SINGLE_WORD_FIELD,
    matches_proximity,
    number_exact_matches,
    number_of_query_words,
    sum_matches_attribute_index,
    sum_matches_attributes,
    sum_matches_typos,
)


def _reverse_cmp(a, b):
    return -((a > b) - (a < b))


def _cmp(a, b):
    return (a > b) - (a < b)


# exact

def test_exact_easy_case():
    # typing "soulier"; doc0 "Soulier bleu", doc1 "souliereres rouge"
    doc0 = number_exact_matches([0], [0], [True], [(0, 2)])
    doc1 = number_exact_matches([0], [0], [False], [(0, 2)])
    assert _reverse_cmp(doc0, doc1) == -1
    assert doc0 == 1
    assert doc1 == 0


def test_exact_basic():
    # doc0 { 0. "soulier" }, doc1 { 0. "soulier bleu et blanc" }
    doc0 = number_exact_matches([0], [0], [True], [(0, 1)])
    doc1 = number_exact_matches([0], [0], [True], [(0, 4)])
    assert _reverse_cmp(doc0, doc1) == -1
    assert doc0 == EXACT_MATCH_IN_SINGLE_WORD_FIELD


def test_exact_accepts_mapping_and_counts_words_once():
    result = number_exact_matches([0, 0, 1, 2], [0, 1, 0, 0], [True, True, False, True], {0: 3, 1: 5})
    assert result == 2


def test_exact_empty():
    assert number_exact_matches([], [], [], {}) == 0


# number of words

def test_number_of_query_words_counts_runs():
    assert number_of_query_words([0, 0, 1, 2, 2]) == 3
    assert number_of_query_words([]) == 0


# typos

def test_one_typo_reference():
    doc0 = sum_matches_typos([0, 1], [0, 0])
    doc1 = sum_matches_typos([0, 1], [1, 0])
    assert _reverse_cmp(doc0, doc1) == -1


def test_no_typo():
    doc0 = sum_matches_typos([0, 1], [0, 0])
    doc1 = sum_matches_typos([0], [0])
    assert _reverse_cmp(doc0, doc1) == -1


def test_one_typo():
    doc0 = sum_matches_typos([0, 1], [0, 1])
    doc1 = sum_matches_typos([0], [0])
    assert _reverse_cmp(doc0, doc1) == -1


def test_typos_without_typos_is_thousand_per_word():
    assert sum_matches_typos([0, 1], [0, 0]) == 2000
    assert sum_matches_typos([], []) == 0


def test_typos_too_many_raises():
    with pytest.raises(ValueError):
        sum_matches_typos([0], [4])


# attributes

def test_title_vs_description():
    doc0 = sum_matches_attributes([0], [0])
    doc1 = sum_matches_attributes([0], [1])
    assert _cmp(doc0, doc1) == -1


def test_sum_attributes_uses_first_match_of_each_word():
    assert sum_matches_attributes([0, 0, 1], [2, 0, 3]) == 5


# positions

def test_words_position_easy_case():
    doc0 = sum_matches_attribute_index([0], [0])
    doc1 = sum_matches_attribute_index([0], [3])
    assert _cmp(doc0, doc1) == -1


def test_sum_positions_uses_first_match_of_each_word():
    assert sum_matches_attribute_index([0, 1, 1], [4, 2, 9]) == 6


# proximity

def test_three_different_attributes():
    query_index = [0, 1, 2, 2, 3]
    distance = [0, 0, 0, 0, 0]
    attribute = [0, 1, 1, 2, 3]
    word_index = [0, 0, 1, 0, 1]
    assert matches_proximity(query_index, distance, attribute, word_index) == 17


def test_two_different_attributes():
    query_index = [0, 0, 1, 2, 3, 3]
    distance = [0, 0, 0, 0, 0, 0]
    attribute = [0, 1, 1, 1, 0, 1]
    word_index = [0, 0, 1, 2, 1, 3]
    assert matches_proximity(query_index, distance, attribute, word_index) == 3


def test_proximity_single_or_no_word_is_zero():
    assert matches_proximity([], [], [], []) == 0
    assert matches_proximity([0], [0], [0], [5]) == 0


def test_proximity_backwards_costs_one_more():
    assert matches_proximity([0, 1], [0, 0], [0, 0], [3, 1]) == 3
    assert matches_proximity([0, 1], [0, 0], [0, 0], [1, 3]) == 2


def test_proximity_ignores_matches_with_more_typos():
    # the second word's match at position 1 has a typo and is not the best group
    assert matches_proximity([0, 1, 1], [0, 0, 1], [0, 0, 0], [0, 20, 1]) == 8