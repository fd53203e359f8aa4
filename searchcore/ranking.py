"""Scores that ranking criteria compute from the matches of one document.

Every function takes the match columns of a document, sorted by query index,
and groups consecutive matches that share the same query index.
"""

from __future__ import annotations

import struct
from collections.abc import Iterable, Mapping, Sequence
from itertools import groupby, pairwise

EXACT_MATCH_IN_SINGLE_WORD_FIELD = 2**64 - 1
"""Score of a document with an exact match that fills a whole one-word field."""

MAX_DISTANCE = 8

_TYPO_LOG10 = (0.0, 0.30102, 0.47712, 0.60205)


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _group_lengths(values: Iterable[int]) -> list[int]:
    """Lengths of the runs of consecutive equal values."""
    return [sum(1 for _ in run) for _, run in groupby(values)]


def _group_starts(query_index: Sequence[int]) -> list[tuple[int, int]]:
    """(start, length) of every run of equal query indices."""
    spans = []
    start = 0
    for length in _group_lengths(query_index):
        spans.append((start, length))
        start += length
    return spans


def number_exact_matches(
    query_index: Sequence[int],
    attribute: Sequence[int],
    is_exact: Sequence[bool],
    fields_counts: Mapping[int, int] | Iterable[tuple[int, int]],
) -> int:
    """Count the query words that have at least one exact match.

    If an exact match lies in a field that holds a single word, the document
    gets the highest possible score.
    """
    counts = dict(fields_counts.items() if isinstance(fields_counts, Mapping) else fields_counts)
    count = 0
    for start, length in _group_starts(query_index):
        found_exact = False
        for position in range(start, start + length):
            if is_exact[position]:
                found_exact = True
                if counts.get(attribute[position]) == 1:
                    return EXACT_MATCH_IN_SINGLE_WORD_FIELD
        count += found_exact
    return count


def number_of_query_words(query_index: Sequence[int]) -> int:
    """Count the distinct query words that matched."""
    return len(_group_lengths(query_index))


def _custom_log10(typos: int) -> float:
    """An approximate log10(typos + 1), defined up to three typos."""
    if not 0 <= typos < len(_TYPO_LOG10):
        raise ValueError(f"invalid number of typos: {typos}")
    return _TYPO_LOG10[typos]


def sum_matches_typos(query_index: Sequence[int], distance: Sequence[int]) -> int:
    """Score the typos of the best match of every query word; higher is better."""
    number_words = 0
    sum_typos = 0.0
    for start, _ in _group_starts(query_index):
        sum_typos = _f32(sum_typos + _f32(_custom_log10(distance[start])))
        number_words += 1
    ratio = _f32(_f32(float(number_words)) / _f32(sum_typos + 1.0))
    return int(_f32(ratio * 1000.0))


def sum_matches_attributes(query_index: Sequence[int], attribute: Sequence[int]) -> int:
    """Sum the attributes of the best match of every query word."""
    return sum(attribute[start] for start, _ in _group_starts(query_index))


def sum_matches_attribute_index(query_index: Sequence[int], word_index: Sequence[int]) -> int:
    """Sum the word positions of the best match of every query word."""
    return sum(word_index[start] for start, _ in _group_starts(query_index))


def _index_proximity(lhs: int, rhs: int) -> int:
    if lhs < rhs:
        return min(rhs - lhs, MAX_DISTANCE)
    return min(lhs - rhs, MAX_DISTANCE) + 1


def _attribute_proximity(left: tuple[int, int], right: tuple[int, int]) -> int:
    (lattr, lwi), (rattr, rwi) = left, right
    if lattr != rattr:
        return MAX_DISTANCE
    return _index_proximity(lwi, rwi)


def _min_proximity(
    left: list[tuple[int, int]], right: list[tuple[int, int]]
) -> int:
    return min(_attribute_proximity(a, b) for a in left for b in right)


def matches_proximity(
    query_index: Sequence[int],
    distance: Sequence[int],
    attribute: Sequence[int],
    word_index: Sequence[int],
) -> int:
    """Sum the proximities between consecutive query words; lower is better.

    For each query word only the matches with the lowest typo count are used.
    """
    positions = []
    for start, length in _group_starts(query_index):
        best = _group_lengths(distance[start : start + length])[0]
        positions.append(
            list(zip(attribute[start : start + best], word_index[start : start + best]))
        )
    return sum(_min_proximity(lhs, rhs) for lhs, rhs in pairwise(positions))