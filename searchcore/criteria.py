"""Ranking criteria that order candidate documents two at a time."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, Protocol

from searchcore.ranking import (
    matches_proximity,
    number_exact_matches,
    number_of_query_words,
    sum_matches_attribute_index,
    sum_matches_attributes,
    sum_matches_typos,
)


class RankedDocument(Protocol):
    """What a criterion reads from a candidate document.

    The match columns are sorted by query index and all have the same length.
    """

    id: Any
    query_index: Sequence[int]
    distance: Sequence[int]
    attribute: Sequence[int]
    word_index: Sequence[int]
    is_exact: Sequence[bool]
    fields_counts: Mapping[int, int] | Iterable[tuple[int, int]]


def _compare(lhs: Any, rhs: Any) -> int:
    return (lhs > rhs) - (lhs < rhs)


class Criterion(ABC):
    """Orders two documents: negative puts ``lhs`` first, positive ``rhs``."""

    @abstractmethod
    def evaluate(self, lhs: RankedDocument, rhs: RankedDocument) -> int:
        """Return -1, 0 or 1 depending on which document ranks first."""

    def name(self) -> str:
        """Name of the criterion."""
        return type(self).__name__

    def eq(self, lhs: RankedDocument, rhs: RankedDocument) -> bool:
        """Tell whether this criterion cannot separate the two documents."""
        return self.evaluate(lhs, rhs) == 0

    def __repr__(self) -> str:
        return f"{self.name()}()"


class DocumentId(Criterion):
    """Lower document ids first."""

    def evaluate(self, lhs: RankedDocument, rhs: RankedDocument) -> int:
        return _compare(lhs.id, rhs.id)


class Exact(Criterion):
    """More query words matched exactly first."""

    @staticmethod
    def _score(doc: RankedDocument) -> int:
        return number_exact_matches(
            doc.query_index, doc.attribute, doc.is_exact, doc.fields_counts
        )

    def evaluate(self, lhs: RankedDocument, rhs: RankedDocument) -> int:
        return -_compare(self._score(lhs), self._score(rhs))


class NumberOfWords(Criterion):
    """More matching query words first."""

    def evaluate(self, lhs: RankedDocument, rhs: RankedDocument) -> int:
        return -_compare(
            number_of_query_words(lhs.query_index), number_of_query_words(rhs.query_index)
        )


class SumOfTypos(Criterion):
    """Fewer typos, weighted by the number of matching words, first."""

    def evaluate(self, lhs: RankedDocument, rhs: RankedDocument) -> int:
        return -_compare(
            sum_matches_typos(lhs.query_index, lhs.distance),
            sum_matches_typos(rhs.query_index, rhs.distance),
        )


class SumOfWordsAttribute(Criterion):
    """Matches in earlier attributes first."""

    def evaluate(self, lhs: RankedDocument, rhs: RankedDocument) -> int:
        return _compare(
            sum_matches_attributes(lhs.query_index, lhs.attribute),
            sum_matches_attributes(rhs.query_index, rhs.attribute),
        )


class SumOfWordsPosition(Criterion):
    """Matches earlier in their attribute first."""

    def evaluate(self, lhs: RankedDocument, rhs: RankedDocument) -> int:
        return _compare(
            sum_matches_attribute_index(lhs.query_index, lhs.word_index),
            sum_matches_attribute_index(rhs.query_index, rhs.word_index),
        )


class WordsProximity(Criterion):
    """Query words found close together first."""

    @staticmethod
    def _score(doc: RankedDocument) -> int:
        return matches_proximity(doc.query_index, doc.distance, doc.attribute, doc.word_index)

    def evaluate(self, lhs: RankedDocument, rhs: RankedDocument) -> int:
        return _compare(self._score(lhs), self._score(rhs))


class Criteria:
    """An ordered list of criteria, the most important first."""

    def __init__(self, criteria: Iterable[Criterion] = ()) -> None:
        self._criteria = list(criteria)

    @classmethod
    def default(cls) -> Criteria:
        """The standard ranking rules."""
        return (
            CriteriaBuilder()
            .add(SumOfTypos())
            .add(NumberOfWords())
            .add(WordsProximity())
            .add(SumOfWordsAttribute())
            .add(SumOfWordsPosition())
            .add(Exact())
            .add(DocumentId())
            .build()
        )

    def __iter__(self) -> Iterator[Criterion]:
        return iter(self._criteria)

    def __len__(self) -> int:
        return len(self._criteria)

    def __repr__(self) -> str:
        return f"Criteria({self._criteria!r})"


class CriteriaBuilder:
    """Collects criteria in order of importance."""

    def __init__(self) -> None:
        self._criteria: list[Criterion] = []

    def add(self, criterion: Criterion) -> CriteriaBuilder:
        """Append a criterion and return the builder for chaining."""
        self.push(criterion)
        return self

    def push(self, criterion: Criterion) -> None:
        """Append a criterion."""
        if not isinstance(criterion, Criterion):
            raise TypeError(f"expected a Criterion, got {type(criterion).__name__}")
        self._criteria.append(criterion)

    def build(self) -> Criteria:
        """Freeze the collected criteria."""
        return Criteria(self._criteria)