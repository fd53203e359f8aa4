"""Map query indices of synonyms and split words back onto the original query."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

_LESS, _EQUAL, _GREATER = -1, 0, 1

# (real query indices, (origin index, number of replacement words))
_Interval = tuple[range, tuple[int, int]]


def _rewrite_range_with(query: Sequence[str], span: range, words: Sequence[str]) -> bool:
    """Tell whether ``words`` can replace the ``span`` of the original query.

    Replacements that are not longer than the span, or that are already
    spelled out in the query at that place, do not rewrite it.
    """
    if len(words) <= len(span):
        return False
    original = list(query[span.start : span.start + len(words)])
    return original != list(words)


class _IntervalIndex:
    """Sorted intervals searched for the one that holds a point."""

    def __init__(self, intervals: list[_Interval]) -> None:
        self._intervals = sorted(intervals, key=lambda item: (item[0].start, item[0].stop))

    @staticmethod
    def _compare(span: range, point: int) -> int:
        if point >= span.start:
            return _EQUAL if point < span.stop else _LESS
        return _GREATER

    def query(self, point: int) -> _Interval | None:
        items = self._intervals
        if not items:
            return None
        base, size = 0, len(items)
        while size > 1:
            half = size // 2
            mid = base + half
            if self._compare(items[mid][0], point) != _GREATER:
                base = mid
            size -= half
        order = self._compare(items[base][0], point)
        position = base if order == _EQUAL else base + (order == _LESS)
        if position < len(items) and point in items[position][0]:
            return items[position]
        return None


class QueryEnhancer:
    """Gives, for each real query index, the original query indices it stands for."""

    def __init__(self, origins: list[int], intervals: list[_Interval]) -> None:
        self._origins = origins
        self._real_to_origin = _IntervalIndex(intervals)

    def replacement(self, real: int) -> range:
        """Return the range of query indices that replaces this real query index."""
        found = self._real_to_origin.query(real)
        if found is None:
            raise ValueError(f"real query index {real} has never been declared")
        span, (origin, real_length) = found

        if span.start + real_length - 1 == real:
            # ``real`` is the last word of its replacement
            count = len(span)
            new_origin = origin
            for offset, (low, high) in enumerate(pairwise(self._origins[origin:])):
                count = max(0, count - (high - low))
                if count == 0:
                    new_origin = origin + offset
                    break

            n = real - span.start
            start = self._origins[origin]
            end = self._origins[new_origin + 1]
            return range(start + n, end)

        n = real - span.start
        base = self._origins[origin]
        return range(base + n, base + n + 1)


class QueryEnhancerBuilder:
    """Collects the replacements declared for ranges of the original query."""

    def __init__(self, query: Sequence[str]) -> None:
        self._query = list(query)
        self._origins = list(range(len(self._query) + 1))
        self._real_to_origin: list[_Interval] = [
            (range(origin, origin + 1), (origin, 1)) for origin in self._origins
        ]

    def declare(self, range: range, real: int, replacement: Sequence[str]) -> None:
        """Declare that ``replacement`` words, starting at real index ``real``,
        replace the original words in ``range``."""
        span = range
        if _rewrite_range_with(self._query, span, replacement):
            offset = len(replacement) - len(span)
            previous_padding = self._origins[span.stop - 1]
            current_offset = (self._origins[span.stop] - 1) - previous_padding
            diff = max(0, offset - current_offset)
            self._origins[span.stop :] = [
                origin + diff for origin in self._origins[span.stop :]
            ]

        width = max(len(replacement), len(span))
        real_span = type(span)(real, real + width)
        self._real_to_origin.append((real_span, (span.start, len(replacement))))

    def build(self) -> QueryEnhancer:
        """Freeze the declarations into a QueryEnhancer."""
        return QueryEnhancer(list(self._origins), list(self._real_to_origin))