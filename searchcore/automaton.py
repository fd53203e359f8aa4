"""Query automatons: typo-tolerant matchers built from the words of a query."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

from unidecode import unidecode

_CJK_RANGES = (
    (0x1100, 0x11FF),  # Hangul Jamo
    (0x2E80, 0x2EFF),  # CJK Radicals Supplement
    (0x2F00, 0x2FDF),  # Kangxi Radicals
    (0x3000, 0x303F),  # CJK Symbols and Punctuation
    (0x3040, 0x309F),  # Hiragana
    (0x30A0, 0x30FF),  # Katakana
    (0x3100, 0x312F),  # Bopomofo
    (0x3130, 0x318F),  # Hangul Compatibility Jamo
    (0x3190, 0x319F),  # Kanbun
    (0x31A0, 0x31BF),  # Bopomofo Extended
    (0x31F0, 0x31FF),  # Katakana Phonetic Extensions
    (0x3200, 0x32FF),  # Enclosed CJK Letters and Months
    (0x3300, 0x33FF),  # CJK Compatibility
    (0x3400, 0x4DBF),  # CJK Unified Ideographs Extension A
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0xA960, 0xA97F),  # Hangul Jamo Extended-A
    (0xAC00, 0xD7AF),  # Hangul Syllables
    (0xD7B0, 0xD7FF),  # Hangul Jamo Extended-B
    (0xF900, 0xFAFF),  # CJK Compatibility Ideographs
    (0xFE30, 0xFE4F),  # CJK Compatibility Forms
    (0xFF00, 0xFFEF),  # Halfwidth and Fullwidth Forms
    (0x20000, 0x2A6DF),  # CJK Unified Ideographs Extension B
    (0x2A700, 0x2EBEF),  # CJK Unified Ideographs Extensions C-F
    (0x2F800, 0x2FA1F),  # CJK Compatibility Ideographs Supplement
)


def _is_cjk(char: str) -> bool:
    code = ord(char)
    return any(low <= code <= high for low, high in _CJK_RANGES)


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _max_distance_for(query: str) -> int:
    """Number of typos tolerated for a query, chosen from its length in bytes."""
    length = _byte_len(query)
    if length <= 4:
        return 0
    if length <= 8:
        return 1
    return 2


def _distance_row(query: str, word: str) -> list[int]:
    """Last row of the restricted Damerau-Levenshtein matrix of query against word.

    Entry ``j`` of the row is the distance between ``query`` and ``word[:j]``.
    """
    previous2: list[int] = []
    previous = list(range(len(word) + 1))
    last_q = ""
    for i, q_char in enumerate(query, start=1):
        current = [i]
        for j, w_char in enumerate(word, start=1):
            cost = 0 if q_char == w_char else 1
            best = min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost)
            if i > 1 and j > 1 and q_char == word[j - 2] and last_q == w_char:
                best = min(best, previous2[j - 2] + 1)
            current.append(best)
        previous2, previous = previous, current
        last_q = q_char
    return previous


@dataclass(frozen=True)
class LevenshteinDfa:
    """Matches words within ``max_distance`` typos of ``query``.

    Transpositions of two adjacent characters count as a single typo. A prefix
    matcher accepts any word that starts with something close to the query.
    """

    query: str
    max_distance: int
    prefix: bool = False

    def distance(self, word: str) -> int:
        """Typos between the query and the word, capped at ``max_distance + 1``."""
        row = _distance_row(self.query, word)
        found = min(row) if self.prefix else row[-1]
        return min(found, self.max_distance + 1)

    def is_match(self, word: str) -> bool:
        """Tell whether the word is within the tolerated number of typos."""
        return self.distance(word) <= self.max_distance


@lru_cache(maxsize=1024)
def _build(query: str, prefix: bool) -> LevenshteinDfa:
    return LevenshteinDfa(query, _max_distance_for(query), prefix)


def build_prefix_dfa(query: str) -> LevenshteinDfa:
    """Build a matcher for words that start close to the query."""
    return _build(query, True)


def build_dfa(query: str) -> LevenshteinDfa:
    """Build a matcher for whole words close to the query."""
    return _build(query, False)


def normalize_str(string: str) -> str:
    """Lowercase the string and, unless it holds CJK text, fold it to ASCII."""
    string = string.lower()
    if not any(_is_cjk(char) for char in string):
        string = unidecode(string)
    return string


@dataclass
class Automaton:
    """One word to look for, with its place among the query words."""

    index: int
    ngram: int
    query_len: int
    is_exact: bool
    is_prefix: bool
    query: str

    def dfa(self) -> LevenshteinDfa:
        """Matcher for this automaton's word."""
        return build_prefix_dfa(self.query) if self.is_prefix else build_dfa(self.query)

    @classmethod
    def exact(cls, index: int, ngram: int, query: str) -> Automaton:
        return cls(index, ngram, _byte_len(query), True, False, query)

    @classmethod
    def prefix_exact(cls, index: int, ngram: int, query: str) -> Automaton:
        return cls(index, ngram, _byte_len(query), True, True, query)

    @classmethod
    def non_exact(cls, index: int, ngram: int, query: str) -> Automaton:
        return cls(index, ngram, _byte_len(query), False, False, query)


@dataclass
class AutomatonGroup:
    """Automatons searched together, possibly as a phrase."""

    is_phrase_query: bool
    automatons: list[Automaton] = field(default_factory=list)

    @classmethod
    def normal(cls, automatons: list[Automaton]) -> AutomatonGroup:
        return cls(False, list(automatons))

    @classmethod
    def phrase_query(cls, automatons: list[Automaton]) -> AutomatonGroup:
        return cls(True, list(automatons))