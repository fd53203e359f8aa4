# searchcore

Pure-Python building blocks for a typo-tolerant search engine:

- `searchcore.levenshtein.prefix_damerau_levenshtein`: Damerau–Levenshtein
  distance between a query and the best-matching prefix of a word. It takes
  `bytes` or `str` (encoded as UTF-8) and returns `(distance, length)`, the
  length counted in bytes of the target. A source longer than the target
  raises `ValueError`.
- `searchcore.automaton`: typo-tolerant matchers (`build_dfa`,
  `build_prefix_dfa`, returning a `LevenshteinDfa` with `distance` and
  `is_match`), query normalisation (`normalize_str`) and the `Automaton` /
  `AutomatonGroup` descriptions of query words. The number of typos tolerated
  depends on the query's length in bytes: none up to 4, one up to 8, two
  beyond.
- `searchcore.query_enhancer`: `QueryEnhancerBuilder` and `QueryEnhancer` map
  the query indices of synonyms and alternative spellings back onto the words
  of the original query.
- `searchcore.ranking`: the scores computed from a document's match columns
  (`number_exact_matches`, `number_of_query_words`, `sum_matches_typos`,
  `sum_matches_attributes`, `sum_matches_attribute_index`,
  `matches_proximity`).
- `searchcore.criteria`: the ranking rules built on those scores
  (`SumOfTypos`, `NumberOfWords`, `WordsProximity`, `SumOfWordsAttribute`,
  `SumOfWordsPosition`, `Exact`, `DocumentId`), `CriteriaBuilder` to combine
  them and `Criteria.default()` for the standard order.
- `searchcore.distinct_map`: `DistinctMap` and `BufferedDistinctMap` limit how
  many results share the same distinct key.
- `searchcore.number`: `parse_number` and `Number` parse and compare mixed
  unsigned, signed and float values; unparsable text raises
  `ParseNumberError`.

## Installation

```
pip install .
```

## Examples

Measure how far a query is from the start of a word:

```python
from searchcore.levenshtein import prefix_damerau_levenshtein

distance, length = prefix_damerau_levenshtein(b"Levenste", b"Levenshtein")
# distance == 1, b"Levenshtein"[:length] == b"Levenshte"
```

Match words with typos:

```python
from searchcore.automaton import build_dfa, build_prefix_dfa, normalize_str

build_dfa("levenshtein").is_match("levenstein")  # True, one typo
build_prefix_dfa("hello").is_match("helloworld")  # True
normalize_str("Éléphant")                         # "elephant"
```

Map synonym words back to the query they replace:

```python
from searchcore.query_enhancer import QueryEnhancerBuilder

builder = QueryEnhancerBuilder(["NYC", "subway"])
builder.declare(range(0, 1), 2, ["new", "york", "city"])
enhancer = builder.build()

enhancer.replacement(0)  # range(0, 3): "NYC" spans three words
enhancer.replacement(3)  # range(1, 2): "york"
```

Limit how many results share one key:

```python
from searchcore.distinct_map import DistinctMap, BufferedDistinctMap

seen = DistinctMap(2)
buffered = BufferedDistinctMap(seen)
buffered.register(1)  # True
buffered.register(1)  # True
buffered.register(1)  # False, limit reached
buffered.transfer_to_internal()
len(seen)             # 2
```

Compare numbers of different kinds:

```python
from searchcore.number import parse_number

parse_number("-3") < parse_number("2") < parse_number("2.5")  # True
```

Put together a ranking:

```python
from searchcore.criteria import Criteria, CriteriaBuilder, SumOfTypos, DocumentId

default = Criteria.default()
custom = CriteriaBuilder().add(SumOfTypos()).add(DocumentId()).build()
[criterion.name() for criterion in custom]  # ["SumOfTypos", "DocumentId"]
```

A criterion's `evaluate(lhs, rhs)` returns a negative number when `lhs`
ranks first, a positive one when `rhs` does, and 0 when it cannot tell them
apart. Documents passed to it need an `id` and the match columns
`query_index`, `distance`, `attribute`, `word_index`, `is_exact`, plus
`fields_counts`.

## What this package does not do

It holds no documents and keeps no index: there is no storage, no update
queue, no query execution over stored documents and no command-line tool.
It does not turn a whole query into automatons from a synonym dictionary or
look words up in postings lists; it provides the pieces such a search engine
is built from.

## Running the tests

```
pip install .[test]
pytest
```