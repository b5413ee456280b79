# speyl

Measure how alike two strings are and pick the closest word from a list of
valid words. Useful for "did you mean ...?" suggestions.

## Installation

```
pip install speyl
```

The package has no dependencies outside the standard library.

## Suggesting a word

```python
from speyl.suggest import suggest_word, suggest_word_with_specific_algorithm
from speyl.levenshtein import levenshtein_similarity

words = ["hi", "hello", "bonjour", "alumni"]

suggestion = suggest_word("almni", words)        # uses Jaro similarity
print(suggestion.word, suggestion.likelihood)    # alumni 0.944...

suggestion = suggest_word_with_specific_algorithm("almni", words, levenshtein_similarity)
print(suggestion.word)                           # alumni
```

A `Suggestion` is a frozen dataclass holding the `word` found and its
`likelihood` (0 to 1). The first word with the strictly highest score wins.
When no word scores above 0, the word is empty and the likelihood is 0.

`speyl.utilities.suggest_word(input_string, valid_strings, algorithm)` does
the same with any similarity function. To require a minimum likelihood:

```python
from speyl.utilities import suggest_word_with_threshold
from speyl.jaro import jaro_similarity

suggest_word_with_threshold("almni", words, 0.9, jaro_similarity)  # "alumni"
suggest_word_with_threshold("xyz", words, 0.9, jaro_similarity)    # ""
```

The best word is returned only if its likelihood is strictly greater than the
threshold; otherwise the result is an empty string.

## Measures

Similarities range from 0 (nothing in common) to 1 (identical).

| Module | Distance | Similarity |
| --- | --- | --- |
| `speyl.jaro` | — | `jaro_similarity` |
| `speyl.levenshtein` | `levenshtein_distance`, `dynamic_levenshtein`, `recursive_levenshtein` | `levenshtein_similarity`, `recursive_levenshtein_similarity` |
| `speyl.levenshtein` | `damerau_levenshtein` (adjacent swaps count as one edit) | `damerau_levenshtein_similarity` |
| `speyl.indel` | `indel_distance` (insertions and deletions only) | `indel_similarity` |

```python
from speyl.levenshtein import levenshtein_distance, damerau_levenshtein
from speyl.indel import indel_distance

levenshtein_distance("abcd", "abdc")   # 2
damerau_levenshtein("abcd", "abdc")    # 1
indel_distance("alyni", "alumni")      # 3
```

A distance-based similarity is `1 - distance / (len(a) + len(b))`, computed by
`speyl.utilities.calculate_similarity`, which accepts any distance function.
Identical strings always score 1.

```python
from speyl.utilities import calculate_similarity
from speyl.levenshtein import damerau_levenshtein

calculate_similarity("convesre", "converse", damerau_levenshtein)  # 0.9375
```

`levenshtein_distance` and `dynamic_levenshtein` give the same result;
`recursive_levenshtein` computes it again by memoised recursion over string
suffixes, so very long strings can reach Python's recursion limit.
`damerau_levenshtein` is recursive in the same way.

## What it does not do

The package ships no word list: you supply the valid words yourself, for
example by reading them from a file. It has no command-line tool.