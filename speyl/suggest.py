"""Top-level helpers for suggesting the closest word from a corpus."""

from __future__ import annotations

from collections.abc import Iterable

from .jaro import jaro_similarity
from .utilities import SimilarityAlgorithm, Suggestion
from .utilities import suggest_word as _suggest_with

__all__ = ["suggest_word", "suggest_word_with_specific_algorithm"]


def suggest_word_with_specific_algorithm(
    word: str, valid_words: Iterable[str], algorithm: SimilarityAlgorithm
) -> Suggestion:
    """Suggest the valid word most similar to ``word`` using ``algorithm``."""
    return _suggest_with(word, valid_words, algorithm)


def suggest_word(word: str, valid_words: Iterable[str]) -> Suggestion:
    """Suggest the valid word most similar to ``word`` using Jaro similarity.

    The first word with the strictly highest positive score wins. If no word
    scores above zero, the suggestion is an empty word with likelihood 0.
    """
    return _suggest_with(word, valid_words, jaro_similarity)