"""Shared types and helpers for turning distances and similarities into suggestions."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

DistanceAlgorithm = Callable[[str, str], int]
SimilarityAlgorithm = Callable[[str, str], float]

__all__ = [
    "DistanceAlgorithm",
    "SimilarityAlgorithm",
    "Suggestion",
    "calculate_similarity",
    "suggest_word",
    "suggest_word_with_threshold",
]


@dataclass(frozen=True)
class Suggestion:
    """A suggested word and how confident the suggestion is (0 to 1)."""

    likelihood: float
    word: str


def calculate_similarity(
    input_string: str, target_string: str, algorithm: DistanceAlgorithm
) -> float:
    """Turn an edit distance into a similarity between 0 and 1.

    The distance is normalised by the combined length of both strings.
    Identical strings always score 1 without running the algorithm.
    """
    if input_string == target_string:
        return 1.0
    distance = algorithm(input_string, target_string)
    normalized = distance / (len(input_string) + len(target_string))
    return 1.0 - normalized


def suggest_word(
    input_string: str, valid_strings: Iterable[str], algorithm: SimilarityAlgorithm
) -> Suggestion:
    """Return the valid string most similar to ``input_string``.

    The first string with the strictly highest positive score wins. When no
    string scores above zero the suggestion is an empty word with likelihood 0.
    """
    best_ratio = 0.0
    best_word = ""
    for candidate in valid_strings:
        likelihood = algorithm(input_string, candidate)
        if likelihood > best_ratio:
            best_ratio = likelihood
            best_word = candidate
    return Suggestion(best_ratio, best_word)


def suggest_word_with_threshold(
    input_string: str,
    valid_strings: Iterable[str],
    threshold: float,
    algorithm: SimilarityAlgorithm,
) -> str:
    """Return the best suggestion, or an empty string if it does not beat ``threshold``."""
    suggested = suggest_word(input_string, valid_strings, algorithm)
    if suggested.likelihood > threshold:
        return suggested.word
    return ""