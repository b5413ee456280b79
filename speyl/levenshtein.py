"""Levenshtein and Damerau-Levenshtein distances and similarities."""

from __future__ import annotations

from functools import lru_cache

from .utilities import calculate_similarity

__all__ = [
    "damerau_levenshtein",
    "damerau_levenshtein_similarity",
    "dynamic_levenshtein",
    "levenshtein_distance",
    "levenshtein_similarity",
    "recursive_levenshtein",
    "recursive_levenshtein_similarity",
]


def levenshtein_similarity(input_string: str, target_string: str) -> float:
    """Similarity between 0 and 1 based on the Levenshtein distance."""
    return calculate_similarity(input_string, target_string, levenshtein_distance)


def levenshtein_distance(input_string: str, target_string: str) -> int:
    """Levenshtein distance (insertions, deletions and substitutions)."""
    return dynamic_levenshtein(input_string, target_string)


def recursive_levenshtein(input_string: str, target_string: str) -> int:
    """Levenshtein distance computed by recursion over string suffixes."""

    @lru_cache(maxsize=None)
    def distance(i: int, j: int) -> int:
        if i == len(input_string):
            return len(target_string) - j
        if j == len(target_string):
            return len(input_string) - i
        if input_string[i] == target_string[j]:
            return distance(i + 1, j + 1)
        return 1 + min(
            distance(i, j + 1),  # insert
            distance(i + 1, j),  # delete
            distance(i + 1, j + 1),  # substitute
        )

    return distance(0, 0)


def recursive_levenshtein_similarity(input_string: str, target_string: str) -> float:
    """Similarity between 0 and 1 using the recursive Levenshtein distance."""
    return calculate_similarity(input_string, target_string, recursive_levenshtein)


def dynamic_levenshtein(input_string: str, target_string: str) -> int:
    """Levenshtein distance using the Wagner-Fischer dynamic programme."""
    previous = list(range(len(target_string) + 1))
    for i, input_char in enumerate(input_string, start=1):
        current = [i]
        for j, target_char in enumerate(target_string, start=1):
            if input_char == target_char:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(current[j - 1], previous[j], previous[j - 1]))
        previous = current
    return previous[-1]


def damerau_levenshtein(input_string: str, target_string: str) -> int:
    """Levenshtein distance that also counts swapping adjacent characters as one edit."""

    @lru_cache(maxsize=None)
    def distance(i: int, j: int) -> int:
        a = input_string[i:]
        b = target_string[j:]
        if not a:
            return len(b)
        if not b:
            return len(a)
        if a[0] == b[0]:
            return distance(i + 1, j + 1)

        best = 1 + min(
            distance(i, j + 1),  # insert
            distance(i + 1, j),  # delete
            distance(i + 1, j + 1),  # substitute
        )
        if len(a) > 1 and len(b) > 1 and a[0] == b[1] and a[1] == b[0]:
            best = min(best, 1 + distance(i + 2, j + 2))
        return best

    return distance(0, 0)


def damerau_levenshtein_similarity(input_string: str, target_string: str) -> float:
    """Similarity between 0 and 1 based on the Damerau-Levenshtein distance."""
    return calculate_similarity(input_string, target_string, damerau_levenshtein)