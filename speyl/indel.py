"""Indel (insertion/deletion only) distance and similarity."""

from __future__ import annotations

from .utilities import calculate_similarity

__all__ = ["indel_distance", "indel_similarity"]


def indel_similarity(input_string: str, target_string: str) -> float:
    """Similarity between 0 and 1 based on the indel distance."""
    return calculate_similarity(input_string, target_string, indel_distance)


def indel_distance(input_string: str, target_string: str) -> int:
    """Number of insertions and deletions needed to turn one string into the other.

    Equivalent to Levenshtein distance with substitutions costing 2.
    """
    if not input_string:
        return len(target_string)
    if not target_string:
        return len(input_string)

    previous = list(range(len(target_string) + 1))
    for i, input_char in enumerate(input_string, start=1):
        current = [i]
        for j, target_char in enumerate(target_string, start=1):
            if input_char == target_char:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1]))
        previous = current
    return previous[-1]