"""Jaro similarity of two strings."""

from __future__ import annotations

__all__ = ["jaro_similarity"]


def jaro_similarity(input_string: str, target_string: str) -> float:
    """Jaro similarity between 0 (nothing in common) and 1 (identical).

    Accounts for matching characters within a window and for transpositions.
    """
    if input_string == target_string:
        return 1.0

    input_length = len(input_string)
    target_length = len(target_string)
    window = max(input_length, target_length) // 2 - 1

    input_matched = [False] * input_length
    target_matched = [False] * target_length
    matches = 0

    for i, char in enumerate(input_string):
        start = max(0, i - window)
        end = min(target_length, i + window + 1)
        for j in range(start, end):
            if not target_matched[j] and target_string[j] == char:
                input_matched[i] = True
                target_matched[j] = True
                matches += 1
                break

    if matches == 0:
        return 0.0

    transpositions = _count_transpositions(
        input_string, target_string, input_matched, target_matched
    )
    return (
        matches / input_length
        + matches / target_length
        + (matches - transpositions) / matches
    ) / 3.0


def _count_transpositions(
    input_string: str,
    target_string: str,
    input_matched: list[bool],
    target_matched: list[bool],
) -> int:
    """Half the number of matched characters that appear out of order."""
    input_chars = (c for c, hit in zip(input_string, input_matched) if hit)
    target_chars = (c for c, hit in zip(target_string, target_matched) if hit)
    mismatched = sum(a != b for a, b in zip(input_chars, target_chars))
    return mismatched // 2