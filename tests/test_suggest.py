import pytest

from speyl.jaro import jaro_similarity
from speyl.levenshtein import levenshtein_similarity
from speyl.suggest import suggest_word, suggest_word_with_specific_algorithm
from speyl.utilities import Suggestion

VALID_WORDS = ["hi", "hello", "bonjour", "alumni"]


@pytest.mark.parametrize(
    ("word", "expected_word", "expected_likelihood"),
    [
        ("alumni", "alumni", 1.0),
        ("almni", "alumni", 0.944),
    ],
)
def test_suggest_word_matches_expected(word, expected_word, expected_likelihood):
    result = suggest_word(word, VALID_WORDS)
    assert result.word == expected_word
    assert result.likelihood == pytest.approx(expected_likelihood, abs=1e-3)


@pytest.mark.parametrize("word", ["alumni", "almni"])
def test_suggest_word_agrees_with_specific_jaro(word):
    general = suggest_word(word, VALID_WORDS)
    specific = suggest_word_with_specific_algorithm(word, VALID_WORDS, jaro_similarity)
    assert general.word == specific.word
    assert general.likelihood == specific.likelihood


def test_suggest_word_empty_corpus():
    assert suggest_word("alumni", []) == Suggestion(0.0, "")


def test_suggest_word_no_similarity_gives_empty_suggestion():
    assert suggest_word("xyz", ["abc", "def"]) == Suggestion(0.0, "")


def test_suggest_word_accepts_generator():
    result = suggest_word("almni", (w for w in VALID_WORDS))
    assert result.word == "alumni"


def test_specific_algorithm_levenshtein():
    result = suggest_word_with_specific_algorithm(
        "almni", VALID_WORDS, levenshtein_similarity
    )
    assert result.word == "alumni"
    assert result.likelihood == pytest.approx(0.909, abs=1e-3)


def test_specific_algorithm_first_of_equal_scores_wins():
    result = suggest_word_with_specific_algorithm(
        "q", ["first", "second"], lambda a, b: 0.5
    )
    assert result == Suggestion(0.5, "first")


def test_specific_algorithm_exact_match_scores_one():
    result = suggest_word_with_specific_algorithm(
        "bonjour", VALID_WORDS, levenshtein_similarity
    )
    assert result == Suggestion(1.0, "bonjour")