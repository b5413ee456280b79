"""String similarity measures (Jaro, Levenshtein, Damerau-Levenshtein, Indel) and closest-word suggestions."""

__version__ = "0.1.0"
__all__ = ["indel", "jaro", "levenshtein", "suggest", "utilities"]