"""Points awarded for found words."""

from typing import Iterable, List

# Points by word length; anything longer than the last entry scores LONG_WORD_POINTS
POINTS_BY_LENGTH = {4: 1, 5: 2, 6: 3, 7: 5}
LONG_WORD_POINTS = 11


def score(word: str) -> int:
    """Points for a single word: 3 letters or fewer score nothing."""
    length = len(word)
    if length > max(POINTS_BY_LENGTH):
        return LONG_WORD_POINTS
    return POINTS_BY_LENGTH.get(length, 0)


def total_score(words: Iterable[str]) -> int:
    return sum(score(word) for word in words)


def sort_words(words: Iterable[str]) -> List[str]:
    """Display order for a word list."""
    return sorted(words)
