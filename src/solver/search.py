"""
Backtracking word search over a letter board.

Two searches share one shape: mark the current cell in use, test the letters
collected along the path, extend into every free neighbor, then clear the
mark before returning.

- find_word_path / verify_word_on_board follow a single target word and stop
  at the first complete path.
- find_all_words explores every path whose letters are still a dictionary
  prefix and collects the words it passes through.

Both leave every cell of the board free when they return.
"""

from typing import Iterable, Optional, Set

from .board import Board
from .models import Cell, Path, WordSource


def _normalize_word(word: str) -> str:
    if not isinstance(word, str):
        raise ValueError(f"Word must be a string, got {type(word).__name__}")
    if not word:
        raise ValueError("Word must not be empty")
    return word.upper()


def _require_clear(board: Board) -> None:
    if not board.is_clear():
        raise ValueError("Board has cells still marked in use; is another search running on it?")


def _trace(board: Board, word: str, candidate: str, cell: Cell, path: Path) -> Optional[Path]:
    board.set_in_use(*cell)
    path.append(cell)
    try:
        if candidate == word:
            return list(path)

        for neighbor in board.neighbors(*cell):
            if board.is_in_use(*neighbor):
                continue
            extended = candidate + board.letter_at(*neighbor)
            if word.startswith(extended):
                found = _trace(board, word, extended, neighbor, path)
                if found is not None:
                    return found

        return None
    finally:
        path.pop()
        board.clear_in_use(*cell)


def find_word_path(board: Board, word: str) -> Optional[Path]:
    """
    Find a path of adjacent, non-repeating cells spelling `word`.

    Start cells are tried row by row and the first complete path wins.

    Returns:
        The cells of the path in order, or None if the word cannot be formed

    Raises:
        ValueError: If the word is empty or the board is mid-search
    """
    word = _normalize_word(word)
    _require_clear(board)

    for cell in board.positions():
        start = board.letter_at(*cell)
        if start == word[0]:
            path = _trace(board, word, start, cell, [])
            if path is not None:
                return path

    return None


def verify_word_on_board(board: Board, word: str) -> bool:
    """True if `word` can be traced on the board. There is no minimum length."""
    return find_word_path(board, word) is not None


def _explore(
    board: Board,
    lexicon: WordSource,
    min_length: int,
    exclude: Set[str],
    candidate: str,
    cell: Cell,
    found: Set[str],
) -> None:
    board.set_in_use(*cell)
    try:
        if (
            lexicon.contains(candidate)
            and len(candidate) >= min_length
            and candidate not in exclude
        ):
            found.add(candidate)

        # No word starts with this path, so no extension can reach one
        if not lexicon.contains_prefix(candidate):
            return

        for neighbor in board.neighbors(*cell):
            if not board.is_in_use(*neighbor):
                _explore(
                    board, lexicon, min_length, exclude,
                    candidate + board.letter_at(*neighbor), neighbor, found,
                )
    finally:
        board.clear_in_use(*cell)


def find_all_words(
    board: Board,
    lexicon: WordSource,
    min_length: int,
    exclude: Iterable[str] = (),
) -> Set[str]:
    """
    Find every lexicon word that can be traced on the board.

    Words shorter than `min_length` or listed in `exclude` are left out of the
    result, but the paths through them are still extended.

    Args:
        board: Board to search; left fully free afterwards
        lexicon: Anything answering contains / contains_prefix
        min_length: Shortest word to report
        exclude: Words already claimed (e.g. by the human player)

    Returns:
        The set of words found, upper case

    Raises:
        ValueError: On a missing lexicon, min_length below 1, or a board mid-search
    """
    if lexicon is None:
        raise ValueError("A lexicon is required to enumerate words")
    if min_length < 1:
        raise ValueError(f"min_length must be at least 1, got {min_length}")
    _require_clear(board)

    excluded = {word.upper() for word in exclude}
    found: Set[str] = set()

    for cell in board.positions():
        _explore(board, lexicon, min_length, excluded, board.letter_at(*cell), cell, found)

    return found
