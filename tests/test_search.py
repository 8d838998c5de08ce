"""
Tests for word verification and exhaustive enumeration.

Boards used throughout:

    2x2       4x4
    A B       T E A R
    C D       S N I P
              O T A L
              R E D S

Adjacency is 8-directional, so every cell of the 2x2 board touches every other.
"""

from typing import Set

import pytest
from src.solver import (
    Board,
    Cell,
    Lexicon,
    find_all_words,
    find_word_path,
    verify_word_on_board,
)


SMALL = "ABCD"
LARGE = "TEARSNIPOTALREDS"


class SpyLexicon(Lexicon):
    """Lexicon that records every candidate it is asked about."""

    def __init__(self, words=()):
        super().__init__(words)
        self.queried: Set[str] = set()

    def contains(self, word):
        self.queried.add(word)
        return super().contains(word)


def naive_find_all_words(board: Board, lexicon: Lexicon, min_length: int) -> Set[str]:
    """Enumerate every simple path up to the longest word, with no prefix pruning."""
    max_length = max((len(w) for w in lexicon), default=0)
    found: Set[str] = set()

    def walk(cell, candidate, visited):
        if lexicon.contains(candidate) and len(candidate) >= min_length:
            found.add(candidate)
        if len(candidate) == max_length:
            return
        for neighbor in board.neighbors(*cell):
            if neighbor not in visited:
                walk(neighbor, candidate + board.letter_at(*neighbor), visited | {neighbor})

    for cell in board.positions():
        walk(cell, board.letter_at(*cell), {cell})
    return found


class TestVerifyWord:
    """Test single-word path verification."""

    def test_adjacent_pair(self):
        """Two orthogonally adjacent letters form a word."""
        assert verify_word_on_board(Board.from_string(SMALL), "AB") is True

    def test_diagonal_pair(self):
        """Diagonal cells are adjacent, so A and D connect."""
        assert verify_word_on_board(Board.from_string(SMALL), "AD") is True

    def test_full_path(self):
        """A path through every cell is found."""
        assert verify_word_on_board(Board.from_string(SMALL), "ABDC") is True

    def test_case_insensitive(self):
        """Lower-case input matches upper-case cells."""
        assert verify_word_on_board(Board.from_string(SMALL), "abd") is True

    def test_cell_reuse_rejected(self):
        """A word needing the same cell twice cannot be formed."""
        board = Board.from_string(SMALL)
        assert verify_word_on_board(board, "ABA") is False
        assert verify_word_on_board(board, "BB") is False

    def test_repeated_letter_on_distinct_cells(self):
        """Repeated letters are fine when each comes from its own cell."""
        assert verify_word_on_board(Board.from_string("AABB"), "ABBA") is True

    def test_missing_start_letter(self):
        """A word whose first letter is not on the board fails."""
        assert verify_word_on_board(Board.from_string(SMALL), "XA") is False

    def test_longer_than_board(self):
        """A path cannot be longer than the number of cells."""
        board = Board.from_string("AAAA")
        assert verify_word_on_board(board, "AAAA") is True
        assert verify_word_on_board(board, "AAAAA") is False

    def test_words_on_large_board(self):
        """Words along rows, diagonals and bends are found."""
        board = Board.from_string(LARGE)
        assert verify_word_on_board(board, "TEAR") is True
        assert verify_word_on_board(board, "NEST") is True
        assert verify_word_on_board(board, "SNIT") is True
        assert verify_word_on_board(board, "TEN") is True

    def test_unreachable_words_on_large_board(self):
        """Letters present but not connected do not form a word."""
        board = Board.from_string(LARGE)
        assert verify_word_on_board(board, "RARE") is False
        assert verify_word_on_board(board, "TREE") is False
        assert verify_word_on_board(board, "SPIN") is False

    def test_board_left_clear(self):
        """All flags are free after success and after failure."""
        board = Board.from_string(LARGE)
        assert verify_word_on_board(board, "TEAR")
        assert board.is_clear()
        assert not verify_word_on_board(board, "RARE")
        assert board.is_clear()

    def test_repeated_calls_on_same_board(self):
        """The same board instance can be reused for many checks."""
        board = Board.from_string(LARGE)
        results = [verify_word_on_board(board, w) for w in ["TEAR", "TEAR", "NEST", "RARE", "NEST"]]
        assert results == [True, True, True, False, True]


class TestFindWordPath:
    """Test the path returned for a verified word."""

    def test_first_path_row_major(self):
        """The first start cell and first neighbor order win."""
        path = find_word_path(Board.from_string(LARGE), "TEAR")
        assert path == [Cell(0, 0), Cell(0, 1), Cell(0, 2), Cell(0, 3)]

    def test_path_is_adjacent_and_unique(self):
        """Consecutive cells touch and no cell repeats."""
        board = Board.from_string(LARGE)
        path = find_word_path(board, "NEST")
        assert "".join(board.letter_at(*c) for c in path) == "NEST"
        assert len(set(path)) == len(path)
        for current, following in zip(path, path[1:]):
            assert following in board.neighbors(*current)

    def test_backtracks_past_dead_end(self):
        """A later start cell is tried when the first one leads nowhere."""
        # The first T (0,0) has no R next to it; the second T (2,1) does
        path = find_word_path(Board.from_string(LARGE), "TR")
        assert path == [Cell(2, 1), Cell(3, 0)]

    def test_not_found(self):
        """Unformable words give None."""
        assert find_word_path(Board.from_string(SMALL), "ABA") is None


class TestSingleCellBoard:
    """Test the 1x1 board."""

    def test_verify_single_letter(self):
        """Only the board's own letter verifies."""
        board = Board.from_string("A")
        assert verify_word_on_board(board, "A") is True
        assert verify_word_on_board(board, "B") is False
        assert verify_word_on_board(board, "AA") is False

    def test_enumerate_single_letter(self):
        """At most one word, and only if it meets the minimum length."""
        board = Board.from_string("A")
        lexicon = Lexicon(["A", "AA"])
        assert find_all_words(board, lexicon, 1) == {"A"}
        assert find_all_words(board, lexicon, 2) == set()


class TestFindAllWords:
    """Test exhaustive enumeration."""

    def test_small_board(self):
        """Every reachable lexicon word is found."""
        board = Board.from_string(SMALL)
        lexicon = Lexicon(["AB", "ABD", "ABDC", "CAT"])
        assert find_all_words(board, lexicon, 2) == {"AB", "ABD", "ABDC"}

    def test_min_length_filters_results(self):
        """Short words are left out."""
        board = Board.from_string(SMALL)
        lexicon = Lexicon(["AB", "ABD", "ABDC"])
        assert find_all_words(board, lexicon, 3) == {"ABD", "ABDC"}

    def test_short_prefixes_still_extended(self):
        """A long word is reached through prefixes shorter than the minimum."""
        board = Board.from_string(SMALL)
        assert find_all_words(board, Lexicon(["ABDC"]), 4) == {"ABDC"}

    def test_words_extend_past_found_words(self):
        """Finding a word does not stop its extensions from being explored."""
        board = Board.from_string(LARGE)
        lexicon = Lexicon(["TEA", "TEAR"])
        assert find_all_words(board, lexicon, 3) == {"TEA", "TEAR"}

    def test_exclude_set(self):
        """Excluded words are omitted regardless of case."""
        board = Board.from_string(SMALL)
        lexicon = Lexicon(["AB", "ABD", "ABDC"])
        assert find_all_words(board, lexicon, 2, exclude={"abd"}) == {"AB", "ABDC"}

    def test_large_board(self):
        """Only words that can be traced are reported."""
        board = Board.from_string(LARGE)
        lexicon = Lexicon(["TEAR", "NEST", "TEN", "RARE", "SNIT", "SPIN", "TREE"])
        assert find_all_words(board, lexicon, 4) == {"TEAR", "NEST", "SNIT"}
        assert find_all_words(board, lexicon, 3) == {"TEAR", "NEST", "SNIT", "TEN"}

    def test_results_in_lexicon_and_long_enough(self):
        """Nothing shorter than the minimum or outside the lexicon is returned."""
        board = Board.from_string(LARGE)
        lexicon = Lexicon(["TEA", "TEAR", "NEST", "TEN", "NET", "SENT", "TEND", "DATA"])
        found = find_all_words(board, lexicon, 4)
        assert found
        assert all(len(w) >= 4 and lexicon.contains(w) for w in found)

    def test_idempotent(self):
        """Repeated calls give identical results and leave the board clear."""
        board = Board.from_string(LARGE)
        lexicon = Lexicon(["TEAR", "NEST", "TEN", "SNIT", "TOTAL", "DATE"])
        first = find_all_words(board, lexicon, 3)
        assert board.is_clear()
        assert find_all_words(board, lexicon, 3) == first
        assert board.is_clear()

    def test_prefix_pruning(self):
        """Candidates with no dictionary continuation are not extended."""
        board = Board.from_string(SMALL)
        lexicon = SpyLexicon(["ZZZ"])
        assert find_all_words(board, lexicon, 1) == set()
        assert lexicon.queried == {"A", "B", "C", "D"}

    def test_pruning_does_not_change_results(self):
        """The pruned search agrees with an unpruned walk of every path."""
        board = Board.from_string("TEANSROTE")
        lexicon = Lexicon([
            "TEA", "TEN", "NET", "NEST", "SENT", "RATE", "TEAR", "EAST", "SEAT",
            "ONE", "TONE", "STONE", "ROTE", "NOTE", "TOE", "ART", "RAT", "STAR",
        ])
        for min_length in (1, 3, 4):
            expected = naive_find_all_words(board, lexicon, min_length)
            assert find_all_words(board, lexicon, min_length) == expected
        assert "TEA" in find_all_words(board, lexicon, 3)

    def test_empty_lexicon(self):
        """Nothing is found with an empty dictionary."""
        assert find_all_words(Board.from_string(LARGE), Lexicon(), 1) == set()


class TestPreconditions:
    """Test that malformed calls fail loudly."""

    def test_empty_word(self):
        """An empty word is a caller error, not 'not found'."""
        with pytest.raises(ValueError, match="empty"):
            verify_word_on_board(Board.from_string(SMALL), "")

    def test_non_string_word(self):
        """A word must be a string."""
        with pytest.raises(ValueError, match="string"):
            verify_word_on_board(Board.from_string(SMALL), None)

    def test_missing_lexicon(self):
        """Enumeration needs a lexicon."""
        with pytest.raises(ValueError, match="lexicon"):
            find_all_words(Board.from_string(SMALL), None, 3)

    def test_min_length_below_one(self):
        """A minimum length of zero is rejected."""
        with pytest.raises(ValueError, match="min_length"):
            find_all_words(Board.from_string(SMALL), Lexicon(["AB"]), 0)

    def test_board_mid_search(self):
        """A board with cells already in use is rejected by both searches."""
        board = Board.from_string(SMALL)
        board.set_in_use(0, 0)
        with pytest.raises(ValueError, match="in use"):
            verify_word_on_board(board, "AB")
        with pytest.raises(ValueError, match="in use"):
            find_all_words(board, Lexicon(["AB"]), 2)
