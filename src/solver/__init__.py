"""Word search engine for Boggle boards."""

from .board import Board
from .lexicon import Lexicon
from .models import Cell, Path, WordSource, NEIGHBOR_OFFSETS
from .search import find_word_path, verify_word_on_board, find_all_words

__all__ = [
    # Board
    "Board",
    "Cell",
    "Path",
    "NEIGHBOR_OFFSETS",
    # Dictionary
    "Lexicon",
    "WordSource",
    # Search
    "find_word_path",
    "verify_word_on_board",
    "find_all_words",
]
