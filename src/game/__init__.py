"""Boggle game layer: boards, scoring and console play."""

from .models import GameConfig, GuessResult, GameResult, GuessCode, Winner
from .cubes import LETTER_CUBES, BIG_BOGGLE_CUBES, generate_random_board, generate_manual_board
from .scoring import score, total_score, sort_words
from .game import BoggleGame, DEFAULT_DICTIONARY_FILE, load_lexicon
from .console import play, ask_yes_no, prompt_board, INTRO, BEGIN_PROMPT

__all__ = [
    "GameConfig",
    "GuessResult",
    "GameResult",
    "GuessCode",
    "Winner",
    "LETTER_CUBES",
    "BIG_BOGGLE_CUBES",
    "generate_random_board",
    "generate_manual_board",
    "score",
    "total_score",
    "sort_words",
    "BoggleGame",
    "DEFAULT_DICTIONARY_FILE",
    "load_lexicon",
    "play",
    "ask_yes_no",
    "prompt_board",
    "INTRO",
    "BEGIN_PROMPT",
]
