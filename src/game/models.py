"""
Pydantic models for the game layer.

Configuration, per-guess feedback and the final game record. The logic lives
in game.py and console.py.
"""

from typing import List, Optional, Literal, Tuple
from pydantic import BaseModel, Field


# Outcome codes for a human guess
GuessCode = Literal[
    "ACCEPTED",
    "EMPTY",
    "TOO_SHORT",
    "NOT_IN_DICTIONARY",
    "ALREADY_FOUND",
    "NOT_ON_BOARD",
]
Winner = Literal["human", "computer"]


class GameConfig(BaseModel):
    """Configuration for a single game."""
    board_size: int = Field(default=4, ge=1)
    min_word_length: int = Field(default=4, ge=1)
    dictionary: Optional[str] = None  # Path to a word list; bundled list if unset
    board: Optional[str] = None  # Manual board letters, row-major
    seed: Optional[int] = None
    cubes: Optional[List[str]] = None  # Custom cube faces for random boards


class GuessResult(BaseModel):
    """Feedback on one word typed by the human player."""
    word: str
    code: GuessCode
    message: str
    points: int = 0
    path: List[Tuple[int, int]] = Field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return self.code == "ACCEPTED"


class GameResult(BaseModel):
    """Result of a complete game."""
    config: GameConfig
    board: str = ""
    human_words: List[str] = Field(default_factory=list)
    human_score: int = 0
    computer_words: List[str] = Field(default_factory=list)
    computer_score: int = 0
    winner: Optional[Winner] = None  # None is a draw
    interrupted: bool = False
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0
