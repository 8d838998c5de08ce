import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Any
from pydantic import BaseModel, Field, ConfigDict

from ..solver import Board, Lexicon, find_word_path, find_all_words
from .cubes import generate_random_board, generate_manual_board
from .models import GameConfig, GameResult, GuessResult, Winner
from .scoring import score, total_score, sort_words


# Word list shipped with the package
DEFAULT_DICTIONARY_FILE = Path(__file__).parent / "data" / "words.txt"


def load_lexicon(path: Optional[str | Path] = None) -> Lexicon:
    """Load the word list at `path`, or the bundled one."""
    return Lexicon.from_file(path or DEFAULT_DICTIONARY_FILE)


class BoggleGame(BaseModel):
    """
    One round of Boggle: the human guesses, then the computer sweeps the board.

    The computer's turn finds every dictionary word the human missed, so the
    human's words are excluded from its search.

    Attributes:
        config: Game configuration
        board: The letter grid
        lexicon: Dictionary used for guesses and for the computer's search
        human_words: Words accepted from the human, in the order found
        computer_words: Words found by the computer, sorted
        is_complete: Whether the computer has played
        interrupted: Whether the human turn was cut short by an interrupt or end of input
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    board: Board
    lexicon: Lexicon
    human_words: List[str] = Field(default_factory=list)
    human_score: int = 0
    computer_words: List[str] = Field(default_factory=list)
    computer_score: int = 0
    is_complete: bool = False
    interrupted: bool = False
    started_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        lexicon: Optional[Lexicon] = None,
        board: Optional[Board] = None,
        **config_kwargs: Any
    ) -> "BoggleGame":
        """
        Factory method to set up a game from its configuration.

        Args:
            config: Optional GameConfig instance
            lexicon: Dictionary to use instead of loading config.dictionary
            board: Board to play on instead of building one from the config
            **config_kwargs: Config parameters if config not provided

        Returns:
            A new BoggleGame with its board built
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        if board is None and config.board:
            board = generate_manual_board(config.board, size=config.board_size)
        elif board is None:
            board = generate_random_board(
                size=config.board_size, seed=config.seed, cubes=config.cubes
            )

        if lexicon is None:
            lexicon = load_lexicon(config.dictionary)

        return cls(config=config, board=board, lexicon=lexicon)

    def guess(self, word: str) -> GuessResult:
        """
        Check a word typed by the human and record it if it counts.

        Checks run in order: empty, too short, not a dictionary word, already
        found, not traceable on the board.

        Raises:
            RuntimeError: If the computer has already played
        """
        if self.is_complete:
            raise RuntimeError("The game is over; no more guesses are accepted")

        word = word.strip().upper()
        min_length = self.config.min_word_length

        if not word:
            return GuessResult(word=word, code="EMPTY", message="No word entered.")

        if len(word) < min_length:
            return GuessResult(
                word=word,
                code="TOO_SHORT",
                message=f"The word must have at least {min_length} letters.",
            )

        if not self.lexicon.contains(word):
            return GuessResult(
                word=word,
                code="NOT_IN_DICTIONARY",
                message="That word is not found in the dictionary.",
            )

        if word in self.human_words:
            return GuessResult(
                word=word,
                code="ALREADY_FOUND",
                message="You have already found that word.",
            )

        path = find_word_path(self.board, word)
        if path is None:
            return GuessResult(
                word=word,
                code="NOT_ON_BOARD",
                message="That word can't be formed on this board.",
            )

        points = score(word)
        self.human_words.append(word)
        self.human_score += points

        return GuessResult(
            word=word,
            code="ACCEPTED",
            message=f'You found a new word! "{word}"',
            points=points,
            path=[tuple(cell) for cell in path],
        )

    def computer_turn(self) -> List[str]:
        """
        Find every remaining word on the board and end the game.

        Returns:
            The computer's words, sorted
        """
        words = find_all_words(
            self.board,
            self.lexicon,
            min_length=self.config.min_word_length,
            exclude=self.human_words,
        )

        self.computer_words = sort_words(words)
        self.computer_score = total_score(self.computer_words)
        self.is_complete = True
        return self.computer_words

    @property
    def winner(self) -> Optional[Winner]:
        """Who scored more once the game is over; None while playing or on a draw."""
        if not self.is_complete or self.human_score == self.computer_score:
            return None
        return "computer" if self.computer_score > self.human_score else "human"

    def get_result(self) -> GameResult:
        """
        Get the game record.

        Returns:
            GameResult with both players' words and scores
        """
        ended_at = datetime.now()

        return GameResult(
            config=self.config,
            board=self.board.to_string(),
            human_words=self.human_words,
            human_score=self.human_score,
            computer_words=self.computer_words,
            computer_score=self.computer_score,
            interrupted=self.interrupted,
            winner=self.winner,
            started_at=self.started_at.isoformat(),
            ended_at=ended_at.isoformat(),
            duration_seconds=(ended_at - self.started_at).total_seconds(),
        )

    def save_result(self, path: str | Path) -> None:
        """
        Save the game result to a JSON file.

        Args:
            path: Path to save the result file
        """
        result = self.get_result()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(result.model_dump(), f, indent=2, default=str)
