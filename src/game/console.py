"""Line-oriented play: the human types words, then the computer takes its turn."""

from typing import Callable, Optional

from ..solver import Board
from .cubes import generate_manual_board, generate_random_board
from .game import BoggleGame
from .models import GameConfig, GameResult
from .scoring import sort_words

InputFn = Callable[[str], str]

INTRO = """\
Welcome to Boggle!
This game is a search for words on a 2-D board of letter cubes.
The good news is that you might improve your vocabulary a bit.
The bad news is that you're probably going to lose miserably to
this little dictionary-toting hunk of silicon."""

BEGIN_PROMPT = "Press Enter to begin the game ..."
WORD_PROMPT = "Type a word (or Enter to stop): "


def ask_yes_no(prompt: str, input_fn: Optional[InputFn] = None) -> bool:
    """Ask until the answer starts with y or n."""
    input_fn = input_fn or input
    while True:
        answer = input_fn(prompt).strip().lower()
        if answer.startswith("y"):
            return True
        if answer.startswith("n"):
            return False
        print("Please type a word that begins with 'y' or 'n'.")


def prompt_board(config: GameConfig, input_fn: Optional[InputFn] = None) -> Board:
    """
    Ask whether to roll a random board or type one in.

    Manual letters are asked for again until they fit the board.
    """
    input_fn = input_fn or input
    if ask_yes_no("Generate a random board? ", input_fn):
        return generate_random_board(
            size=config.board_size, seed=config.seed, cubes=config.cubes
        )

    prompt = f"Type the {config.board_size * config.board_size} letters on the board: "
    while True:
        try:
            return generate_manual_board(input_fn(prompt), size=config.board_size)
        except ValueError:
            print("Invalid board string. Try again.")


def format_words(words) -> str:
    return "{" + ", ".join(f'"{w}"' for w in words) + "}"


def human_turn(game: BoggleGame, input_fn: Optional[InputFn] = None, verbose: bool = False) -> None:
    """
    Collect guesses until the player enters an empty line.

    An interrupt or the end of input also ends the turn and marks the game
    as interrupted.
    """
    input_fn = input_fn or input
    print("It's your turn!")

    while True:
        print(f"Your words: {format_words(sort_words(game.human_words))}")
        print(f"Your score: {game.human_score}")

        try:
            word = input_fn(WORD_PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            game.interrupted = True
            break

        if not word.strip():
            break

        result = game.guess(word)
        print(result.message)

        if result.accepted and verbose:
            print(game.board.render(highlight=result.path))
        print()

    print()


def computer_turn(game: BoggleGame) -> None:
    """Let the computer find the remaining words and announce the outcome."""
    print("It's my turn!")
    words = game.computer_turn()

    print(f"My words: {format_words(words)}")
    print(f"My score: {game.computer_score}")

    if game.winner == "computer":
        print("Ha ha ha, I destroyed you. Better luck next time, puny human!")
    elif game.winner == "human":
        print("WOW, you defeated me! Congratulations!")
    else:
        print("It's a draw. You should play again!")
    print()


def play(game: BoggleGame, input_fn: Optional[InputFn] = None, verbose: bool = False) -> GameResult:
    """
    Run one full game on the console.

    Args:
        game: A freshly created game
        input_fn: Source of player input (``input`` by default)
        verbose: Show the path of each accepted word on the board

    Returns:
        The finished game's result
    """
    print(game.board.render())
    print()

    if verbose:
        print(f"Minimum word length: {game.config.min_word_length}")
        print(f"Dictionary: {len(game.lexicon)} words")
        print("-" * 40)

    human_turn(game, input_fn=input_fn, verbose=verbose)
    computer_turn(game)

    return game.get_result()
