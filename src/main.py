"""
Main entry point for playing Boggle on the console.

Usage:
    python -m src.main
    python -m src.main config.yaml --verbose
    python -m src.main --board PTOESANISGRETAHT --solve
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

import yaml

from .game import (
    BEGIN_PROMPT,
    INTRO,
    BoggleGame,
    GameConfig,
    ask_yes_no,
    load_lexicon,
    play,
    prompt_board,
    score,
)
from .solver import Lexicon


def load_config(config_path: Optional[str] = None, **overrides) -> GameConfig:
    """Load game configuration from a YAML file, then apply overrides."""
    data = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

    data.update({key: value for key, value in overrides.items() if value is not None})
    return GameConfig(**data)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Boggle against the computer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  board_size: 4
  min_word_length: 4
  seed: 42
  dictionary: words.txt
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--board", "-b",
        help="Board letters in row-major order (random board if omitted)"
    )
    parser.add_argument(
        "--size", "-n",
        type=int,
        dest="board_size",
        help="Board side length"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for board generation"
    )
    parser.add_argument(
        "--dictionary", "-d",
        help="Path to a word list with one word per line"
    )
    parser.add_argument(
        "--min-length",
        type=int,
        dest="min_word_length",
        help="Minimum word length"
    )
    parser.add_argument(
        "--solve",
        action="store_true",
        help="Skip the human turn and list every word on the board"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the game result JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print extra detail, including the path of each accepted word"
    )
    return parser


def solve(game: BoggleGame) -> None:
    """Print the board and every word on it with its points."""
    print(game.board.render())
    print()

    words = game.computer_turn()
    for word in words:
        print(f"{word:<16} {score(word)}")

    print()
    print(f"{len(words)} words, {game.computer_score} points")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(
            args.config,
            board=args.board,
            board_size=args.board_size,
            seed=args.seed,
            dictionary=args.dictionary,
            min_word_length=args.min_word_length,
        )
        lexicon: Lexicon = load_lexicon(config.dictionary)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Config: {args.config or '(defaults)'}")
        print(f"Dictionary: {config.dictionary or 'bundled'} ({len(lexicon)} words)")
        print()

    game_number = 0
    try:
        if not args.solve:
            print(INTRO)
            print()
            input(BEGIN_PROMPT)

        while True:
            # Advance a fixed seed so later rounds get new boards
            round_config = config
            if config.seed is not None and game_number > 0:
                round_config = config.model_copy(update={"seed": config.seed + game_number})

            # Without --board the player picks a random or typed board each round
            board = None
            if not args.solve and not config.board:
                print()
                board = prompt_board(round_config)

            try:
                game = BoggleGame.create(config=round_config, lexicon=lexicon, board=board)
            except ValueError as e:
                print(f"Error creating board: {e}", file=sys.stderr)
                return 1

            if args.solve:
                solve(game)
            else:
                play(game, verbose=args.verbose)

            if args.output:
                output_path = Path(args.output)
                if game_number > 0:
                    output_path = output_path.with_name(f"{output_path.stem}_{game_number + 1}{output_path.suffix}")
                game.save_result(output_path)
                if args.verbose:
                    print(f"Results saved to: {output_path}")

            game_number += 1
            # A board from --board, a one-shot solve or an interrupted game is played once
            if args.solve or config.board or game.interrupted or not ask_yes_no("Play again? "):
                break
    except (EOFError, KeyboardInterrupt):
        print("\nGame interrupted")

    print("Have a nice day.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
