"""Letter cubes and board construction."""

import random
from typing import Dict, List, Optional

from ..solver import Board


# Classic 4x4 Boggle cubes
LETTER_CUBES: List[str] = [
    "AAEEGN", "ABBJOO", "ACHOPS", "AFFKPS",
    "AOOTTW", "CIMOTU", "DEILRX", "DELRVY",
    "DISTTY", "EEGHNW", "EEINSU", "EHRTVW",
    "EIOSST", "ELRTTY", "HIMNQU", "HLNNRZ",
]

# Big Boggle 5x5 cubes
BIG_BOGGLE_CUBES: List[str] = [
    "AAAFRS", "AAEEEE", "AAFIRS", "ADENNN", "AEEEEM",
    "AEEGMU", "AEGMNN", "AFIRSY", "BJKQXZ", "CCNSTW",
    "CEIILT", "CEILPT", "CEIPST", "DDLNOR", "DHHLOR",
    "DHHNOT", "DHLNOR", "EIIITT", "EMOTTT", "ENSSSU",
    "FIPRSY", "GORRVW", "HIPRRY", "NOOTUW", "OOOTTU",
]

CUBES_BY_SIZE: Dict[int, List[str]] = {
    4: LETTER_CUBES,
    5: BIG_BOGGLE_CUBES,
}


def generate_random_board(
    size: int = 4,
    seed: Optional[int] = None,
    cubes: Optional[List[str]] = None,
) -> Board:
    """
    Shake the cubes into the grid and roll one face of each.

    Args:
        size: Side length of the board
        seed: Optional random seed for reproducibility
        cubes: Cube faces to use instead of the standard set for `size`

    Returns:
        A new Board

    Raises:
        ValueError: If there is no cube set for the size or the cube count is wrong
    """
    if cubes is None:
        if size not in CUBES_BY_SIZE:
            raise ValueError(
                f"No standard cube set for a {size}x{size} board; pass cubes explicitly"
            )
        cubes = CUBES_BY_SIZE[size]

    if len(cubes) != size * size:
        raise ValueError(
            f"A {size}x{size} board needs {size * size} cubes, got {len(cubes)}"
        )

    rng = random.Random(seed)
    shuffled = list(cubes)
    rng.shuffle(shuffled)
    faces = [rng.choice(cube) for cube in shuffled]

    return Board(cells=[faces[i * size:(i + 1) * size] for i in range(size)])


def generate_manual_board(letters: str, size: int = 4) -> Board:
    """
    Build a board from letters typed by the user, row by row.

    Raises:
        ValueError: If the string does not hold exactly size*size letters
    """
    letters = "".join(letters.split())
    expected = size * size

    if len(letters) != expected:
        raise ValueError(f"Invalid board string: type exactly {expected} letters, got {len(letters)}")
    if not letters.isalpha():
        raise ValueError(f"Invalid board string: '{letters}' contains non-letter characters")

    return Board.from_string(letters.upper(), size=size)
