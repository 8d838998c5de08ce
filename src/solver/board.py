"""Square letter grid with adjacency and transient in-use markers."""

import math
from typing import Iterable, Iterator, List, Optional

from pydantic import BaseModel, PrivateAttr, field_validator

from .models import Cell, NEIGHBOR_OFFSETS


class Board(BaseModel):
    """
    An N x N grid of single letters.

    Each cell also carries an "in use" flag that a search sets while the cell
    is on the current path. The flags are never serialized and a new board
    starts with every cell free.

    Attributes:
        cells: Rows of upper-case letters
    """

    cells: List[List[str]]
    _in_use: List[List[bool]] = PrivateAttr(default_factory=list)

    @field_validator("cells")
    @classmethod
    def _check_square(cls, cells: List[List[str]]) -> List[List[str]]:
        if not cells:
            raise ValueError("Board must have at least one row")

        # Upper-case first: a few letters expand, the sharp s becomes "SS"
        cells = [[letter.upper() for letter in row] for row in cells]

        size = len(cells)
        for row_idx, row in enumerate(cells):
            if len(row) != size:
                raise ValueError(
                    f"Board must be square: row {row_idx} has {len(row)} cells, expected {size}"
                )
            for col_idx, letter in enumerate(row):
                if len(letter) != 1 or not letter.isalpha():
                    raise ValueError(
                        f"Invalid cell {letter!r} at ({row_idx}, {col_idx}): expected a single letter"
                    )

        return cells

    def model_post_init(self, __context) -> None:
        """Start with every cell free."""
        self._in_use = [[False] * self.size for _ in range(self.size)]

    @classmethod
    def from_string(cls, letters: str, size: Optional[int] = None) -> "Board":
        """
        Build a board from its letters in row-major order.

        Whitespace is ignored. Without an explicit size the number of letters
        must be a perfect square.

        Raises:
            ValueError: If the letter count does not fit the board size
        """
        letters = "".join(letters.split())

        if size is None:
            size = math.isqrt(len(letters))
            if size == 0 or size * size != len(letters):
                raise ValueError(
                    f"Board string has {len(letters)} letters, which is not a square number"
                )
        elif len(letters) != size * size:
            raise ValueError(
                f"Board string has {len(letters)} letters, expected {size * size}"
            )

        return cls(cells=[list(letters[i * size:(i + 1) * size]) for i in range(size)])

    @property
    def size(self) -> int:
        """Side length of the board."""
        return len(self.cells)

    def letter_at(self, row: int, col: int) -> str:
        return self.cells[row][col]

    def set_in_use(self, row: int, col: int) -> None:
        self._in_use[row][col] = True

    def clear_in_use(self, row: int, col: int) -> None:
        self._in_use[row][col] = False

    def is_in_use(self, row: int, col: int) -> bool:
        return self._in_use[row][col]

    def is_clear(self) -> bool:
        """True when no cell is marked in use."""
        return not any(any(row) for row in self._in_use)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def positions(self) -> Iterator[Cell]:
        """Every cell, row by row."""
        for row in range(self.size):
            for col in range(self.size):
                yield Cell(row, col)

    def neighbors(self, row: int, col: int) -> List[Cell]:
        """The in-bounds cells around (row, col), in row-major offset order."""
        return [
            Cell(row + dr, col + dc)
            for dr, dc in NEIGHBOR_OFFSETS
            if self.in_bounds(row + dr, col + dc)
        ]

    def to_string(self) -> str:
        """The board's letters in row-major order."""
        return "".join("".join(row) for row in self.cells)

    def render(self, highlight: Optional[Iterable[Cell]] = None) -> str:
        """
        Render the board as lines of letters.

        Cells listed in `highlight` are shown in lower case.
        """
        marked = {tuple(cell) for cell in highlight} if highlight else set()
        lines = [
            "".join(
                letter.lower() if (row, col) in marked else letter
                for col, letter in enumerate(letters)
            )
            for row, letters in enumerate(self.cells)
        ]
        return "\n".join(lines)
