"""Data models for the word search engine."""

from typing import List, NamedTuple, Protocol, Tuple


class Cell(NamedTuple):
    """A board coordinate."""
    row: int
    col: int


# Row-major scan of the 3x3 neighborhood, centre excluded
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

Path = List[Cell]


class WordSource(Protocol):
    """The two dictionary queries the search needs."""

    def contains(self, word: str) -> bool:
        ...

    def contains_prefix(self, prefix: str) -> bool:
        ...
