"""Sorted word list supporting word and prefix lookups."""

from pathlib import Path
from typing import Iterable, Union

from sortedcontainers import SortedList


class Lexicon:
    """
    A dictionary of upper-case words.

    Prefix queries bisect into the sorted word list: a prefix is present when
    the first word not smaller than it starts with it.
    """

    def __init__(self, words: Iterable[str] = ()):
        self._words = SortedList({w.strip().upper() for w in words if w.strip()})

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Lexicon":
        """Load a word list with one word per line."""
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Dictionary file not found: {path}")

        with open(path, encoding="utf-8") as f:
            return cls(f)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __iter__(self):
        return iter(self._words)

    def contains(self, word: str) -> bool:
        word = word.upper()
        idx = self._words.bisect_left(word)
        return idx < len(self._words) and self._words[idx] == word

    def contains_prefix(self, prefix: str) -> bool:
        prefix = prefix.upper()
        idx = self._words.bisect_left(prefix)
        return idx < len(self._words) and self._words[idx].startswith(prefix)
