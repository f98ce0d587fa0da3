"""Grid representation, sizing and letter-writing helpers."""

from __future__ import annotations

import math
import random
from typing import Iterator, List, Optional, Sequence

from ..core.constants import AREA_FACTOR, EMPTY, NOISE_ALPHABET, SIZING_MARGIN, Bounds, Direction
from ..core.models import Coordinate
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def compute_dimension(words: Sequence[str]) -> int:
    """Derive the square grid dimension from word lengths.

    The longest word plus a margin always fits along a row, so the result is
    never smaller than ``longest + 2``. An empty word list yields ``0``.
    """

    if not words:
        return 0
    lengths = [len(word) for word in words]
    max_len = max(lengths) + SIZING_MARGIN
    avg_len = sum(lengths) / len(lengths)
    return max(max_len, int(math.sqrt(AREA_FACTOR * avg_len)))


class WordGrid:
    """Square letter grid; ``None`` marks a cell no word or noise has used."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"Grid size must be non-negative, got {size}")
        self.bounds = Bounds(size=size)
        self.cells: List[List[Optional[str]]] = [
            [EMPTY for _ in range(size)] for _ in range(size)
        ]

    @property
    def size(self) -> int:
        return self.bounds.size

    def contains(self, pos: Coordinate) -> bool:
        return self.bounds.contains(pos.row, pos.col)

    def cell(self, row: int, col: int) -> Optional[str]:
        return self.cells[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.cells[row][col] is EMPTY

    def coordinates(self) -> Iterator[Coordinate]:
        for row in range(self.size):
            for col in range(self.size):
                yield Coordinate(row, col)

    def empty_count(self) -> int:
        return sum(1 for row in self.cells for letter in row if letter is EMPTY)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def write_word(self, start: Coordinate, direction: Direction, word: str) -> None:
        """Write ``word`` one letter per cell from ``start`` along ``direction``.

        Room is not re-checked here; callers pass a vacancy whose free-space
        count already covers the whole word.
        """

        pos = start
        for letter in word:
            self.cells[pos.row][pos.col] = letter
            pos = pos.step(direction)

    def fill_noise(self, rng: random.Random) -> int:
        """Give every empty cell a random uppercase letter; return how many."""

        filled = 0
        for row in self.cells:
            for col, letter in enumerate(row):
                if letter is EMPTY:
                    row[col] = rng.choice(NOISE_ALPHABET)
                    filled += 1
        LOGGER.debug("Noise filled %s of %s cells", filled, self.size * self.size)
        return filled

    def to_rows(self) -> List[List[str]]:
        """Return a copy of the letters as a list of rows."""

        return [["" if letter is EMPTY else letter for letter in row] for row in self.cells]
