"""Data models supporting the word search generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, List, Optional

from .constants import COMPASS, DIRECTION_STEPS, INVALID_INDEX, Direction


@dataclass(frozen=True)
class Coordinate:
    """A (row, col) grid position."""

    row: int = INVALID_INDEX
    col: int = INVALID_INDEX

    INVALID: ClassVar["Coordinate"]

    @property
    def is_valid(self) -> bool:
        return self.row != INVALID_INDEX and self.col != INVALID_INDEX

    def step(self, direction: Direction, distance: int = 1) -> "Coordinate":
        dr, dc = DIRECTION_STEPS[direction]
        return Coordinate(self.row + dr * distance, self.col + dc * distance)


Coordinate.INVALID = Coordinate()


@dataclass
class CellMetadata:
    """Free-space counts for one cell, one slot per compass direction."""

    pos: Coordinate
    freespace: List[int] = field(default_factory=lambda: [0] * len(COMPASS))
    saturated: bool = False

    def free_in(self, direction: Direction) -> int:
        return self.freespace[COMPASS.index(direction)]


@dataclass(frozen=True)
class Vacancy:
    """A start cell and direction with enough room for a word."""

    start: Coordinate
    direction: Direction
    free: int


@dataclass(frozen=True)
class Placement:
    """One inserted word and the ray it occupies."""

    word: str
    start: Coordinate
    direction: Direction

    @property
    def cells(self) -> List[Coordinate]:
        return [self.start.step(self.direction, i) for i in range(len(self.word))]


@dataclass
class PuzzleResult:
    """Everything a caller needs after a build."""

    grid: List[List[str]]
    words: List[str]
    placed_count: int
    total_count: int
    placements: List[Placement] = field(default_factory=list)
    dimension: int = 0
    seed: Optional[int] = None

    @property
    def not_placed_count(self) -> int:
        return self.total_count - self.placed_count
