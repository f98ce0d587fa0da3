"""Shared constants and enumerations for the word search generator."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Direction(str, Enum):
    """Compass directions a word may run in, plus a zero-step default."""

    NONE = "NONE"
    N = "N"
    S = "S"
    W = "W"
    E = "E"
    NE = "NE"
    SW = "SW"
    NW = "NW"
    SE = "SE"


class DirectionSampling(str, Enum):
    """How a probe draws candidate directions for one cell."""

    REPLACEMENT = "REPLACEMENT"
    PERMUTATION = "PERMUTATION"


# Slot order of the per-cell free-space array.
COMPASS: Tuple[Direction, ...] = (
    Direction.N,
    Direction.S,
    Direction.W,
    Direction.E,
    Direction.NE,
    Direction.SW,
    Direction.NW,
    Direction.SE,
)

DIRECTION_STEPS: Dict[Direction, Tuple[int, int]] = {
    Direction.NONE: (0, 0),
    Direction.N: (-1, 0),
    Direction.S: (1, 0),
    Direction.E: (0, 1),
    Direction.W: (0, -1),
    Direction.NE: (-1, 1),
    Direction.SE: (1, 1),
    Direction.NW: (-1, -1),
    Direction.SW: (1, -1),
}

EMPTY = None
INVALID_INDEX = -1_000_000
NOISE_ALPHABET = string.ascii_uppercase
DEFAULT_PROBE_LIMIT = 100
SIZING_MARGIN = 2
AREA_FACTOR = 2.5
ALL_DIRECTIONS_EXHAUSTED = (1 << len(COMPASS)) - 1


@dataclass(frozen=True)
class Bounds:
    """Square grid bounds helper."""

    size: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size
