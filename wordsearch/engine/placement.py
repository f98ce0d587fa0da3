"""Randomized vacancy search for word placement."""

from __future__ import annotations

import random
from typing import Iterator, Optional

from ..core.constants import (
    ALL_DIRECTIONS_EXHAUSTED,
    COMPASS,
    DEFAULT_PROBE_LIMIT,
    DirectionSampling,
)
from ..core.models import Vacancy
from .freespace import FreeSpaceIndex


class VacancyProber:
    """Looks for a cell and direction with room for a word of a given length.

    Each probe picks one random cell and tries up to eight random directions
    on it. With ``DirectionSampling.REPLACEMENT`` the eight draws are
    independent, so a direction can come up twice while another is never
    tried. A probe that sees zero free space on all eight draws marks the cell
    saturated, which later probes skip until the index is rebuilt.
    """

    def __init__(
        self,
        rng: random.Random,
        probe_limit: int = DEFAULT_PROBE_LIMIT,
        sampling: DirectionSampling = DirectionSampling.REPLACEMENT,
    ) -> None:
        self.rng = rng
        self.probe_limit = probe_limit
        self.sampling = sampling

    def _direction_slots(self) -> Iterator[int]:
        if self.sampling == DirectionSampling.PERMUTATION:
            yield from self.rng.sample(range(len(COMPASS)), len(COMPASS))
            return
        for _ in range(len(COMPASS)):
            yield self.rng.randrange(len(COMPASS))

    def find_vacancy(self, index: FreeSpaceIndex, length: int) -> Optional[Vacancy]:
        if index.size == 0:
            return None

        for _ in range(self.probe_limit):
            row = self.rng.randrange(index.size)
            col = self.rng.randrange(index.size)
            meta = index.cell(row, col)
            if meta.saturated:
                continue

            exhausted = 0
            for draw, slot in enumerate(self._direction_slots()):
                free = meta.freespace[slot]
                if free == 0:
                    exhausted |= 1 << draw
                if exhausted == ALL_DIRECTIONS_EXHAUSTED:
                    meta.saturated = True
                    break
                if free >= length:
                    return Vacancy(start=meta.pos, direction=COMPASS[slot], free=free)
        return None
