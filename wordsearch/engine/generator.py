"""Puzzle engine orchestration.

Phases run strictly in order:
  1. Sizing: derive the square dimension from word lengths.
  2. Index: compute free space for every cell and direction.
  3. Ordering: capitalize, then scramble the placement order.
  4. Placement: probe for a vacancy per word, insert, rebuild the index.
  5. Noise: fill every unused cell with a random letter.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.constants import DEFAULT_PROBE_LIMIT, DirectionSampling
from ..core.exceptions import ConfigurationError, EngineStateError, ValidationError
from ..core.models import Placement, PuzzleResult
from ..utils.logger import get_logger
from .freespace import FreeSpaceIndex
from .grid import WordGrid, compute_dimension
from .ordering import capitalize_words, scramble_words
from .placement import VacancyProber
from .validator import PuzzleValidator


LOGGER = get_logger(__name__)


@dataclass
class EngineConfig:
    seed: Optional[int] = None
    probe_limit: int = DEFAULT_PROBE_LIMIT
    dimension: Optional[int] = None
    direction_sampling: DirectionSampling = DirectionSampling.REPLACEMENT

    def validate(self) -> None:
        if self.probe_limit < 0:
            raise ConfigurationError(f"probe_limit must be >= 0, got {self.probe_limit}")
        if self.dimension is not None and self.dimension < 0:
            raise ConfigurationError(f"dimension must be >= 0, got {self.dimension}")


class PuzzleEngine:
    """Builds one word search puzzle from a list of words.

    An engine owns its grid and free-space index and builds exactly once;
    create a fresh engine for every puzzle. Pass ``rng`` to control every
    random draw, otherwise one is seeded from ``config.seed``.
    """

    def __init__(
        self,
        words: Sequence[str],
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.config.validate()
        self.rng = rng or random.Random(self.config.seed)
        self.words: List[str] = list(words)
        self.dimension = (
            self.config.dimension
            if self.config.dimension is not None
            else compute_dimension(self.words)
        )
        self.grid = WordGrid(self.dimension)
        self.index = FreeSpaceIndex(self.grid)
        self.prober = VacancyProber(
            self.rng,
            probe_limit=self.config.probe_limit,
            sampling=self.config.direction_sampling,
        )
        self.validator = PuzzleValidator()
        self.placements: List[Placement] = []
        self._built = False
        LOGGER.info("Created %sx%s grid for %s words", self.dimension, self.dimension, len(self.words))

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def build(self) -> PuzzleResult:
        if self._built:
            raise EngineStateError("Engine already built a puzzle; create a new engine")
        self._built = True

        self.index.rebuild()
        public_words = capitalize_words(self.words)
        placement_order = scramble_words(public_words, self.rng)
        placed = self.position_words(placement_order)
        LOGGER.debug(
            "%s cells unused and %s cells saturated before noise fill",
            self.grid.empty_count(),
            self.index.saturated_count(),
        )
        self.grid.fill_noise(self.rng)

        result = PuzzleResult(
            grid=self.grid.to_rows(),
            words=public_words,
            placed_count=placed,
            total_count=len(public_words),
            placements=list(self.placements),
            dimension=self.dimension,
            seed=self.config.seed,
        )
        validation = self.validator.validate(self.grid, result)
        if not validation.ok:
            raise ValidationError(f"Puzzle validation failed: {validation.messages}")
        LOGGER.info(
            "Placed %s/%s words (%s remaining)",
            result.placed_count,
            result.total_count,
            result.not_placed_count,
        )
        return result

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def position_words(self, words: Sequence[str]) -> int:
        placed = 0
        for word in words:
            if self.try_position(word):
                placed += 1
                self.index.rebuild()
        return placed

    def try_position(self, word: str) -> bool:
        vacancy = self.prober.find_vacancy(self.index, len(word))
        if vacancy is None:
            LOGGER.debug("No vacancy for '%s' after %s probes", word, self.config.probe_limit)
            return False
        self.grid.write_word(vacancy.start, vacancy.direction, word)
        self.placements.append(
            Placement(word=word, start=vacancy.start, direction=vacancy.direction)
        )
        LOGGER.debug(
            "Placed '%s' at (%s,%s) heading %s",
            word,
            vacancy.start.row,
            vacancy.start.col,
            vacancy.direction.value,
        )
        return True
