"""Deterministic integrity checks for finished puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Set

from ..core.constants import NOISE_ALPHABET
from ..core.exceptions import ValidationError
from ..core.models import Coordinate, PuzzleResult
from .grid import WordGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs deterministic validation over a filled grid and its result."""

    def validate(self, grid: WordGrid, result: PuzzleResult) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_letters_valid(grid, result)
            self._check_placements(grid, result)
            self._check_counts(result)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_letters_valid(self, grid: WordGrid, result: PuzzleResult) -> None:
        # Word cells carry whatever the caller passed in; only noise is checked.
        word_cells: Set[Coordinate] = {
            pos for placement in result.placements for pos in placement.cells
        }
        for pos in grid.coordinates():
            letter = grid.cell(pos.row, pos.col)
            if grid.is_empty(pos.row, pos.col):
                raise ValidationError(f"Empty cell left at ({pos.row},{pos.col})")
            if pos in word_cells:
                continue
            if len(letter) != 1 or letter not in NOISE_ALPHABET:
                raise ValidationError(
                    f"Invalid letter '{letter}' at ({pos.row},{pos.col})"
                )

    def _check_placements(self, grid: WordGrid, result: PuzzleResult) -> None:
        if len(result.placements) != result.placed_count:
            raise ValidationError(
                f"{len(result.placements)} placements recorded for "
                f"{result.placed_count} placed words"
            )
        for placement in result.placements:
            for index, pos in enumerate(placement.cells):
                if not grid.contains(pos):
                    raise ValidationError(
                        f"Word '{placement.word}' runs off the grid at ({pos.row},{pos.col})"
                    )
                if grid.cell(pos.row, pos.col) != placement.word[index]:
                    raise ValidationError(
                        f"Word '{placement.word}' overwritten at ({pos.row},{pos.col})"
                    )

    def _check_counts(self, result: PuzzleResult) -> None:
        if result.placed_count < 0 or result.placed_count > result.total_count:
            raise ValidationError(
                f"Placed count {result.placed_count} outside 0..{result.total_count}"
            )
