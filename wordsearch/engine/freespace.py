"""Per-cell directional free-space bookkeeping."""

from __future__ import annotations

from typing import List

from ..core.constants import COMPASS, Direction
from ..core.models import CellMetadata, Coordinate
from .grid import WordGrid


def count_free(grid: WordGrid, pos: Coordinate, direction: Direction) -> int:
    """Count empty cells from one step past ``pos`` until an edge or a letter."""

    nfree = 0
    nxt = pos.step(direction)
    while grid.contains(nxt) and grid.is_empty(nxt.row, nxt.col):
        nfree += 1
        nxt = nxt.step(direction)
    return nfree


class FreeSpaceIndex:
    """Cache of free-space counts for every cell of a grid.

    The index is derived state: :meth:`rebuild` must run after every grid
    mutation. Cells holding a letter start out saturated since no word may
    begin on them.
    """

    def __init__(self, grid: WordGrid) -> None:
        self.grid = grid
        self.cells: List[List[CellMetadata]] = [
            [CellMetadata(pos=Coordinate(row, col)) for col in range(grid.size)]
            for row in range(grid.size)
        ]

    @property
    def size(self) -> int:
        return self.grid.size

    def cell(self, row: int, col: int) -> CellMetadata:
        return self.cells[row][col]

    def rebuild(self) -> None:
        for row in self.cells:
            for meta in row:
                self._refresh(meta)

    def _refresh(self, meta: CellMetadata) -> None:
        for slot, direction in enumerate(COMPASS):
            meta.freespace[slot] = count_free(self.grid, meta.pos, direction)
        meta.saturated = not self.grid.is_empty(meta.pos.row, meta.pos.col)

    def saturated_count(self) -> int:
        return sum(1 for row in self.cells for meta in row if meta.saturated)
