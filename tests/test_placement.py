import random
import unittest

from wordsearch.core.constants import COMPASS, Direction, DirectionSampling
from wordsearch.core.models import Coordinate
from wordsearch.engine.freespace import FreeSpaceIndex
from wordsearch.engine.grid import WordGrid
from wordsearch.engine.placement import VacancyProber

from helpers import ScriptedRandom


def fresh_index(size: int) -> FreeSpaceIndex:
    index = FreeSpaceIndex(WordGrid(size))
    index.rebuild()
    return index


class VacancyProberTests(unittest.TestCase):
    def test_first_direction_with_room_wins(self) -> None:
        index = fresh_index(5)
        east = COMPASS.index(Direction.E)
        west = COMPASS.index(Direction.W)
        # Cell (0, 0); W has no room, E has four cells.
        rng = ScriptedRandom([0, 0, west, east])
        vacancy = VacancyProber(rng).find_vacancy(index, 3)
        self.assertIsNotNone(vacancy)
        assert vacancy is not None
        self.assertEqual(vacancy.start, Coordinate(0, 0))
        self.assertEqual(vacancy.direction, Direction.E)
        self.assertEqual(vacancy.free, 4)
        self.assertEqual(rng.draws, [])

    def test_too_short_directions_are_passed_over(self) -> None:
        index = fresh_index(5)
        south = COMPASS.index(Direction.S)
        # Cell (3, 3): S has one free cell, not enough for three letters.
        rng = ScriptedRandom([3, 3] + [south] * 8)
        prober = VacancyProber(rng, probe_limit=1)
        self.assertIsNone(prober.find_vacancy(index, 3))
        self.assertFalse(index.cell(3, 3).saturated)

    def test_all_exhausted_draws_saturate_cell(self) -> None:
        grid = WordGrid(3)
        for pos in grid.coordinates():
            if (pos.row, pos.col) != (1, 1):
                grid.cells[pos.row][pos.col] = "X"
        index = FreeSpaceIndex(grid)
        index.rebuild()
        self.assertFalse(index.cell(1, 1).saturated)

        rng = ScriptedRandom([1, 1] + list(range(8)))
        self.assertIsNone(VacancyProber(rng, probe_limit=1).find_vacancy(index, 1))
        self.assertTrue(index.cell(1, 1).saturated)

        # A saturated cell is skipped without drawing directions.
        rng = ScriptedRandom([1, 1])
        self.assertIsNone(VacancyProber(rng, probe_limit=1).find_vacancy(index, 1))
        self.assertEqual(rng.draws, [])

    def test_occupied_cells_are_never_chosen(self) -> None:
        grid = WordGrid(4)
        grid.write_word(Coordinate(0, 0), Direction.E, "ABCD")
        index = FreeSpaceIndex(grid)
        index.rebuild()
        rng = ScriptedRandom([0, 2])
        self.assertIsNone(VacancyProber(rng, probe_limit=1).find_vacancy(index, 1))
        self.assertEqual(rng.draws, [])

    def test_word_longer_than_grid_never_fits(self) -> None:
        index = fresh_index(4)
        prober = VacancyProber(random.Random(5))
        self.assertIsNone(prober.find_vacancy(index, 10))

    def test_zero_size_index_returns_none(self) -> None:
        self.assertIsNone(VacancyProber(ScriptedRandom([])).find_vacancy(fresh_index(0), 3))

    def test_permutation_sampling_tries_each_direction_once(self) -> None:
        rng = random.Random(9)
        prober = VacancyProber(rng, sampling=DirectionSampling.PERMUTATION)
        slots = list(prober._direction_slots())
        self.assertEqual(sorted(slots), list(range(8)))

    def test_found_vacancy_has_room(self) -> None:
        index = fresh_index(8)
        prober = VacancyProber(random.Random(21))
        for length in range(1, 8):
            vacancy = prober.find_vacancy(index, length)
            assert vacancy is not None
            meta = index.cell(vacancy.start.row, vacancy.start.col)
            self.assertGreaterEqual(meta.free_in(vacancy.direction), length)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
