import random
import unittest

from wordsearch.core.constants import Direction
from wordsearch.core.models import Coordinate
from wordsearch.engine.grid import WordGrid, compute_dimension


class GridSizingTests(unittest.TestCase):
    def test_dimension_covers_longest_word_plus_margin(self) -> None:
        words = ["cat", "elephant", "dog", "mouse"]
        self.assertGreaterEqual(compute_dimension(words), len("elephant") + 2)

    def test_dimension_for_short_words(self) -> None:
        # floor(sqrt(2.5 * 3)) == 2, so the margin term wins.
        self.assertEqual(compute_dimension(["cat", "dog"]), 5)

    def test_dimension_bound_holds_for_many_lists(self) -> None:
        rng = random.Random(11)
        for _ in range(50):
            words = [
                "x" * rng.randint(1, 15) for _ in range(rng.randint(1, 40))
            ]
            self.assertGreaterEqual(
                compute_dimension(words), max(len(w) for w in words) + 2
            )

    def test_empty_word_list_gives_zero(self) -> None:
        self.assertEqual(compute_dimension([]), 0)


class WordGridTests(unittest.TestCase):
    def test_new_grid_is_empty(self) -> None:
        grid = WordGrid(4)
        self.assertEqual(grid.empty_count(), 16)
        self.assertTrue(all(grid.is_empty(p.row, p.col) for p in grid.coordinates()))

    def test_negative_size_rejected(self) -> None:
        with self.assertRaises(ValueError):
            WordGrid(-1)

    def test_write_word_follows_direction(self) -> None:
        grid = WordGrid(5)
        grid.write_word(Coordinate(4, 0), Direction.NE, "CAT")
        self.assertEqual(grid.cell(4, 0), "C")
        self.assertEqual(grid.cell(3, 1), "A")
        self.assertEqual(grid.cell(2, 2), "T")
        self.assertEqual(grid.empty_count(), 22)

    def test_write_word_west(self) -> None:
        grid = WordGrid(4)
        grid.write_word(Coordinate(1, 3), Direction.W, "DOG")
        self.assertEqual(grid.to_rows()[1], ["", "G", "O", "D"])

    def test_fill_noise_keeps_letters_and_fills_rest(self) -> None:
        grid = WordGrid(5)
        grid.write_word(Coordinate(0, 0), Direction.SE, "WORD")
        filled = grid.fill_noise(random.Random(3))
        self.assertEqual(filled, 21)
        self.assertEqual(grid.empty_count(), 0)
        self.assertEqual([grid.cell(i, i) for i in range(4)], list("WORD"))
        for row in grid.to_rows():
            for letter in row:
                self.assertTrue("A" <= letter <= "Z")

    def test_invalid_coordinate_is_never_in_bounds(self) -> None:
        grid = WordGrid(3)
        self.assertFalse(Coordinate.INVALID.is_valid)
        self.assertFalse(grid.contains(Coordinate.INVALID))
        self.assertTrue(Coordinate(0, 0).is_valid)

    def test_none_direction_does_not_move(self) -> None:
        self.assertEqual(Coordinate(2, 1).step(Direction.NONE), Coordinate(2, 1))
        self.assertEqual(Coordinate(2, 1).step(Direction.SW, 2), Coordinate(4, -1))

    def test_zero_size_grid(self) -> None:
        grid = WordGrid(0)
        self.assertEqual(grid.fill_noise(random.Random(1)), 0)
        self.assertEqual(grid.to_rows(), [])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
