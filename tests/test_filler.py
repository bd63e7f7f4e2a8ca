import unittest

from wordsearch.core.constants import Direction
from wordsearch.core.models import Placement
from wordsearch.engine.filler import ConstrainedFiller
from wordsearch.engine.grid import LetterGrid
from wordsearch.utils.rng import SeededRandom


class ConstrainedFillerTests(unittest.TestCase):
    def test_fill_avoids_extra_occurrences(self) -> None:
        for seed in range(10):
            with self.subTest(seed=seed):
                grid = LetterGrid(width=3, height=3)
                grid.place(Placement("CAT", 1, 0, Direction.HORIZONTAL))
                filler = ConstrainedFiller(grid, ["C", "A", "T"], {"CAT": 1}, SeededRandom(seed))
                filled = filler.fill()
                self.assertIsNotNone(filled)
                assert filled is not None
                self.assertEqual(len(filled), 6)
                self.assertEqual(grid.empty_cells(), [])
                self.assertEqual(grid.count_occurrences("CAT"), 1)

    def test_most_constrained_cells_come_first(self) -> None:
        grid = LetterGrid(width=5, height=1)
        filler = ConstrainedFiller(grid, ["A", "B"], {"AB": 1, "ABC": 1}, SeededRandom(1))
        order = filler.ordered_empties()
        self.assertEqual(order[0], (0, 2))
        self.assertIn(order[-1], [(0, 0), (0, 4)])

    def test_failure_leaves_grid_untouched(self) -> None:
        grid = LetterGrid(width=2, height=1)
        grid.set(0, 0, "A")
        filler = ConstrainedFiller(grid, ["A"], {"A": 1}, SeededRandom(3))
        self.assertIsNone(filler.fill())
        self.assertEqual(grid.cell(0, 0), "A")
        self.assertIsNone(grid.cell(0, 1))

    def test_already_exceeded_counts_fail_fast(self) -> None:
        grid_with_gap = LetterGrid(width=3, height=1)
        grid_with_gap.set(0, 0, "A")
        grid_with_gap.set(0, 1, "A")
        filler = ConstrainedFiller(grid_with_gap, ["B"], {"A": 1}, SeededRandom(0))
        self.assertIsNone(filler.fill())
        self.assertIsNone(grid_with_gap.cell(0, 2))

    def test_words_longer_than_the_cell_reach_are_ignored(self) -> None:
        grid = LetterGrid(width=2, height=2)
        filler = ConstrainedFiller(grid, ["A", "B"], {"AB": 1, "ABC": 1}, SeededRandom(4))
        filler._counts = {"AB": 0, "ABC": 0}
        self.assertTrue(filler._assign(0, 0, "A"))
        self.assertTrue(filler._assign(0, 1, "B"))
        self.assertEqual(filler._counts, {"AB": 1, "ABC": 0})
        self.assertFalse(filler._assign(1, 0, "B"))
        self.assertIsNone(grid.cell(1, 0))

    def test_full_grid_needs_no_fill(self) -> None:
        grid = LetterGrid.from_rows(["CAT"])
        filler = ConstrainedFiller(grid, ["C"], {"CAT": 1}, SeededRandom(0))
        self.assertEqual(filler.fill(), [])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
