import unittest

from wordsearch.core.constants import Direction
from wordsearch.core.exceptions import PlacementError
from wordsearch.core.models import Placement
from wordsearch.engine.grid import LetterGrid


class PlacementEnumerationTests(unittest.TestCase):
    def test_empty_grid_lists_every_start(self) -> None:
        grid = LetterGrid(width=4, height=3)
        placements = grid.enumerate_placements("CAT")
        horizontal = [p for p in placements if p.direction == Direction.HORIZONTAL]
        vertical = [p for p in placements if p.direction == Direction.VERTICAL]
        self.assertEqual(len(horizontal), 3 * 2)
        self.assertEqual(len(vertical), 1 * 4)
        self.assertEqual(placements[0], Placement("CAT", 0, 0, Direction.HORIZONTAL))
        self.assertTrue(all(p.score == 0 for p in placements))

    def test_single_letter_words_are_horizontal_only(self) -> None:
        grid = LetterGrid(width=2, height=2)
        placements = grid.enumerate_placements("A")
        self.assertEqual(len(placements), 4)
        self.assertTrue(all(p.direction == Direction.HORIZONTAL for p in placements))

    def test_conflicts_are_excluded_and_matches_scored(self) -> None:
        grid = LetterGrid(width=3, height=3)
        grid.place(Placement("CAT", 0, 0, Direction.HORIZONTAL))
        scores = {(p.row, p.col, p.direction): p.score for p in grid.enumerate_placements("ACE")}
        self.assertEqual(scores[(0, 1, Direction.VERTICAL)], 1)
        self.assertNotIn((0, 0, Direction.HORIZONTAL), scores)
        self.assertNotIn((0, 0, Direction.VERTICAL), scores)
        self.assertEqual(scores[(1, 0, Direction.HORIZONTAL)], 0)


class PlaceUndoTests(unittest.TestCase):
    def test_place_returns_only_new_cells(self) -> None:
        grid = LetterGrid(width=3, height=3)
        grid.place(Placement("CAT", 0, 0, Direction.HORIZONTAL))
        newly = grid.place(Placement("ACE", 0, 1, Direction.VERTICAL))
        self.assertEqual(newly, [(1, 1), (2, 1)])

        grid.undo(newly)
        self.assertEqual(grid.cell(0, 1), "A")
        self.assertIsNone(grid.cell(1, 1))
        self.assertIsNone(grid.cell(2, 1))

    def test_conflicting_place_raises(self) -> None:
        grid = LetterGrid(width=3, height=1)
        grid.place(Placement("CAT", 0, 0, Direction.HORIZONTAL))
        with self.assertRaises(PlacementError):
            grid.place(Placement("DOG", 0, 0, Direction.HORIZONTAL))
        with self.assertRaises(PlacementError):
            grid.place(Placement("AT", 0, 2, Direction.HORIZONTAL))

    def test_to_rows_requires_filler_for_empty_cells(self) -> None:
        grid = LetterGrid(width=2, height=1)
        grid.set(0, 0, "Q")
        with self.assertRaises(PlacementError):
            grid.to_rows()
        self.assertEqual(grid.to_rows(lambda: "Z"), ["QZ"])

    def test_from_rows_round_trip(self) -> None:
        grid = LetterGrid.from_rows(["AB", "CD"])
        self.assertEqual((grid.width, grid.height), (2, 2))
        self.assertEqual(grid.to_rows(), ["AB", "CD"])


class OccurrenceTests(unittest.TestCase):
    def test_count_occurrences_reads_forward_only(self) -> None:
        grid = LetterGrid.from_rows(["CAT", "AXA", "TAC"])
        self.assertEqual(grid.count_occurrences("CAT"), 2)
        self.assertEqual(grid.count_occurrences("TAC"), 2)

    def test_empty_cells_break_matches(self) -> None:
        grid = LetterGrid(width=3, height=1)
        grid.set(0, 0, "C")
        grid.set(0, 1, "A")
        self.assertEqual(grid.count_occurrences("CAT"), 0)

    def test_single_letter_counted_once_per_cell(self) -> None:
        grid = LetterGrid.from_rows(["AB", "BA"])
        self.assertEqual(grid.count_occurrences("A"), 2)

    def test_windows_through_cell(self) -> None:
        grid = LetterGrid(width=5, height=3)
        self.assertEqual(grid.windows_through(1, 2, 3), 3 + 1)
        self.assertEqual(grid.windows_through(0, 0, 3), 1 + 1)
        self.assertEqual(grid.windows_through(1, 1, 1), 1)
        self.assertEqual(grid.windows_through(0, 0, 4), 1)

    def test_occurrences_through_cell(self) -> None:
        grid = LetterGrid.from_rows(["CAT", "ABC", "TCA"])
        found = list(grid.occurrences_through("CAT", 0, 0))
        self.assertEqual(
            found,
            [
                Placement("CAT", 0, 0, Direction.HORIZONTAL),
                Placement("CAT", 0, 0, Direction.VERTICAL),
            ],
        )
        self.assertEqual(list(grid.occurrences_through("CAT", 1, 1)), [])

    def test_occurrences_through_skips_mismatched_positions(self) -> None:
        grid = LetterGrid.from_rows(["ABAB"])
        self.assertEqual(
            list(grid.occurrences_through("ABA", 0, 2)),
            [Placement("ABA", 0, 0, Direction.HORIZONTAL)],
        )
        self.assertEqual(
            list(grid.occurrences_through("ABA", 0, 1)),
            [Placement("ABA", 0, 0, Direction.HORIZONTAL)],
        )
        self.assertEqual(list(grid.occurrences_through("CAB", 0, 0)), [])

        repeated = LetterGrid.from_rows(["AAAA"])
        self.assertEqual(len(list(repeated.occurrences_through("AAA", 0, 1))), 2)

    def test_occurrences_through_empty_cell(self) -> None:
        grid = LetterGrid(width=3, height=1)
        grid.set(0, 0, "C")
        self.assertEqual(list(grid.occurrences_through("CAT", 0, 1)), [])

    def test_distance_to_center(self) -> None:
        grid = LetterGrid(width=3, height=3)
        centered = Placement("CAT", 1, 0, Direction.HORIZONTAL)
        corner = Placement("CAT", 0, 0, Direction.HORIZONTAL)
        self.assertAlmostEqual(grid.distance_to_center(centered), 0.0)
        self.assertAlmostEqual(grid.distance_to_center(corner), 1.0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
