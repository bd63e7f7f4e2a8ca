"""Grid representation and helper utilities."""

from __future__ import annotations

import math
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from ..core.constants import Bounds, Direction
from ..core.exceptions import PlacementError
from ..core.models import Placement

Cell = Tuple[int, int]


class LetterGrid:
    """Mutable letter grid where ``None`` marks an empty cell."""

    def __init__(self, width: int, height: int) -> None:
        self.bounds = Bounds(rows=height, cols=width)
        self.cells: List[List[Optional[str]]] = [
            [None for _ in range(width)] for _ in range(height)
        ]

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "LetterGrid":
        height = len(rows)
        width = len(rows[0]) if rows else 0
        grid = cls(width, height)
        for r, row in enumerate(rows):
            for c, letter in enumerate(row[:width]):
                grid.cells[r][c] = letter
        return grid

    @property
    def width(self) -> int:
        return self.bounds.cols

    @property
    def height(self) -> int:
        return self.bounds.rows

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> Optional[str]:
        return self.cells[row][col]

    def set(self, row: int, col: int, letter: str) -> None:
        self.cells[row][col] = letter

    def clear(self, row: int, col: int) -> None:
        self.cells[row][col] = None

    def empty_cells(self) -> List[Cell]:
        return [
            (r, c)
            for r in range(self.height)
            for c in range(self.width)
            if self.cells[r][c] is None
        ]

    def to_rows(self, filler: Optional[Callable[[], str]] = None) -> List[str]:
        """Render one string per row, asking ``filler`` for each empty cell."""

        rows: List[str] = []
        for row in self.cells:
            chars = []
            for letter in row:
                if letter is None:
                    if filler is None:
                        raise PlacementError("Cannot render a grid with empty cells")
                    letter = filler()
                chars.append(letter)
            rows.append("".join(chars))
        return rows

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def placement_score(self, word: str, row: int, col: int, direction: Direction) -> Optional[int]:
        """Number of cells already holding the right letter, ``None`` on conflict."""

        dr, dc = direction.step
        end_row = row + dr * (len(word) - 1)
        end_col = col + dc * (len(word) - 1)
        if not (self.bounds.contains(row, col) and self.bounds.contains(end_row, end_col)):
            return None
        score = 0
        for k, letter in enumerate(word):
            existing = self.cells[row + dr * k][col + dc * k]
            if existing is None:
                continue
            if existing != letter:
                return None
            score += 1
        return score

    def enumerate_placements(self, word: str) -> List[Placement]:
        """All legal placements of ``word``, horizontal first, in scan order.

        Single-letter words are enumerated horizontally only so the same cell
        is never counted as two occurrences.
        """

        length = len(word)
        placements: List[Placement] = []
        for r in range(self.height):
            for c in range(self.width - length + 1):
                score = self.placement_score(word, r, c, Direction.HORIZONTAL)
                if score is not None:
                    placements.append(Placement(word, r, c, Direction.HORIZONTAL, score))
        if length > 1:
            for r in range(self.height - length + 1):
                for c in range(self.width):
                    score = self.placement_score(word, r, c, Direction.VERTICAL)
                    if score is not None:
                        placements.append(Placement(word, r, c, Direction.VERTICAL, score))
        return placements

    def place(self, placement: Placement) -> List[Cell]:
        """Write ``placement`` and return only the cells that were empty before."""

        if self.placement_score(placement.word, placement.row, placement.col, placement.direction) is None:
            raise PlacementError(
                f"Cannot place '{placement.word}' at ({placement.row},{placement.col}) "
                f"{placement.direction.value}"
            )
        newly: List[Cell] = []
        for (row, col), letter in zip(placement.cells, placement.word):
            if self.cells[row][col] is None:
                self.cells[row][col] = letter
                newly.append((row, col))
        return newly

    def undo(self, cells: Sequence[Cell]) -> None:
        for row, col in cells:
            self.cells[row][col] = None

    def distance_to_center(self, placement: Placement) -> float:
        """Euclidean distance from the word's midpoint to the grid centre."""

        span = (placement.length - 1) / 2
        center_r = (self.height - 1) / 2
        center_c = (self.width - 1) / 2
        if placement.direction == Direction.HORIZONTAL:
            mid_r, mid_c = placement.row, placement.col + span
        else:
            mid_r, mid_c = placement.row + span, placement.col
        return math.hypot(mid_r - center_r, mid_c - center_c)

    # ------------------------------------------------------------------
    # Occurrence scanning
    # ------------------------------------------------------------------
    def matches_at(self, word: str, row: int, col: int, direction: Direction) -> bool:
        dr, dc = direction.step
        return all(
            self.cells[row + dr * k][col + dc * k] == letter for k, letter in enumerate(word)
        )

    def count_occurrences(self, word: str) -> int:
        """Forward occurrences of ``word``; empty cells never match."""

        length = len(word)
        count = 0
        for r in range(self.height):
            for c in range(self.width - length + 1):
                if self.matches_at(word, r, c, Direction.HORIZONTAL):
                    count += 1
        if length > 1:
            for r in range(self.height - length + 1):
                for c in range(self.width):
                    if self.matches_at(word, r, c, Direction.VERTICAL):
                        count += 1
        return count

    def _window_starts(self, position: int, limit: int, length: int) -> range:
        return range(max(0, position - (length - 1)), min(position, limit - length) + 1)

    def windows_through(self, row: int, col: int, length: int) -> int:
        """How many length-``length`` windows pass through ``(row, col)``."""

        count = len(self._window_starts(col, self.width, length))
        if length > 1:
            count += len(self._window_starts(row, self.height, length))
        return count

    def occurrences_through(self, word: str, row: int, col: int) -> Iterator[Placement]:
        """Yield every matching occurrence of ``word`` that covers ``(row, col)``.

        Windows whose letter at ``(row, col)`` differs from the cell are
        skipped without scanning the rest of the word.
        """

        length = len(word)
        letter = self.cells[row][col]
        if letter is None or letter not in word:
            return
        for start in self._window_starts(col, self.width, length):
            if word[col - start] != letter:
                continue
            if self.matches_at(word, row, start, Direction.HORIZONTAL):
                yield Placement(word, row, start, Direction.HORIZONTAL)
        if length > 1:
            for start in self._window_starts(row, self.height, length):
                if word[row - start] != letter:
                    continue
                if self.matches_at(word, start, col, Direction.VERTICAL):
                    yield Placement(word, start, col, Direction.VERTICAL)
