"""Backtracking fill of empty grid cells.

Filling runs over an explicit stack instead of recursion so that large grids
with hundreds of empty cells do not hit the interpreter recursion limit.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterator, List, Optional, Sequence

from ..utils.logger import get_logger
from ..utils.rng import SeededRandom
from .grid import Cell, LetterGrid


LOGGER = get_logger(__name__)


class CellBacktracker:
    """Assign a letter to each cell in order, backtracking on dead ends.

    Subclasses decide which letters to try (``_letter_order``), whether a
    letter may go into a cell (``_assign``), how to take it back
    (``_release``) and whether a fully assigned grid is acceptable
    (``_is_complete``).
    """

    def __init__(self, grid: LetterGrid, rng: SeededRandom) -> None:
        self.grid = grid
        self.rng = rng

    def _letter_order(self) -> Sequence[str]:
        raise NotImplementedError

    def _assign(self, row: int, col: int, letter: str) -> bool:
        raise NotImplementedError

    def _release(self, row: int, col: int) -> None:
        self.grid.clear(row, col)

    def _is_complete(self) -> bool:
        return True

    def run(self, cells: Sequence[Cell]) -> bool:
        if not cells:
            return self._is_complete()

        orders: List[Iterator[str]] = [iter(self._letter_order())]
        while orders:
            depth = len(orders) - 1
            row, col = cells[depth]
            for letter in orders[depth]:
                if self._assign(row, col, letter):
                    break
            else:
                orders.pop()
                if orders:
                    self._release(*cells[len(orders) - 1])
                continue

            if depth + 1 == len(cells):
                if self._is_complete():
                    return True
                self._release(row, col)
                continue
            orders.append(iter(self._letter_order()))
        return False


class ConstrainedFiller(CellBacktracker):
    """Fill empty cells without pushing any word over its required count."""

    def __init__(
        self,
        grid: LetterGrid,
        letters: Sequence[str],
        required: Dict[str, int],
        rng: SeededRandom,
    ) -> None:
        super().__init__(grid, rng)
        self.letters = list(letters)
        self.required = required
        self.words_by_length: Dict[int, List[str]] = defaultdict(list)
        for word in required:
            self.words_by_length[len(word)].append(word)
        self._counts: Dict[str, int] = {}
        self._deltas: List[Dict[str, int]] = []

    def _danger(self, cell: Cell) -> int:
        row, col = cell
        return sum(
            self.grid.windows_through(row, col, length) * len(words)
            for length, words in self.words_by_length.items()
        )

    def ordered_empties(self) -> List[Cell]:
        """Empty cells, those crossed by the most candidate windows first."""

        return sorted(self.grid.empty_cells(), key=self._danger, reverse=True)

    def fill(self) -> Optional[List[Cell]]:
        """Fill every empty cell; return the written cells, or ``None`` on failure.

        On failure the grid is left exactly as it was found.
        """

        empties = self.ordered_empties()
        if not empties:
            return []

        self._counts = {word: self.grid.count_occurrences(word) for word in self.required}
        if any(self._counts[word] > self.required[word] for word in self.required):
            return None
        self._deltas = []

        if self.run(empties):
            return empties
        LOGGER.debug("Unable to fill %d empty cells without extra occurrences", len(empties))
        return None

    def _letter_order(self) -> Sequence[str]:
        return self.rng.shuffled(self.letters)

    def _assign(self, row: int, col: int, letter: str) -> bool:
        self.grid.set(row, col, letter)
        deltas: Dict[str, int] = {}
        for length, words in self.words_by_length.items():
            if not self.grid.windows_through(row, col, length):
                continue
            for word in words:
                added = sum(1 for _ in self.grid.occurrences_through(word, row, col))
                if not added:
                    continue
                if self._counts[word] + added > self.required[word]:
                    self.grid.clear(row, col)
                    return False
                deltas[word] = added

        for word, added in deltas.items():
            self._counts[word] += added
        self._deltas.append(deltas)
        return True

    def _release(self, row: int, col: int) -> None:
        for word, added in self._deltas.pop().items():
            self._counts[word] -= added
        self.grid.clear(row, col)
