"""Single-word grids built only from the word's own letters.

The hidden word must occur exactly once reading left to right or top to
bottom, even though every other cell reuses its letters.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Union

from ..core.constants import DEFAULT_UNIQUE_ATTEMPTS, Direction
from ..core.exceptions import InfeasibleConstraintError, InvalidInputError, SearchExhaustedError
from ..core.models import Placement, Seed
from ..data.normalization import validate_dimensions
from ..utils.logger import get_logger
from ..utils.rng import SeededRandom
from .filler import CellBacktracker
from .grid import Cell, LetterGrid


LOGGER = get_logger(__name__)

ORIENTATIONS = ("H", "V", "random")


class UniqueWordFiller(CellBacktracker):
    """Fill cells with the word's letters, rejecting any second occurrence."""

    def __init__(
        self,
        grid: LetterGrid,
        placement: Placement,
        letters: Sequence[str],
        rng: SeededRandom,
    ) -> None:
        super().__init__(grid, rng)
        self.placement = placement
        self.letters = list(letters)

    def _letter_order(self) -> Sequence[str]:
        """Shuffled letters, with the word's first letter always tried last."""

        first = self.placement.word[0]
        others = [ch for ch in self.letters if ch != first]
        return self.rng.shuffled(others) + [ch for ch in self.letters if ch == first]

    def _assign(self, row: int, col: int, letter: str) -> bool:
        self.grid.set(row, col, letter)
        for occurrence in self.grid.occurrences_through(self.placement.word, row, col):
            if occurrence != self.placement:
                self.grid.clear(row, col)
                return False
        return True

    def _is_complete(self) -> bool:
        return self.grid.count_occurrences(self.placement.word) == 1


def _candidate_placements(word: str, width: int, height: int, orientation: str) -> List[Placement]:
    length = len(word)
    fits: Dict[Direction, bool] = {
        Direction.HORIZONTAL: width >= length,
        Direction.VERTICAL: height >= length,
    }
    wanted = [d for d in Direction if orientation in (d.value, "random") and fits[d]]
    placements: List[Placement] = []
    for direction in wanted:
        dr, dc = direction.step
        for row in range(height - dr * (length - 1)):
            for col in range(width - dc * (length - 1)):
                placements.append(Placement(word, row, col, direction))
    return placements


def generate_unique_word_grid(
    width: int,
    height: int,
    word: Any,
    orientation: Union[str, Direction] = "random",
    max_attempts: int = DEFAULT_UNIQUE_ATTEMPTS,
    seed: Optional[Seed] = None,
) -> List[List[str]]:
    """Return a ``height`` x ``width`` grid hiding ``word`` exactly once.

    Args:
        width: Grid width in cells.
        height: Grid height in cells.
        word: The word to hide; case is preserved.
        orientation: ``"H"``, ``"V"`` or ``"random"`` (either direction).
        max_attempts: How many start positions to try before giving up.
        seed: Optional seed for reproducible grids.

    Raises:
        InvalidInputError: on bad dimensions, an empty word or an unknown or
            unusable orientation.
        InfeasibleConstraintError: when the word cannot fit, or has a single
            distinct letter on a grid other than ``L x 1`` / ``1 x L``.
        SearchExhaustedError: when no attempt produced a unique grid.
    """

    validate_dimensions(width, height)
    if not isinstance(word, str) or not word:
        raise InvalidInputError("word must be a non-empty string.")
    if isinstance(orientation, Direction):
        orientation = orientation.value
    if orientation not in ORIENTATIONS:
        raise InvalidInputError(f"orientation must be one of {', '.join(ORIENTATIONS)}.")

    length = len(word)
    if width < length and height < length:
        raise InfeasibleConstraintError(
            f'Grid too small to place "{word}" horizontally or vertically.'
        )

    distinct = list(dict.fromkeys(word))
    if len(distinct) == 1:
        if (width, height) in ((length, 1), (1, length)):
            return [[distinct[0]] * width for _ in range(height)]
        raise InfeasibleConstraintError(
            f'The word "{word}" has only one unique letter. A unique placement is only '
            f"possible on a {length}x1 or 1x{length} grid."
        )

    rng = SeededRandom(seed)
    candidates = _candidate_placements(word, width, height, orientation)
    if not candidates:
        raise InvalidInputError("No valid placements match the requested orientation.")

    for attempt, placement in enumerate(rng.shuffled(candidates), start=1):
        if attempt > max_attempts:
            break
        grid = LetterGrid(width, height)
        grid.place(placement)
        empties: List[Cell] = sorted(
            grid.empty_cells(),
            key=lambda cell: abs(cell[0] - placement.row) + abs(cell[1] - placement.col),
        )
        if UniqueWordFiller(grid, placement, distinct, rng).run(empties):
            LOGGER.debug(
                "Unique grid for '%s' found on attempt %d at (%d,%d) %s",
                word,
                attempt,
                placement.row,
                placement.col,
                placement.direction.value,
            )
            return [list(row) for row in grid.to_rows()]

    raise SearchExhaustedError(
        f"Couldn't build a unique grid for \"{word}\" at {width}x{height}. "
        "Try a different size, word, or increase max_attempts."
    )
