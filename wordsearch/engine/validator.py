"""Deterministic rule validation for generated grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Sequence

from ..core.exceptions import ValidationError
from ..core.models import GenerationResult
from ..data.normalization import build_allowed_letters, normalize_words, required_counts
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Checks a finished grid against the words and letters it was built from."""

    def __init__(self, words: Sequence[Any], letters: Sequence[Any]) -> None:
        self.words = normalize_words(words)
        self.letters = set(build_allowed_letters(letters, self.words))
        self.required = required_counts(self.words)

    def validate(
        self,
        result: GenerationResult,
        width: int,
        height: int,
        check_counts: bool = True,
    ) -> ValidationResult:
        """Run every check; occurrence counts are skipped for partial results."""

        try:
            self._check_shape(result, width, height)
            self._check_letters(result)
            grid = LetterGrid.from_rows(result.grid)
            self._check_placements(result, grid)
            if check_counts and not result.partial:
                self._check_counts(grid)
        except ValidationError as exc:
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def _check_shape(self, result: GenerationResult, width: int, height: int) -> None:
        if len(result.grid) != height:
            raise ValidationError(f"Expected {height} rows, got {len(result.grid)}")
        for r, row in enumerate(result.grid):
            if len(row) != width:
                raise ValidationError(f"Row {r} has {len(row)} cells, expected {width}")

    def _check_letters(self, result: GenerationResult) -> None:
        for r, row in enumerate(result.grid):
            for c, letter in enumerate(row):
                if letter not in self.letters:
                    raise ValidationError(f"Letter '{letter}' at ({r},{c}) is not allowed")

    def _check_placements(self, result: GenerationResult, grid: LetterGrid) -> None:
        for placement in result.placements:
            if grid.placement_score(
                placement.word, placement.row, placement.col, placement.direction
            ) != placement.length:
                raise ValidationError(
                    f"Placement of '{placement.word}' at ({placement.row},{placement.col}) "
                    f"{placement.direction.value} does not spell the word"
                )

    def _check_counts(self, grid: LetterGrid) -> None:
        for word, expected in self.required.items():
            found = grid.count_occurrences(word)
            if found != expected:
                raise ValidationError(
                    f"Word '{word}' occurs {found} times, expected {expected}"
                )
