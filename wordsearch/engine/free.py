"""Greedy random placement without backtracking."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from ..core.models import GenerationOptions, GenerationResult, Placement
from ..data.normalization import prepare_input
from ..utils.logger import get_logger
from ..utils.rng import SeededRandom
from .grid import LetterGrid


LOGGER = get_logger(__name__)


class FreeGridGenerator:
    """Place words longest-first at a random legal spot, then fill randomly.

    Words may overlap where their letters coincide. Nothing prevents an
    accidental second occurrence of a word in the random fill.
    """

    def generate(
        self,
        words: Sequence[Any],
        letters: Sequence[Any],
        width: int,
        height: int,
        options: Optional[GenerationOptions] = None,
    ) -> GenerationResult:
        options = options or GenerationOptions()
        prepared = prepare_input(words, letters, width, height)
        rng = SeededRandom(options.seed)
        grid = LetterGrid(width, height)

        ordered = sorted(prepared.words, key=len, reverse=True)
        placements: List[Placement] = []
        for word in ordered:
            candidates = grid.enumerate_placements(word)
            if not candidates:
                LOGGER.info(
                    "No room left for '%s'; stopping after %d/%d words",
                    word,
                    len(placements),
                    len(ordered),
                )
                break
            chosen = rng.choice(candidates)
            grid.place(chosen)
            placements.append(chosen)
            options.report_progress(len(placements) / len(ordered))

        rows = grid.to_rows(lambda: rng.choice(prepared.letters))
        options.report_progress(1.0)
        return GenerationResult(
            grid=rows,
            placements=placements,
            partial=len(placements) < len(ordered),
            intersections=sum(placement.score for placement in placements),
            seed=options.seed,
        )
