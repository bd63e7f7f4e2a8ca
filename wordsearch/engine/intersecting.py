"""Backtracking word placement that favours letter-sharing intersections.

Every word must end up occurring exactly as many times as it was requested.
The search keeps going after the first solution and returns the one with the
most shared cells; when the iteration budget runs out before any complete
solution it falls back to the best partial layout it saw.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..core.constants import PROGRESS_INTERVAL, TieBreaker
from ..core.exceptions import SearchExhaustedError
from ..core.models import GenerationOptions, GenerationResult, Placement
from ..data.normalization import PreparedInput, prepare_input
from ..utils.logger import get_logger
from ..utils.rng import SeededRandom
from .filler import ConstrainedFiller
from .grid import Cell, LetterGrid


LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class WordEntry:
    """One requested word instance; duplicates get distinct ids."""

    id: int
    text: str

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass
class SearchState:
    """Grid plus the placements currently committed to it."""

    grid: LetterGrid
    placements: Dict[int, Placement] = field(default_factory=dict)
    intersections: int = 0

    def commit(self, entry: WordEntry, placement: Placement) -> List[Cell]:
        newly = self.grid.place(placement)
        self.placements[entry.id] = placement
        self.intersections += placement.score
        return newly

    def rollback(self, entry: WordEntry, placement: Placement, newly: Sequence[Cell]) -> None:
        self.intersections -= placement.score
        del self.placements[entry.id]
        self.grid.undo(newly)


@dataclass
class SearchRecord:
    placements: Dict[int, Placement]
    intersections: int
    rows: List[str]

    @property
    def placed_count(self) -> int:
        return len(self.placements)


class IntersectingSearch:
    """A single generation run; owns its grid and bookkeeping."""

    def __init__(self, prepared: PreparedInput, options: GenerationOptions, rng: SeededRandom) -> None:
        self.prepared = prepared
        self.options = options
        self.rng = rng
        self.state = SearchState(LetterGrid(prepared.width, prepared.height))
        self.filler = ConstrainedFiller(self.state.grid, prepared.letters, prepared.required, rng)
        self.entries = sorted(
            (WordEntry(index, word) for index, word in enumerate(prepared.words)),
            key=lambda entry: entry.length,
            reverse=True,
        )
        self.iterations = 0
        self.cancelled = False
        self.best: Optional[SearchRecord] = None
        self.best_partial: Optional[SearchRecord] = None

    @property
    def grid(self) -> LetterGrid:
        return self.state.grid

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def run(self) -> GenerationResult:
        max_iterations = self.options.max_iterations
        LOGGER.info(
            "Searching placements for %d words on a %dx%d grid (budget %d iterations)",
            len(self.entries),
            self.prepared.width,
            self.prepared.height,
            max_iterations,
        )
        self._search(self.entries)
        self.options.report_progress(1.0)

        if self.best is not None:
            LOGGER.info(
                "Found complete grid with %d intersections after %d iterations",
                self.best.intersections,
                self.iterations,
            )
            placements = [self.best.placements[entry.id] for entry in self.entries]
            return self._result(self.best, placements, partial=False)

        if self.best_partial is not None:
            LOGGER.warning(
                "No complete grid within budget; returning partial layout with %d/%d words",
                self.best_partial.placed_count,
                len(self.entries),
            )
            placements = list(self.best_partial.placements.values())
            return self._result(self.best_partial, placements, partial=True)

        # Cancellation only happens after a commit has been recorded as a
        # partial, so the budget message needs a search with no partial rule.
        if self.cancelled:
            message = f"Unable to generate a valid grid within {max_iterations} iterations."
        else:
            message = "Unable to generate a valid grid under the exactly-once constraint."
        LOGGER.warning(message)
        raise SearchExhaustedError(message)

    def _result(self, record: SearchRecord, placements: List[Placement], partial: bool) -> GenerationResult:
        return GenerationResult(
            grid=list(record.rows),
            placements=placements,
            partial=partial,
            iterations=self.iterations,
            intersections=record.intersections,
            seed=self.options.seed,
        )

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def _search(self, remaining: List[WordEntry]) -> None:
        if self.cancelled:
            return
        self._record_partial()

        current = self.iterations
        self.iterations += 1
        if current > self.options.max_iterations:
            LOGGER.info("Iteration budget of %d exhausted", self.options.max_iterations)
            self.cancelled = True
            return
        if self.iterations % PROGRESS_INTERVAL == 0:
            self.options.report_progress(self.iterations / max(1, self.options.max_iterations))

        if not remaining:
            self._complete()
            return

        choice = self._choose_next(remaining)
        if choice is None:
            return
        chosen, candidates = choice
        rest = [entry for entry in remaining if entry is not chosen]

        for placement in candidates:
            if self.cancelled:
                return
            newly = self.state.commit(chosen, placement)
            if self._within_limits():
                self._search(rest)
            self.state.rollback(chosen, placement, newly)
            if self.cancelled:
                return

    def _choose_next(
        self, remaining: List[WordEntry]
    ) -> Optional[Tuple[WordEntry, List[Placement]]]:
        """Most constrained word first; ``None`` when some word cannot be placed.

        Ties go to the longer word, then to the one with the better best score.
        """

        chosen = None
        best_key = None
        for entry in remaining:
            candidates = self._candidates(entry.text)
            if not candidates:
                return None
            key = (len(candidates), -entry.length, -candidates[0].score)
            if best_key is None or key < best_key:
                best_key = key
                chosen = (entry, candidates)
        return chosen

    def _candidates(self, word: str) -> List[Placement]:
        placements = self.grid.enumerate_placements(word)
        if self.options.tie_breaker == TieBreaker.CENTER:
            ties = [self.grid.distance_to_center(p) for p in placements]
        else:
            ties = [self.rng.random() for _ in placements]
        order = sorted(range(len(placements)), key=lambda i: (-placements[i].score, ties[i]))
        return [placements[i] for i in order]

    def _within_limits(self) -> bool:
        required = self.prepared.required
        return all(self.grid.count_occurrences(word) <= required[word] for word in required)

    def _complete(self) -> None:
        required = self.prepared.required
        if any(self.grid.count_occurrences(word) != required[word] for word in required):
            LOGGER.debug("Rejecting layout whose occurrence counts differ from the requested ones")
            return

        filled = self.filler.fill()
        if filled is None:
            return

        record = SearchRecord(
            placements=dict(self.state.placements),
            intersections=self.state.intersections,
            rows=self.grid.to_rows(),
        )
        if self.best is None or record.intersections > self.best.intersections:
            LOGGER.debug(
                "New best grid with %d intersections at iteration %d",
                record.intersections,
                self.iterations,
            )
            self.best = record
        self.grid.undo(filled)

    def _record_partial(self) -> None:
        placed = len(self.state.placements)
        if not placed:
            return
        best = self.best_partial
        if best is not None and (
            placed < best.placed_count
            or (placed == best.placed_count and self.state.intersections <= best.intersections)
        ):
            return
        letters = self.prepared.letters
        self.best_partial = SearchRecord(
            placements=dict(self.state.placements),
            intersections=self.state.intersections,
            rows=self.grid.to_rows(lambda: self.rng.choice(letters)),
        )


class IntersectingGridGenerator:
    """Exact-occurrence generator maximizing shared letters between words."""

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

        if not prepared.has_words:
            grid = LetterGrid(width, height)
            return GenerationResult(
                grid=grid.to_rows(lambda: rng.choice(prepared.letters)),
                seed=options.seed,
            )

        return IntersectingSearch(prepared, options, rng).run()
