"""Data models supporting the word search generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from .constants import DEFAULT_MAX_ITERATIONS, Direction, Strategy, TieBreaker
from .exceptions import InvalidInputError

Seed = Union[int, float, str]
ProgressCallback = Callable[[float], None]

STRATEGY_ALIASES = {"intersections": Strategy.INTERSECTING}


@dataclass(frozen=True)
class Placement:
    """A word committed to a start cell and reading direction."""

    word: str
    row: int
    col: int
    direction: Direction
    score: int = field(default=0, compare=False)

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.row + dr * i, self.col + dc * i) for i in range(len(self.word))]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "row": self.row,
            "col": self.col,
            "dir": self.direction.value,
        }


def parse_strategy(value: Union[Strategy, str]) -> Strategy:
    if isinstance(value, Strategy):
        return value
    key = str(value).strip().lower()
    if key in STRATEGY_ALIASES:
        return STRATEGY_ALIASES[key]
    try:
        return Strategy(key)
    except ValueError:
        choices = ", ".join(s.value for s in Strategy)
        raise InvalidInputError(f"Unknown strategy '{value}' (expected one of: {choices})") from None


def parse_tie_breaker(value: Union[TieBreaker, str]) -> TieBreaker:
    if isinstance(value, TieBreaker):
        return value
    try:
        return TieBreaker(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(t.value for t in TieBreaker)
        raise InvalidInputError(f"Unknown tie breaker '{value}' (expected one of: {choices})") from None


@dataclass
class GenerationOptions:
    """Caller-tunable knobs shared by every generation strategy."""

    strategy: Strategy = Strategy.FREE
    seed: Optional[Seed] = None
    tie_breaker: TieBreaker = TieBreaker.RANDOM
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    on_progress: Optional[ProgressCallback] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.strategy = parse_strategy(self.strategy)
        self.tie_breaker = parse_tie_breaker(self.tie_breaker)
        if (
            isinstance(self.max_iterations, bool)
            or not isinstance(self.max_iterations, int)
            or self.max_iterations < 0
        ):
            raise InvalidInputError("max_iterations must be a non-negative integer.")

    def report_progress(self, fraction: float) -> None:
        if self.on_progress is not None:
            self.on_progress(min(1.0, max(0.0, fraction)))


@dataclass
class GenerationResult:
    """Finished grid plus the placements that produced it."""

    grid: List[str]
    placements: List[Placement] = field(default_factory=list)
    partial: bool = False
    iterations: int = 0
    intersections: int = 0
    seed: Optional[Seed] = None

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def placed_words(self) -> List[str]:
        return [placement.word for placement in self.placements]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "grid": list(self.grid),
            "placements": [placement.to_dict() for placement in self.placements],
            "partial": self.partial,
        }
