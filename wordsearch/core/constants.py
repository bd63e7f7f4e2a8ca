"""Shared constants and enumerations for the word search generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


DEFAULT_MAX_ITERATIONS = 50_000
PROGRESS_INTERVAL = 1000
DEFAULT_UNIQUE_ATTEMPTS = 500


class Direction(str, Enum):
    """Reading directions a word may be placed in."""

    HORIZONTAL = "H"
    VERTICAL = "V"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.HORIZONTAL else (1, 0)


class Strategy(str, Enum):
    """Available grid generation strategies."""

    FREE = "free"
    INTERSECTING = "intersecting"


class TieBreaker(str, Enum):
    """Ordering applied between placements with equal intersection scores."""

    RANDOM = "random"
    CENTER = "center"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
