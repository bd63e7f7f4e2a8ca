"""Word search grid generator.

This package exposes the public API surface via:

- ``wordsearch.engine.strategy.generate``: single entry point selecting a strategy.
- ``wordsearch.engine.free.FreeGridGenerator``: greedy random placement.
- ``wordsearch.engine.intersecting.IntersectingGridGenerator``: backtracking
  search with exact occurrence counts and intersection scoring.
- ``wordsearch.engine.unique.generate_unique_word_grid``: one word hidden once
  in a grid made of its own letters.
"""

from .core.constants import Direction, Strategy, TieBreaker
from .core.exceptions import (
    InfeasibleConstraintError,
    InvalidInputError,
    SearchExhaustedError,
    WordSearchError,
)
from .core.models import GenerationOptions, GenerationResult, Placement
from .engine.free import FreeGridGenerator
from .engine.intersecting import IntersectingGridGenerator
from .engine.strategy import GridGenerator, generate, get_generator
from .engine.unique import generate_unique_word_grid

__all__ = [
    "Direction",
    "FreeGridGenerator",
    "GenerationOptions",
    "GenerationResult",
    "GridGenerator",
    "InfeasibleConstraintError",
    "IntersectingGridGenerator",
    "InvalidInputError",
    "Placement",
    "SearchExhaustedError",
    "Strategy",
    "TieBreaker",
    "WordSearchError",
    "generate",
    "generate_unique_word_grid",
    "get_generator",
]

__version__ = "0.1.0"
