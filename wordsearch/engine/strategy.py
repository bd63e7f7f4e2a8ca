"""Strategy selection and the single public generation entry point."""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Sequence, Union

from ..core.constants import Strategy
from ..core.models import GenerationOptions, GenerationResult, parse_strategy
from .free import FreeGridGenerator
from .intersecting import IntersectingGridGenerator


class GridGenerator(Protocol):
    """Protocol implemented by all grid generation strategies."""

    def generate(
        self,
        words: Sequence[Any],
        letters: Sequence[Any],
        width: int,
        height: int,
        options: Optional[GenerationOptions] = None,
    ) -> GenerationResult:
        ...


GENERATORS: Dict[Strategy, type] = {
    Strategy.FREE: FreeGridGenerator,
    Strategy.INTERSECTING: IntersectingGridGenerator,
}


def get_generator(strategy: Union[Strategy, str]) -> GridGenerator:
    return GENERATORS[parse_strategy(strategy)]()


def generate(
    words: Sequence[Any],
    letters: Sequence[Any],
    width: int,
    height: int,
    options: Optional[GenerationOptions] = None,
    **overrides: Any,
) -> GenerationResult:
    """Generate a word search grid with the strategy named in ``options``.

    Keyword ``overrides`` (``strategy``, ``seed``, ``tie_breaker``,
    ``max_iterations``, ``on_progress``) build the options when none are
    given, or replace fields of the given ones.
    """

    if options is None:
        options = GenerationOptions(**overrides)
    elif overrides:
        fields = {**vars(options), **overrides}
        options = GenerationOptions(**fields)
    return get_generator(options.strategy).generate(words, letters, width, height, options)
