"""Word list helpers used to prepare generator input."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from ..utils.rng import SeededRandom
from .normalization import clean_token


def filter_words_by_dimensions(words: Iterable[str], width: int, height: int) -> List[str]:
    """Keep only the words that fit both across and down."""

    return [word for word in words if len(word) <= width and len(word) <= height]


def pick_random_words(
    words: Sequence[str],
    count: int,
    rng: Optional[SeededRandom] = None,
) -> List[str]:
    """Return up to ``count`` distinct words in random order."""

    if not words or count <= 0:
        return []
    pool = list(dict.fromkeys(words))
    (rng or SeededRandom()).shuffle(pool)
    return pool[: min(count, len(pool))]


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""

    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(clean_token(line))
    return entries


__all__ = ["filter_words_by_dimensions", "parse_words_file", "pick_random_words"]
