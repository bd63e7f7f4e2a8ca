"""Input validation and normalization shared by every generator."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from ..core.exceptions import InfeasibleConstraintError, InvalidInputError


def clean_token(text: Any) -> str:
    """Return ``text`` trimmed and upper-cased; ``None`` becomes ``""``."""

    if text is None:
        return ""
    return str(text).strip().upper()


def _ensure_list_like(value: Any, name: str) -> Sequence[Any]:
    if not isinstance(value, (list, tuple)):
        raise InvalidInputError(f"{name} must be a list of strings.")
    return value


def validate_dimensions(width: Any, height: Any) -> None:
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidInputError("width and height must be positive integers.")


def normalize_words(words: Sequence[Any]) -> List[str]:
    _ensure_list_like(words, "words")
    cleaned = (clean_token(word) for word in words)
    return [word for word in cleaned if word]


def build_allowed_letters(letters: Sequence[Any], words: Sequence[str]) -> List[str]:
    """Union of single-character caller letters and every letter of ``words``.

    Order is first appearance (caller letters, then word letters) so that
    seeded draws from the list are reproducible.
    """

    _ensure_list_like(letters, "letters")
    allowed: Dict[str, None] = {}
    for token in letters:
        char = clean_token(token)
        if len(char) == 1:
            allowed.setdefault(char, None)
    for word in words:
        for char in word:
            allowed.setdefault(char, None)
    return list(allowed)


def required_counts(words: Sequence[str]) -> Dict[str, int]:
    return dict(Counter(words))


@dataclass
class PreparedInput:
    """Validated generator input."""

    words: List[str]
    letters: List[str]
    width: int
    height: int
    required: Dict[str, int] = field(default_factory=dict)

    @property
    def longest(self) -> int:
        return max((len(word) for word in self.words), default=0)

    @property
    def has_words(self) -> bool:
        return bool(self.words)


def prepare_input(
    words: Sequence[Any],
    letters: Sequence[Any],
    width: Any,
    height: Any,
) -> PreparedInput:
    _ensure_list_like(words, "words")
    _ensure_list_like(letters, "letters")
    validate_dimensions(width, height)

    clean_words = normalize_words(words)
    allowed = build_allowed_letters(letters, clean_words)
    if not clean_words and not allowed:
        raise InfeasibleConstraintError(
            "No words and empty letters; nothing to fill the grid with."
        )

    prepared = PreparedInput(
        words=clean_words,
        letters=allowed,
        width=width,
        height=height,
        required=required_counts(clean_words),
    )
    max_dim = max(width, height)
    if prepared.longest > max_dim:
        raise InfeasibleConstraintError(
            f"The longest word length ({prepared.longest}) exceeds "
            f"max(width, height) = {max_dim}."
        )
    return prepared


__all__ = [
    "PreparedInput",
    "build_allowed_letters",
    "clean_token",
    "normalize_words",
    "prepare_input",
    "required_counts",
    "validate_dimensions",
]
