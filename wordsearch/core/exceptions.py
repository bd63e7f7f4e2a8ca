"""Custom exception hierarchy for word search generation."""


class WordSearchError(Exception):
    """Base exception for generator failures."""


class InvalidInputError(WordSearchError):
    """Raised when arguments have the wrong type, shape or range."""


class InfeasibleConstraintError(WordSearchError):
    """Raised when the requested grid can never satisfy the word constraints."""


class SearchExhaustedError(WordSearchError):
    """Raised when no complete or partial solution could be constructed."""


class PlacementError(WordSearchError):
    """Raised when a word cannot be written at the requested position."""


class ValidationError(WordSearchError):
    """Raised when a finished grid fails its integrity checks."""
