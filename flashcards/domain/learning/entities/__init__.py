"""Learning domain entities."""

from .flashcard import (
    DEFAULT_DIFFICULTY,
    MAX_DIFFICULTY,
    MIN_DIFFICULTY,
    Flashcard,
    is_valid_difficulty,
)

__all__ = [
    "DEFAULT_DIFFICULTY",
    "MAX_DIFFICULTY",
    "MIN_DIFFICULTY",
    "Flashcard",
    "is_valid_difficulty",
]
