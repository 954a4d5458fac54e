"""Common value objects shared across domain modules."""

from .ids import FlashcardId

__all__ = [
    "FlashcardId",
]
