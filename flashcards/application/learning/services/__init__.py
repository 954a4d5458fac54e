from .flashcard_parser import parse_flashcard, parse_flashcards

__all__ = [
    "parse_flashcard",
    "parse_flashcards",
]
