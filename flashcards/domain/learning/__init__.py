"""
Learning bounded context - Domain layer.

This context handles flashcard-based learning features:
- Flashcard categories
- Difficulty rating

Entities:
- Flashcard: Question/answer study card
"""
