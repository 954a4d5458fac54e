"""Flashcard domain package."""
