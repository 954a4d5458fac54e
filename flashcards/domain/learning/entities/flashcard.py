"""
Flashcard entity for question/answer study cards.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TypeGuard

from flashcards.domain.common.clock import Clock, utc_now
from flashcards.domain.common.entity import Entity
from flashcards.domain.common.exceptions import ValidationError
from flashcards.domain.common.value_objects import FlashcardId

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5
DEFAULT_DIFFICULTY = 1


def is_valid_difficulty(value: object) -> TypeGuard[int]:
    """Check that a difficulty is an integer within the allowed range."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_DIFFICULTY <= value <= MAX_DIFFICULTY


def _parse_timestamp(value: object, field_name: str) -> datetime | None:
    """
    Parse a serialized timestamp.

    Accepts datetimes, ISO-8601 strings and epoch milliseconds.
    Naive values are taken as UTC. Empty values give None so the
    entity fills them from its clock.
    """
    if not value:
        return None

    label = "CreatedAt" if field_name == "created_at" else "UpdatedAt"
    error = ValidationError(f"{label} must be a valid timestamp", field=field_name, value=value)

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError as err:
            raise error from err
    elif isinstance(value, int | float) and not isinstance(value, bool):
        try:
            parsed = datetime.fromtimestamp(value / 1000, UTC)
        except (OverflowError, OSError, ValueError) as err:
            raise error from err
    else:
        raise error

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _first_present(data: Mapping[str, object], *keys: str) -> object:
    for key in keys:
        if data.get(key):
            return data[key]
    return None


@dataclass(eq=False)
class Flashcard(Entity[FlashcardId]):
    """
    Question/answer card tagged with categories and a difficulty rating.

    Business Rules:
    - Id, question and answer are always present
    - Id cannot be reassigned after construction
    - Categories never contain duplicates added through add_category
    - Difficulty stays within 1..5; out-of-range updates are ignored
    - updated_at never moves backwards and tracks the last accepted change

    Direct construction trusts its arguments. Use from_object to hydrate
    from untrusted data.
    """

    # Identity
    id: FlashcardId

    # Content
    question: str
    answer: str
    categories: list[str]
    difficulty: int = DEFAULT_DIFFICULTY

    # Timestamps
    created_at: datetime | None = None
    updated_at: datetime | None = None

    clock: Clock = field(default=utc_now, kw_only=True, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Fill missing timestamps from a single clock reading."""
        if self.created_at is None or self.updated_at is None:
            now = self.clock()
            if self.created_at is None:
                self.created_at = now
            if self.updated_at is None:
                self.updated_at = now
        # Naive timestamps are UTC so updated_at stays comparable with the clock
        if self.created_at.tzinfo is None:
            self.created_at = self.created_at.replace(tzinfo=UTC)
        if self.updated_at.tzinfo is None:
            self.updated_at = self.updated_at.replace(tzinfo=UTC)

    def __setattr__(self, name: str, value: object) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Flashcard id cannot be changed")
        super().__setattr__(name, value)

    # Query methods
    def has_category(self, category: str) -> bool:
        """Check if the card is tagged with the exact category."""
        return category in self.categories

    # Command methods
    def add_category(self, category: str) -> None:
        """
        Tag the card with a category.

        Adding a category that is already present changes nothing,
        including updated_at.
        """
        if category not in self.categories:
            self.categories.append(category)
            self._touch()

    def remove_category(self, category: str) -> None:
        """
        Remove every occurrence of a category.

        updated_at is refreshed even when the category was not present.
        """
        self.categories = [existing for existing in self.categories if existing != category]
        self._touch()

    def update_difficulty(self, new_difficulty: int) -> None:
        """
        Change the difficulty rating.

        Values outside 1..5 are ignored without raising.
        """
        if is_valid_difficulty(new_difficulty):
            self.difficulty = new_difficulty
            self._touch()

    def _touch(self) -> None:
        now = self.clock()
        if self.updated_at is None or now > self.updated_at:
            self.updated_at = now

    # Factory methods
    @classmethod
    def from_object(cls, data: Mapping[str, object], *, clock: Clock = utc_now) -> "Flashcard":
        """
        Hydrate a flashcard from an untyped mapping.

        Args:
            data: Mapping with id, question, answer, categories and optional
                difficulty, created_at/createdAt and updated_at/updatedAt keys
            clock: Time source for missing timestamps

        Returns:
            Validated Flashcard instance

        Raises:
            ValidationError: If a required field is missing or malformed
        """
        raw_id = data.get("id")
        question = data.get("question")
        answer = data.get("answer")
        categories = data.get("categories")

        if not raw_id:
            raise ValidationError("Id is required", field="id")
        if not question:
            raise ValidationError("Question is required", field="question")
        if not answer:
            raise ValidationError("Answer is required", field="answer")
        if categories is None or not isinstance(categories, list | tuple):
            raise ValidationError(
                "Categories must be an array", field="categories", value=categories
            )

        flashcard_id = cls._parse_id(raw_id)
        if not isinstance(question, str):
            raise ValidationError("Question must be a string", field="question", value=question)
        if not isinstance(answer, str):
            raise ValidationError("Answer must be a string", field="answer", value=answer)
        if not all(isinstance(category, str) for category in categories):
            raise ValidationError(
                "Categories must contain only strings", field="categories", value=categories
            )

        difficulty = DEFAULT_DIFFICULTY
        raw_difficulty = data.get("difficulty")
        if raw_difficulty is not None:
            if not is_valid_difficulty(raw_difficulty):
                raise ValidationError(
                    f"Difficulty must be between {MIN_DIFFICULTY} and {MAX_DIFFICULTY}",
                    field="difficulty",
                    value=raw_difficulty,
                )
            difficulty = raw_difficulty

        created_at = _parse_timestamp(_first_present(data, "created_at", "createdAt"), "created_at")
        updated_at = _parse_timestamp(_first_present(data, "updated_at", "updatedAt"), "updated_at")

        return cls(
            flashcard_id,
            question,
            answer,
            list(categories),
            difficulty,
            created_at,
            updated_at,
            clock=clock,
        )

    @staticmethod
    def _parse_id(raw_id: object) -> FlashcardId:
        if isinstance(raw_id, FlashcardId):
            return raw_id
        if isinstance(raw_id, bool) or not isinstance(raw_id, int):
            raise ValidationError("Id must be an integer", field="id", value=raw_id)
        if raw_id < 0:
            raise ValidationError("Id must be positive", field="id", value=raw_id)
        return FlashcardId(raw_id)
