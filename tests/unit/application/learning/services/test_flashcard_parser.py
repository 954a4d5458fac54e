"""Tests for flashcard parsing service."""

from structlog.testing import capture_logs

from flashcards.application.learning.services import parse_flashcard, parse_flashcards
from flashcards.domain.common.exceptions import ValidationError
from flashcards.domain.common.value_objects import FlashcardId
from tests.conftest import FakeClock


def test_parse_valid_flashcard(clock: FakeClock) -> None:
    """Test that a valid payload yields Success."""
    result = parse_flashcard(
        {"id": 1, "question": "Q", "answer": "A", "categories": ["math"]}, clock=clock
    )

    assert result.is_success
    flashcard = result.unwrap()
    assert flashcard.id == FlashcardId(1)
    assert flashcard.categories == ["math"]
    assert flashcard.difficulty == 1
    assert flashcard.updated_at == clock.now


def test_parse_invalid_flashcard_returns_failure() -> None:
    """Test that a validation error is returned, not raised."""
    result = parse_flashcard({"id": 1, "question": "", "answer": "A", "categories": []})

    assert result.is_failure
    error = result.unwrap_error()
    assert isinstance(error, ValidationError)
    assert error.message == "Question is required"
    assert error.field == "question"


def test_parse_failure_is_logged() -> None:
    """Test that validation failures are logged with the failing field."""
    with capture_logs() as logs:
        parse_flashcard({"id": 1, "question": "Q", "answer": "A", "categories": "math"})

    assert logs == [
        {
            "event": "flashcard_validation_failed",
            "log_level": "warning",
            "field": "categories",
            "error": "Categories must be an array",
        }
    ]


def test_parse_success_is_logged() -> None:
    """Test that parsed flashcards are logged at debug level."""
    with capture_logs() as logs:
        parse_flashcard({"id": 5, "question": "Q", "answer": "A", "categories": ["a", "b"]})

    assert logs == [
        {
            "event": "flashcard_parsed",
            "log_level": "debug",
            "flashcard_id": 5,
            "category_count": 2,
        }
    ]


def test_parse_many_keeps_order(clock: FakeClock) -> None:
    """Test that results follow input order and mix outcomes."""
    results = parse_flashcards(
        [
            {"id": 1, "question": "Q1", "answer": "A1", "categories": []},
            {"id": 0, "question": "Q2", "answer": "A2", "categories": []},
            {"id": 3, "question": "Q3", "answer": "A3", "categories": ["x"]},
        ],
        clock=clock,
    )

    assert [result.is_success for result in results] == [True, False, True]
    assert results[0].unwrap().id == FlashcardId(1)
    assert results[1].unwrap_error().message == "Id is required"
    assert results[2].unwrap().id == FlashcardId(3)


def test_parse_many_logs_summary_on_failures() -> None:
    """Test that a summary is logged when some payloads fail."""
    with capture_logs() as logs:
        parse_flashcards(
            [
                {"id": 1, "question": "Q", "answer": "A", "categories": []},
                {"id": 2, "question": "Q", "answer": "", "categories": []},
            ]
        )

    assert logs[-1] == {
        "event": "flashcards_parsed",
        "log_level": "info",
        "total": 2,
        "failed": 1,
    }


def test_parse_many_empty() -> None:
    """Test that an empty input gives an empty list."""
    assert parse_flashcards([]) == []
