"""Application service for hydrating flashcards from serialized data."""

from collections.abc import Iterable, Mapping

import structlog

from flashcards.application.common.result import Failure, Result, Success
from flashcards.domain.common.clock import Clock, utc_now
from flashcards.domain.common.exceptions import ValidationError
from flashcards.domain.learning.entities.flashcard import Flashcard

logger = structlog.get_logger(__name__)


def parse_flashcard(
    data: Mapping[str, object], *, clock: Clock = utc_now
) -> Result[Flashcard, ValidationError]:
    """
    Build a flashcard from an untyped mapping without raising.

    Args:
        data: Serialized flashcard, e.g. decoded JSON from storage or a request body
        clock: Time source for missing timestamps

    Returns:
        Success with the flashcard, or Failure carrying the ValidationError
    """
    try:
        flashcard = Flashcard.from_object(data, clock=clock)
    except ValidationError as err:
        logger.warning(
            "flashcard_validation_failed",
            field=err.field,
            error=err.message,
        )
        return Failure(err)

    logger.debug(
        "flashcard_parsed",
        flashcard_id=flashcard.id.value,
        category_count=len(flashcard.categories),
    )
    return Success(flashcard)


def parse_flashcards(
    items: Iterable[Mapping[str, object]], *, clock: Clock = utc_now
) -> list[Result[Flashcard, ValidationError]]:
    """Parse several flashcards, keeping input order."""
    results = [parse_flashcard(item, clock=clock) for item in items]

    failures = sum(1 for result in results if result.is_failure)
    if failures:
        logger.info("flashcards_parsed", total=len(results), failed=failures)
    return results
