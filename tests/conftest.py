"""Pytest configuration and fixtures."""

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta

import pytest
import structlog

from flashcards.config import get_settings


class FakeClock:
    """Clock that moves when told to, or by `tick` after every reading."""

    def __init__(self, start: datetime, tick: timedelta | None = None) -> None:
        self.now = start
        self.tick = tick
        self.reads = 0

    def __call__(self) -> datetime:
        current = self.now
        self.reads += 1
        if self.tick:
            self.now += self.tick
        return current

    def advance(self, **kwargs: float) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock starting at a fixed instant."""
    return FakeClock(datetime(2024, 1, 1, 12, 0, tzinfo=UTC))


@pytest.fixture(autouse=True)
def reset_config() -> Iterator[None]:
    """Give every test default settings and an unconfigured structlog."""
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
