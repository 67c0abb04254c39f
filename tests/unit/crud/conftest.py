"""Shared fixtures for crud unit tests"""

from datetime import datetime, timedelta, timezone

import pytest

from docstore.crud.memory_repo import DocumentStore
from docstore.crud.models import Author


T0 = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class StepClock:
    """Deterministic clock: returns start, start+step, start+2*step, ... on successive calls."""

    def __init__(self, start: datetime = T0, step: timedelta = timedelta(seconds=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        return value


@pytest.fixture(name="clock")
def clock_fixture():
    return StepClock()


@pytest.fixture(name="store")
def store_fixture(clock):
    """Empty store with a stepping clock; each save that stamps created advances one second."""
    return DocumentStore(clock=clock)


@pytest.fixture(name="author")
def author_fixture():
    return Author(id="a1", name="Ada")

