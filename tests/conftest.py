"""Shared fixtures: fixed clock, manual ticker and hand-built sessions."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
import os

# Widgets are created without a display in CI.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from angle_practice.core.models import Angle, Question, TestSession
from angle_practice.core.services.key_value_store import InMemoryStore
from angle_practice.core.services.session_storage import SessionStorage

START = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
DEFAULT_DEGREES = (20.0, 35.5, 50.0, 90.0)


class FakeClock:
    """Clock frozen at ``current`` until advanced."""

    def __init__(self, start: datetime = START) -> None:
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += timedelta(seconds=seconds)


class FakeTicker:
    """Ticker driven by hand through ``tick()``."""

    def __init__(self) -> None:
        self.callback = None
        self.start_count = 0
        self.stop_count = 0

    def start(self, callback) -> None:
        self.callback = callback
        self.start_count += 1

    def stop(self) -> None:
        self.callback = None
        self.stop_count += 1

    def is_running(self) -> bool:
        return self.callback is not None

    def tick(self, times: int = 1) -> None:
        for _ in range(times):
            if self.callback is None:
                return
            self.callback()


def build_question(question_id: int, degrees: tuple[float, ...] = DEFAULT_DEGREES) -> Question:
    """Question whose display order is the reverse of its ranking."""
    angles = tuple(
        Angle(
            id=f"q{question_id}-{index}",
            degrees=value,
            rotation=(index * 90) % 360,
            arm_length_1=60,
            arm_length_2=120,
        )
        for index, value in enumerate(degrees)
    )
    correct_order = tuple(angle.id for angle in sorted(angles, key=lambda angle: angle.degrees))
    return Question(id=question_id, angles=tuple(reversed(angles)), correct_order=correct_order)


def build_session(
    started_at: datetime = START,
    answers=None,
    completed: bool = False,
    ended_at: datetime | None = None,
    score: int | None = None,
) -> TestSession:
    session = TestSession.create([build_question(i) for i in range(1, 16)], started_at=started_at)
    if answers is not None:
        for index, answer in enumerate(answers):
            if answer is not None:
                session = session.with_answer(index, answer)
    if completed:
        session = session.freeze(ended_at or started_at + timedelta(minutes=5))
    if score is not None:
        session = replace(session, score=score)
    return session


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ticker():
    return FakeTicker()


@pytest.fixture
def question_factory():
    return build_question


@pytest.fixture
def session_factory():
    return build_session


@pytest.fixture
def memory_store():
    return InMemoryStore()


@pytest.fixture
def storage(memory_store):
    return SessionStorage(memory_store)
