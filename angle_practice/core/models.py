"""Domain models for the angle practice test."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone

from angle_practice.constants.test_constants import TEST_DURATION_SECONDS, TOTAL_QUESTIONS

UserAnswer = tuple[str, ...] | None


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class Angle:
    """One ranking item. Only ``degrees`` is graded; the rest is display data."""

    id: str
    degrees: float
    rotation: int
    arm_length_1: int
    arm_length_2: int


@dataclass(frozen=True, slots=True)
class Question:
    """Four angles in shuffled display order plus the ascending ground truth."""

    id: int
    angles: tuple[Angle, ...]
    correct_order: tuple[str, ...]

    def angle_by_id(self, angle_id: str) -> Angle | None:
        return next((angle for angle in self.angles if angle.id == angle_id), None)


@dataclass(frozen=True, slots=True)
class TestSession:
    """One complete attempt at the battery."""

    __test__ = False  # not a pytest test class

    id: str
    questions: tuple[Question, ...]
    user_answers: tuple[UserAnswer, ...]
    start_time: datetime
    end_time: datetime | None = None
    is_completed: bool = False
    score: int | None = None

    @classmethod
    def create(cls, questions: list[Question], started_at: datetime | None = None) -> TestSession:
        started_at = started_at or utc_now()
        return cls(
            id=f"test-{int(started_at.timestamp() * 1000)}",
            questions=tuple(questions),
            user_answers=(None,) * len(questions),
            start_time=started_at,
        )

    def with_answer(self, index: int, answer: tuple[str, ...]) -> TestSession:
        answers = list(self.user_answers)
        answers[index] = tuple(answer)
        return replace(self, user_answers=tuple(answers))

    def freeze(self, ended_at: datetime) -> TestSession:
        return replace(self, end_time=ended_at, is_completed=True)


@dataclass(frozen=True, slots=True)
class TestState:
    """Live view of at most one active or recently completed session."""

    __test__ = False

    current_session: TestSession | None = None
    current_question_index: int = 0
    time_remaining: int = TEST_DURATION_SECONDS
    is_active: bool = False
    current_selections: tuple[str, ...] = ()

    @property
    def total_questions(self) -> int:
        if self.current_session is None:
            return TOTAL_QUESTIONS
        return len(self.current_session.questions)


@dataclass(frozen=True, slots=True)
class QuestionResult:
    """Per-question grading outcome for the review screen."""

    question_id: int
    user_answer: tuple[str, ...]
    correct_answer: tuple[str, ...]
    is_correct: bool


@dataclass(frozen=True, slots=True)
class PerformanceLevel:
    level: str
    description: str
    color: str  # palette role, resolved by the styling layer


@dataclass(frozen=True, slots=True)
class PerformanceStats:
    score: int
    total_questions: int
    percentage: int
    completion_time: str
    question_results: tuple[QuestionResult, ...]
    passed_questions: int
    failed_questions: int
