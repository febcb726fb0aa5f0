"""Schema-checked conversion between ``TestSession`` and persisted JSON blobs.

Blobs use the camelCase layout of the stored format::

    {"id": "test-1700000000000", "questions": [...15 items...],
     "userAnswers": [[...] | null, ...15 items...], "startTime": "...",
     "endTime": null, "isCompleted": false, "score": null}

Decoding either yields a fully valid ``TestSession`` or raises
``SessionDecodeError``; partially valid blobs are never returned.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError

from angle_practice.constants.test_constants import ANGLES_PER_QUESTION, TOTAL_QUESTIONS
from angle_practice.core.models import Angle, Question, TestSession


class SessionDecodeError(ValueError):
    """Raised when a stored blob is not a well-formed test session."""


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class AngleRecord(_Record):
    id: StrictStr
    degrees: float = Field(ge=0, le=180)
    rotation: int = Field(ge=0, lt=360)
    arm_length_1: int = Field(alias="armLength1", gt=0)
    arm_length_2: int = Field(alias="armLength2", gt=0)


class QuestionRecord(_Record):
    id: int = Field(ge=1)
    angles: list[AngleRecord] = Field(min_length=ANGLES_PER_QUESTION, max_length=ANGLES_PER_QUESTION)
    correct_order: list[StrictStr] = Field(
        alias="correctOrder", min_length=ANGLES_PER_QUESTION, max_length=ANGLES_PER_QUESTION
    )


class SessionRecord(_Record):
    id: StrictStr
    questions: list[QuestionRecord] = Field(min_length=TOTAL_QUESTIONS, max_length=TOTAL_QUESTIONS)
    user_answers: list[list[StrictStr] | None] = Field(
        alias="userAnswers", min_length=TOTAL_QUESTIONS, max_length=TOTAL_QUESTIONS
    )
    start_time: datetime = Field(alias="startTime")
    end_time: datetime | None = Field(default=None, alias="endTime")
    is_completed: StrictBool = Field(alias="isCompleted")
    score: int | None = Field(default=None, ge=0, le=TOTAL_QUESTIONS)


def _aware(value: datetime | None) -> datetime | None:
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def encode_session(session: TestSession) -> dict[str, Any]:
    """Return the JSON-ready blob for ``session``."""
    record = SessionRecord(
        id=session.id,
        questions=[
            QuestionRecord(
                id=question.id,
                angles=[
                    AngleRecord(
                        id=angle.id,
                        degrees=angle.degrees,
                        rotation=angle.rotation,
                        arm_length_1=angle.arm_length_1,
                        arm_length_2=angle.arm_length_2,
                    )
                    for angle in question.angles
                ],
                correct_order=list(question.correct_order),
            )
            for question in session.questions
        ],
        user_answers=[list(answer) if answer is not None else None for answer in session.user_answers],
        start_time=session.start_time,
        end_time=session.end_time,
        is_completed=session.is_completed,
        score=session.score,
    )
    return record.model_dump(mode="json", by_alias=True)


def decode_session(data: object) -> TestSession:
    """Validate ``data`` and build a ``TestSession`` from it."""
    try:
        record = SessionRecord.model_validate(data)
    except ValidationError as exc:
        raise SessionDecodeError(f"Invalid test session blob: {exc.error_count()} error(s)") from exc

    return TestSession(
        id=record.id,
        questions=tuple(
            Question(
                id=question.id,
                angles=tuple(
                    Angle(
                        id=angle.id,
                        degrees=angle.degrees,
                        rotation=angle.rotation,
                        arm_length_1=angle.arm_length_1,
                        arm_length_2=angle.arm_length_2,
                    )
                    for angle in question.angles
                ),
                correct_order=tuple(question.correct_order),
            )
            for question in record.questions
        ),
        user_answers=tuple(tuple(answer) if answer is not None else None for answer in record.user_answers),
        start_time=_aware(record.start_time),
        end_time=_aware(record.end_time),
        is_completed=record.is_completed,
        score=record.score,
    )
