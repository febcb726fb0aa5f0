"""Scoring for completed test sessions.

All functions are pure: they compare recorded answers against each
question's ``correct_order`` and never mutate the session.
"""

from __future__ import annotations

from collections.abc import Sequence

from angle_practice.constants.test_constants import ANGLES_PER_QUESTION, TOTAL_QUESTIONS
from angle_practice.core.models import (
    PerformanceLevel,
    PerformanceStats,
    Question,
    QuestionResult,
    TestSession,
)

UNKNOWN_COMPLETION_TIME = "Unknown"

# Ordered best first; the first threshold the percentage reaches wins.
PERFORMANCE_LEVELS: tuple[tuple[float, PerformanceLevel], ...] = (
    (
        90,
        PerformanceLevel(
            level="Excellent",
            description="Outstanding performance! You have excellent angle discrimination skills.",
            color="success",
        ),
    ),
    (
        80,
        PerformanceLevel(
            level="Good",
            description="Good performance! You have solid angle discrimination skills.",
            color="accent",
        ),
    ),
    (
        70,
        PerformanceLevel(
            level="Fair",
            description="Fair performance. Consider more practice to improve your skills.",
            color="warning",
        ),
    ),
    (
        60,
        PerformanceLevel(
            level="Needs Improvement",
            description="Your angle discrimination skills need improvement. More practice recommended.",
            color="caution",
        ),
    ),
    (
        0,
        PerformanceLevel(
            level="Poor",
            description="Significant improvement needed. Focus on practicing angle discrimination.",
            color="error",
        ),
    ),
)


def is_answer_correct(question: Question, user_answer: Sequence[str] | None) -> bool:
    """Exact ascending ranking required; short or missing answers are wrong."""
    if not user_answer or len(user_answer) != ANGLES_PER_QUESTION:
        return False
    return tuple(user_answer) == tuple(question.correct_order)


def calculate_score(session: TestSession) -> int:
    if not session.is_completed or not session.questions:
        return 0
    return sum(
        1
        for question, answer in zip(session.questions, session.user_answers)
        if is_answer_correct(question, answer)
    )


def generate_question_results(session: TestSession) -> list[QuestionResult]:
    if not session.is_completed or not session.questions:
        return []

    results: list[QuestionResult] = []
    for index, question in enumerate(session.questions):
        answer = session.user_answers[index] if index < len(session.user_answers) else None
        user_answer = tuple(answer or ())
        results.append(
            QuestionResult(
                question_id=question.id,
                user_answer=user_answer,
                correct_answer=tuple(question.correct_order),
                is_correct=is_answer_correct(question, user_answer),
            )
        )
    return results


def get_completion_time(session: TestSession) -> str:
    """Elapsed time as ``M:SS``, or ``"Unknown"`` without both timestamps."""
    if session.start_time is None or session.end_time is None:
        return UNKNOWN_COMPLETION_TIME
    total_seconds = int((session.end_time - session.start_time).total_seconds())
    minutes, seconds = divmod(max(0, total_seconds), 60)
    return f"{minutes}:{seconds:02d}"


def get_performance_level(score: int) -> PerformanceLevel:
    percentage = score * 100 / TOTAL_QUESTIONS
    for threshold, level in PERFORMANCE_LEVELS:
        if percentage >= threshold:
            return level
    return PERFORMANCE_LEVELS[-1][1]


def get_performance_stats(session: TestSession) -> PerformanceStats:
    score = calculate_score(session)
    results = generate_question_results(session)
    passed = sum(1 for result in results if result.is_correct)
    return PerformanceStats(
        score=score,
        total_questions=TOTAL_QUESTIONS,
        percentage=round(score * 100 / TOTAL_QUESTIONS),
        completion_time=get_completion_time(session),
        question_results=tuple(results),
        passed_questions=passed,
        failed_questions=len(results) - passed,
    )
