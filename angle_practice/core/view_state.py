"""Derived, read-only views over ``TestState`` for the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass

from angle_practice.constants.test_constants import (
    ANGLES_PER_QUESTION,
    TIME_WARNING_THRESHOLD_SECONDS,
)
from angle_practice.core.models import Question, TestState


@dataclass(frozen=True, slots=True)
class ProgressView:
    current_question_index: int
    total_questions: int
    progress: float
    is_last_question: bool


@dataclass(frozen=True, slots=True)
class TimerView:
    time_remaining: int
    formatted_time: str
    is_warning: bool
    is_active: bool


@dataclass(frozen=True, slots=True)
class SelectionView:
    current_selections: tuple[str, ...]
    can_proceed: bool
    selection_count: int

    def is_angle_selected(self, angle_id: str) -> bool:
        return angle_id in self.current_selections

    def get_selection_order(self, angle_id: str) -> int | None:
        """1-based rank position of ``angle_id``, ``None`` if not picked."""
        if angle_id not in self.current_selections:
            return None
        return self.current_selections.index(angle_id) + 1


def current_question(state: TestState) -> Question | None:
    session = state.current_session
    if session is None or state.current_question_index >= len(session.questions):
        return None
    return session.questions[state.current_question_index]


def progress_view(state: TestState) -> ProgressView:
    total = state.total_questions
    index = state.current_question_index
    progress = (index + 1) / total if state.current_session is not None and total else 0.0
    return ProgressView(
        current_question_index=index,
        total_questions=total,
        progress=progress,
        is_last_question=index >= total - 1,
    )


def format_time(seconds: int) -> str:
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def timer_view(state: TestState) -> TimerView:
    return TimerView(
        time_remaining=state.time_remaining,
        formatted_time=format_time(state.time_remaining),
        is_warning=state.time_remaining <= TIME_WARNING_THRESHOLD_SECONDS,
        is_active=state.is_active,
    )


def selection_view(state: TestState) -> SelectionView:
    return SelectionView(
        current_selections=state.current_selections,
        can_proceed=len(state.current_selections) == ANGLES_PER_QUESTION,
        selection_count=len(state.current_selections),
    )
