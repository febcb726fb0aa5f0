"""Pure reducer governing one test attempt.

``session_reducer(state, action)`` is total over the action vocabulary below:
invalid or out-of-place actions return the same ``state`` object unchanged,
never raise. Randomness lives in the generator; the only external input is
the ``now`` callable used to stamp ``end_time`` when a session is frozen.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum, auto
from typing import ClassVar

from angle_practice.constants.test_constants import ANGLES_PER_QUESTION, TEST_DURATION_SECONDS
from angle_practice.core.models import TestSession, TestState, utc_now


class ActionType(Enum):
    START_TEST = auto()
    SELECT_ANGLE = auto()
    DESELECT_ANGLE = auto()
    CLEAR_SELECTIONS = auto()
    NEXT_QUESTION = auto()
    SUBMIT_TEST = auto()
    UPDATE_TIMER = auto()
    END_TEST = auto()
    LOAD_SESSION = auto()
    RESET_TEST = auto()


@dataclass(frozen=True, slots=True)
class StartTest:
    type: ClassVar[ActionType] = ActionType.START_TEST
    session: TestSession


@dataclass(frozen=True, slots=True)
class SelectAngle:
    type: ClassVar[ActionType] = ActionType.SELECT_ANGLE
    angle_id: str


@dataclass(frozen=True, slots=True)
class DeselectAngle:
    type: ClassVar[ActionType] = ActionType.DESELECT_ANGLE
    angle_id: str


@dataclass(frozen=True, slots=True)
class ClearSelections:
    type: ClassVar[ActionType] = ActionType.CLEAR_SELECTIONS


@dataclass(frozen=True, slots=True)
class NextQuestion:
    type: ClassVar[ActionType] = ActionType.NEXT_QUESTION


@dataclass(frozen=True, slots=True)
class SubmitTest:
    type: ClassVar[ActionType] = ActionType.SUBMIT_TEST


@dataclass(frozen=True, slots=True)
class UpdateTimer:
    type: ClassVar[ActionType] = ActionType.UPDATE_TIMER
    seconds: int


@dataclass(frozen=True, slots=True)
class EndTest:
    type: ClassVar[ActionType] = ActionType.END_TEST


@dataclass(frozen=True, slots=True)
class LoadSession:
    type: ClassVar[ActionType] = ActionType.LOAD_SESSION
    session: TestSession


@dataclass(frozen=True, slots=True)
class ResetTest:
    type: ClassVar[ActionType] = ActionType.RESET_TEST


TestAction = (
    StartTest
    | SelectAngle
    | DeselectAngle
    | ClearSelections
    | NextQuestion
    | SubmitTest
    | UpdateTimer
    | EndTest
    | LoadSession
    | ResetTest
)


def initial_state() -> TestState:
    return TestState()


def session_reducer(
    state: TestState,
    action: object,
    *,
    now: Callable[[], datetime] = utc_now,
) -> TestState:
    """Return the state that follows ``action``; unknown actions are no-ops."""
    if isinstance(action, StartTest):
        if action.session.is_completed:
            return state
        return TestState(
            current_session=action.session,
            current_question_index=0,
            time_remaining=TEST_DURATION_SECONDS,
            is_active=True,
            current_selections=(),
        )

    if isinstance(action, LoadSession):
        return TestState(
            current_session=action.session,
            current_question_index=0,
            time_remaining=TEST_DURATION_SECONDS,
            is_active=False,
            current_selections=(),
        )

    if isinstance(action, ResetTest):
        return initial_state()

    if state.current_session is None:
        # The remaining actions only apply to a loaded session.
        return state

    if isinstance(action, SelectAngle):
        return _select_angle(state, action.angle_id)

    if isinstance(action, DeselectAngle):
        return _truncate_at(state, action.angle_id)

    if isinstance(action, ClearSelections):
        if not state.current_selections:
            return state
        return replace(state, current_selections=())

    if isinstance(action, NextQuestion):
        return _next_question(state, now)

    if isinstance(action, SubmitTest):
        return _submit_test(state, now)

    if isinstance(action, UpdateTimer):
        seconds = max(0, int(action.seconds))
        if seconds == state.time_remaining:
            return state
        return replace(state, time_remaining=seconds)

    if isinstance(action, EndTest):
        session = state.current_session
        if session.is_completed:
            return state
        return _frozen(state, session, now())

    return state


def _select_angle(state: TestState, angle_id: str) -> TestState:
    if angle_id in state.current_selections:
        # Re-picking an angle undoes it and every pick made after it.
        return _truncate_at(state, angle_id)
    if len(state.current_selections) >= ANGLES_PER_QUESTION:
        return state
    return replace(state, current_selections=state.current_selections + (angle_id,))


def _truncate_at(state: TestState, angle_id: str) -> TestState:
    if angle_id not in state.current_selections:
        return state
    index = state.current_selections.index(angle_id)
    return replace(state, current_selections=state.current_selections[:index])


def _next_question(state: TestState, now: Callable[[], datetime]) -> TestState:
    session = state.current_session
    if (
        session is None
        or not state.is_active
        or session.is_completed
        or len(state.current_selections) != ANGLES_PER_QUESTION
    ):
        return state

    index = state.current_question_index
    answered = session.with_answer(index, state.current_selections)
    if index >= len(session.questions) - 1:
        return _frozen(state, answered, now())

    return replace(
        state,
        current_session=answered,
        current_question_index=index + 1,
        current_selections=(),
    )


def _submit_test(state: TestState, now: Callable[[], datetime]) -> TestState:
    session = state.current_session
    if session is None or session.is_completed:
        return state
    if state.current_selections:
        # Partial rankings are kept; scoring treats them as incorrect.
        session = session.with_answer(state.current_question_index, state.current_selections)
    return _frozen(state, session, now())


def _frozen(state: TestState, session: TestSession, ended_at: datetime) -> TestState:
    return replace(
        state,
        current_session=session.freeze(ended_at),
        is_active=False,
        current_selections=(),
    )
