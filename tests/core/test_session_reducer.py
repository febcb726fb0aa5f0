"""Tests for the pure session state machine."""

from datetime import datetime, timezone

import pytest

from angle_practice.core.models import TestState
from angle_practice.core.session_reducer import (
    ActionType,
    ClearSelections,
    DeselectAngle,
    EndTest,
    LoadSession,
    NextQuestion,
    ResetTest,
    SelectAngle,
    StartTest,
    SubmitTest,
    UpdateTimer,
    initial_state,
    session_reducer,
)

END = datetime(2024, 1, 1, 9, 7, tzinfo=timezone.utc)


def _now():
    return END


def reduce(state, *actions):
    for action in actions:
        state = session_reducer(state, action, now=_now)
    return state


@pytest.fixture
def active_state(session_factory):
    return reduce(initial_state(), StartTest(session_factory()))


def _select_all(state):
    question = state.current_session.questions[state.current_question_index]
    return reduce(state, *(SelectAngle(angle_id) for angle_id in question.correct_order))


class TestStartAndReset:
    def test_initial_state(self):
        state = initial_state()
        assert state == TestState(
            current_session=None,
            current_question_index=0,
            time_remaining=600,
            is_active=False,
            current_selections=(),
        )

    def test_start_activates_fresh_session(self, session_factory):
        session = session_factory()
        state = reduce(initial_state(), StartTest(session))
        assert state.current_session is session
        assert state.is_active
        assert state.time_remaining == 600
        assert state.current_question_index == 0
        assert state.current_selections == ()

    def test_start_discards_previous_live_state(self, active_state, session_factory):
        state = reduce(active_state, SelectAngle("q1-0"), UpdateTimer(100))
        other = session_factory(started_at=datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc))
        restarted = reduce(state, StartTest(other))
        assert restarted.current_session is other
        assert restarted.time_remaining == 600
        assert restarted.current_selections == ()

    def test_start_ignores_completed_session(self, session_factory):
        state = initial_state()
        assert session_reducer(state, StartTest(session_factory(completed=True))) is state

    def test_completed_session_cannot_be_restarted(self, active_state):
        completed = reduce(active_state, SubmitTest())
        assert session_reducer(completed, StartTest(completed.current_session)) is completed
        assert not completed.is_active

    def test_reset_from_active(self, active_state):
        state = reduce(active_state, SelectAngle("q1-2"), UpdateTimer(42))
        assert reduce(state, ResetTest()) == initial_state()

    def test_reset_from_completed(self, active_state):
        state = reduce(active_state, SubmitTest())
        assert reduce(state, ResetTest()) == initial_state()

    def test_reset_from_initial(self):
        assert reduce(initial_state(), ResetTest()) == initial_state()


class TestSelections:
    def test_select_appends(self, active_state):
        state = reduce(active_state, SelectAngle("a"), SelectAngle("b"))
        assert state.current_selections == ("a", "b")

    def test_reselect_truncates(self, active_state):
        state = reduce(active_state, SelectAngle("A"), SelectAngle("B"), SelectAngle("C"))
        assert reduce(state, SelectAngle("B")).current_selections == ("A",)

    def test_deselect_truncates(self, active_state):
        state = reduce(active_state, SelectAngle("A"), SelectAngle("B"), SelectAngle("C"))
        assert reduce(state, DeselectAngle("B")).current_selections == ("A",)

    def test_reselect_first_clears_everything(self, active_state):
        state = reduce(active_state, SelectAngle("A"), SelectAngle("B"))
        assert reduce(state, SelectAngle("A")).current_selections == ()

    def test_deselect_unknown_is_noop(self, active_state):
        state = reduce(active_state, SelectAngle("A"))
        assert session_reducer(state, DeselectAngle("Z")) is state

    def test_four_cap(self, active_state):
        state = _select_all(active_state)
        assert len(state.current_selections) == 4
        assert session_reducer(state, SelectAngle("new-id")) is state

    def test_clear_selections(self, active_state):
        state = reduce(active_state, SelectAngle("A"), SelectAngle("B"))
        assert reduce(state, ClearSelections()).current_selections == ()

    def test_clear_when_empty_is_noop(self, active_state):
        assert session_reducer(active_state, ClearSelections()) is active_state


class TestNavigation:
    def test_next_requires_four_selections(self, active_state):
        state = reduce(active_state, SelectAngle("q1-0"), SelectAngle("q1-1"), SelectAngle("q1-2"))
        assert session_reducer(state, NextQuestion()) is state

    def test_next_records_answer_and_advances(self, active_state):
        state = _select_all(active_state)
        selections = state.current_selections
        advanced = reduce(state, NextQuestion())
        assert advanced.current_question_index == 1
        assert advanced.current_selections == ()
        assert advanced.current_session.user_answers[0] == selections
        assert advanced.is_active

    def test_full_battery_completes_session(self, active_state):
        state = active_state
        recorded = []
        for _ in range(15):
            state = _select_all(state)
            recorded.append(state.current_selections)
            state = reduce(state, NextQuestion())

        session = state.current_session
        assert not state.is_active
        assert session.is_completed
        assert session.end_time == END
        assert list(session.user_answers) == recorded
        assert all(answer is not None for answer in session.user_answers)

    def test_next_is_noop_when_inactive(self, session_factory):
        state = reduce(initial_state(), LoadSession(session_factory()))
        assert session_reducer(state, NextQuestion()) is state


class TestSubmitAndEnd:
    def test_submit_keeps_partial_selection(self, active_state):
        state = reduce(active_state, SelectAngle("q1-3"), SelectAngle("q1-2"))
        submitted = reduce(state, SubmitTest())
        session = submitted.current_session
        assert session.is_completed
        assert session.end_time == END
        assert session.user_answers[0] == ("q1-3", "q1-2")
        assert not submitted.is_active
        assert submitted.current_selections == ()

    def test_submit_without_selection_leaves_answer_empty(self, active_state):
        submitted = reduce(active_state, SubmitTest())
        assert submitted.current_session.user_answers[0] is None
        assert submitted.current_session.is_completed

    def test_submit_without_session_is_noop(self):
        state = initial_state()
        assert session_reducer(state, SubmitTest()) is state

    @pytest.mark.parametrize(
        "action",
        [SelectAngle("a"), DeselectAngle("a"), ClearSelections(), NextQuestion(), UpdateTimer(5), EndTest()],
    )
    def test_actions_without_session_are_noops(self, action):
        state = initial_state()
        assert session_reducer(state, action) is state

    def test_completed_session_is_never_rewritten(self, active_state):
        completed = reduce(active_state, SubmitTest())
        assert session_reducer(completed, SubmitTest()) is completed
        assert session_reducer(completed, EndTest()) is completed
        assert session_reducer(completed, NextQuestion()) is completed

    def test_end_test_freezes(self, active_state):
        state = reduce(active_state, SelectAngle("q1-0"))
        ended = reduce(state, EndTest())
        assert ended.current_session.is_completed
        assert ended.current_session.user_answers[0] is None
        assert not ended.is_active


class TestTimerAndLoad:
    def test_update_timer(self, active_state):
        assert reduce(active_state, UpdateTimer(321)).time_remaining == 321

    def test_update_timer_clamps_at_zero(self, active_state):
        assert reduce(active_state, UpdateTimer(-5)).time_remaining == 0

    def test_update_timer_same_value_is_noop(self, active_state):
        assert session_reducer(active_state, UpdateTimer(600)) is active_state

    def test_load_session_restarts_navigation(self, session_factory):
        answered = session_factory(answers=[("q1-0", "q1-1", "q1-2", "q1-3")])
        state = reduce(initial_state(), LoadSession(answered))
        assert state.current_session is answered
        assert state.current_question_index == 0
        assert state.time_remaining == 600
        assert not state.is_active
        assert state.current_selections == ()


class TestActions:
    def test_unknown_action_returns_same_state(self, active_state):
        assert session_reducer(active_state, object()) is active_state

    def test_actions_carry_type_tags(self, session_factory):
        assert StartTest(session_factory()).type is ActionType.START_TEST
        assert SelectAngle("x").type is ActionType.SELECT_ANGLE
        assert UpdateTimer(1).type is ActionType.UPDATE_TIMER
        assert ResetTest().type is ActionType.RESET_TEST
