"""Tests for the derived presentation views."""

from dataclasses import replace

import pytest

from angle_practice.core.session_reducer import SelectAngle, StartTest, initial_state, session_reducer
from angle_practice.core.view_state import (
    current_question,
    format_time,
    progress_view,
    selection_view,
    timer_view,
)


@pytest.fixture
def active_state(session_factory):
    return session_reducer(initial_state(), StartTest(session_factory()))


class TestProgress:
    def test_without_session(self):
        view = progress_view(initial_state())
        assert view.progress == 0.0
        assert view.total_questions == 15
        assert not view.is_last_question
        assert current_question(initial_state()) is None

    def test_first_question(self, active_state):
        view = progress_view(active_state)
        assert view.current_question_index == 0
        assert view.progress == pytest.approx(1 / 15)
        assert current_question(active_state).id == 1

    def test_last_question(self, active_state):
        state = replace(active_state, current_question_index=14)
        view = progress_view(state)
        assert view.is_last_question
        assert view.progress == pytest.approx(1.0)
        assert current_question(state).id == 15


class TestTimer:
    @pytest.mark.parametrize("seconds,text", [(600, "10:00"), (59, "00:59"), (0, "00:00"), (-3, "00:00")])
    def test_format_time(self, seconds, text):
        assert format_time(seconds) == text

    def test_warning_threshold(self, active_state):
        assert timer_view(replace(active_state, time_remaining=60)).is_warning
        assert not timer_view(replace(active_state, time_remaining=61)).is_warning

    def test_reflects_activity(self, active_state):
        view = timer_view(active_state)
        assert view.is_active
        assert view.formatted_time == "10:00"


class TestSelections:
    def test_selection_order_is_one_based(self, active_state):
        state = session_reducer(active_state, SelectAngle("q1-2"))
        state = session_reducer(state, SelectAngle("q1-0"))
        view = selection_view(state)
        assert view.get_selection_order("q1-2") == 1
        assert view.get_selection_order("q1-0") == 2
        assert view.get_selection_order("q1-1") is None
        assert view.is_angle_selected("q1-0")
        assert view.selection_count == 2
        assert not view.can_proceed

    def test_can_proceed_with_four(self, active_state):
        state = active_state
        for angle_id in ("q1-0", "q1-1", "q1-2", "q1-3"):
            state = session_reducer(state, SelectAngle(angle_id))
        assert selection_view(state).can_proceed
