"""Smoke tests for the main window flow: home, test, results and back."""

import random

import pytest

from angle_practice.core.angle_generator import AngleGenerator
from angle_practice.core.session_controller import TestController
from angle_practice.core.session_reducer import UpdateTimer
from angle_practice.ui import main_window as main_window_module
from angle_practice.ui.main_window import MainWindow, Mode, mode_for_state


@pytest.fixture
def controller(storage, ticker, clock):
    controller = TestController(
        storage=storage,
        generator=AngleGenerator(rng=random.Random(3)),
        ticker=ticker,
        clock=clock,
    )
    with controller:
        yield controller


@pytest.fixture
def window(qtbot, controller):
    window = MainWindow(controller, confirm_dialogs=False)
    qtbot.addWidget(window)
    window.show()
    return window


def _click_correct_order(window):
    question = window.controller.current_question()
    widgets = {widget.angle.id: widget for widget in window.test_panel.angle_widgets}
    for angle_id in question.correct_order:
        widgets[angle_id].clicked.emit(angle_id)


class TestModes:
    def test_starts_on_home(self, window):
        assert window.mode is Mode.HOME
        assert window.mode_stack.currentWidget() is window.home_panel
        assert window.home_panel.history_list.count() == 0

    def test_start_button_enters_test(self, window):
        window.home_panel.start_button.click()
        assert window.mode is Mode.TEST
        assert window.mode_stack.currentWidget() is window.test_panel
        assert window.test_panel.question_label.text() == "Question 1 of 15"
        assert window.test_panel.timer_label.text() == "10:00"
        assert not window.test_panel.next_button.isEnabled()

    def test_ranking_enables_next(self, window):
        window.home_panel.start_button.click()
        _click_correct_order(window)

        panel = window.test_panel
        assert panel.answer_slots.filled_count() == 4
        assert panel.next_button.isEnabled()
        assert sorted(widget.selection_order for widget in panel.angle_widgets) == [1, 2, 3, 4]

        panel.next_button.click()
        assert panel.question_label.text() == "Question 2 of 15"
        assert panel.answer_slots.filled_count() == 0

    def test_timer_label_warns(self, window, ticker):
        window.home_panel.start_button.click()
        ticker.tick()
        assert window.test_panel.timer_label.text() == "09:59"

        window.controller.dispatch(UpdateTimer(30))
        assert window.test_panel.timer_label.text().startswith("00:30")
        assert "TIME LOW" in window.test_panel.timer_label.text()

    def test_submit_shows_results_then_home(self, window):
        window.home_panel.start_button.click()
        _click_correct_order(window)
        window.test_panel.next_button.click()
        window.test_panel.submit_button.click()

        assert window.mode is Mode.RESULTS
        assert window.results_panel.score_label.text() == "1/15"
        assert window.results_panel.review_list.count() == 15
        assert window.results_panel.save_warning_label.isHidden()

        window.results_panel.home_button.click()
        assert window.mode is Mode.HOME
        assert window.home_panel.history_list.count() == 1

    def test_new_test_from_results(self, window):
        window.home_panel.start_button.click()
        window.test_panel.submit_button.click()
        window.results_panel.new_test_button.click()
        assert window.mode is Mode.TEST
        assert window.test_panel.question_label.text() == "Question 1 of 15"


class TestRecoveryPrompt:
    def test_accepting_resumes(self, window, storage, session_factory, monkeypatch):
        storage.save_current_session(session_factory())
        monkeypatch.setattr(main_window_module, "confirm_resume_session", lambda *args: True)

        assert window.offer_recovery()
        assert window.mode is Mode.TEST

    def test_declining_discards(self, window, storage, session_factory, monkeypatch):
        storage.save_current_session(session_factory())
        monkeypatch.setattr(main_window_module, "confirm_resume_session", lambda *args: False)

        assert not window.offer_recovery()
        assert window.mode is Mode.HOME
        assert storage.get_current_session() is None

    def test_nothing_to_recover(self, window):
        assert not window.offer_recovery()


def test_mode_for_state(controller):
    assert mode_for_state(controller.state) is Mode.HOME
    controller.start_new_test()
    assert mode_for_state(controller.state) is Mode.TEST
    controller.submit_test()
    assert mode_for_state(controller.state) is Mode.RESULTS
