"""Component summarizing a finished test."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from angle_practice.constants.ui_constants import (
    RESULTS_HOME_BUTTON,
    RESULTS_NEW_TEST_BUTTON,
    RESULTS_PERCENT_TEMPLATE,
    RESULTS_REVIEW_ROW_TEMPLATE,
    RESULTS_SCORE_TEMPLATE,
    RESULTS_TIME_TEMPLATE,
    RESULTS_TITLE,
    STORAGE_SAVE_FAILED_MESSAGE,
)
from angle_practice.core.models import Question, QuestionResult
from angle_practice.core.scoring import get_performance_level
from angle_practice.core.session_controller import TestController
from angle_practice.styling.color_palette import ColorPalette, Theme
from angle_practice.styling.styles import Styles


def _describe_order(order: tuple[str, ...], question: Question) -> str:
    if not order:
        return "(none)"
    labels = []
    for angle_id in order:
        angle = question.angle_by_id(angle_id)
        labels.append(f"{angle.degrees:g}\N{DEGREE SIGN}" if angle is not None else angle_id)
    return " < ".join(labels)


def format_review_row(result: QuestionResult, question: Question) -> str:
    return RESULTS_REVIEW_ROW_TEMPLATE.format(
        question_id=result.question_id,
        mark="correct" if result.is_correct else "wrong",
        user=_describe_order(result.user_answer, question),
        correct=_describe_order(result.correct_answer, question),
    )


class ResultsPanel(QWidget):
    """UI component showing score, performance level and per-question review."""

    def __init__(
        self,
        controller: TestController,
        on_new_test: Callable[[], None],
        on_home: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self.on_new_test = on_new_test
        self.on_home = on_home
        self._theme = Theme.LIGHT
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel(RESULTS_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        self.score_label.setStyleSheet("font-size: 32pt; font-weight: bold;")
        layout.addWidget(self.score_label)

        self.percent_label = QLabel("", self)
        self.percent_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.percent_label)

        self.level_label = QLabel("", self)
        self.level_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.level_label)

        self.description_label = QLabel("", self)
        self.description_label.setAlignment(Qt.AlignCenter)
        self.description_label.setWordWrap(True)
        layout.addWidget(self.description_label)

        self.time_label = QLabel("", self)
        self.time_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.time_label)

        self.save_warning_label = QLabel(STORAGE_SAVE_FAILED_MESSAGE, self)
        self.save_warning_label.setWordWrap(True)
        self.save_warning_label.setVisible(False)
        layout.addWidget(self.save_warning_label)

        self.review_list = QListWidget(self)
        self.review_list.setAlternatingRowColors(True)
        layout.addWidget(self.review_list, stretch=1)

        button_row = QHBoxLayout()
        self.home_button = QPushButton(RESULTS_HOME_BUTTON, self)
        self.home_button.clicked.connect(self._handle_home)
        button_row.addWidget(self.home_button)
        button_row.addStretch()
        self.new_test_button = QPushButton(RESULTS_NEW_TEST_BUTTON, self)
        self.new_test_button.setObjectName("primaryButton")
        self.new_test_button.clicked.connect(self._handle_new_test)
        button_row.addWidget(self.new_test_button)
        layout.addLayout(button_row)

    def _handle_home(self) -> None:
        self.on_home()

    def _handle_new_test(self) -> None:
        self.on_new_test()

    def show_results(self) -> bool:
        stats = self.controller.results()
        if stats is None:
            return False

        level = get_performance_level(stats.score)
        self.score_label.setText(RESULTS_SCORE_TEMPLATE.format(score=stats.score, total=stats.total_questions))
        self.percent_label.setText(RESULTS_PERCENT_TEMPLATE.format(percentage=stats.percentage))
        self.level_label.setText(level.level)
        self.level_label.setStyleSheet(Styles.get_performance_style(level.color, self._theme))
        self.description_label.setText(level.description)
        self.time_label.setText(RESULTS_TIME_TEMPLATE.format(time=stats.completion_time))
        self.save_warning_label.setVisible(self.controller.last_save_succeeded is False)

        self.review_list.clear()
        questions = self.controller.state.current_session.questions
        for question, result in zip(questions, stats.question_results):
            item = QListWidgetItem(format_review_row(result, question))
            role = "success" if result.is_correct else "error"
            item.setForeground(QColor(ColorPalette.for_role(role).get(self._theme)))
            self.review_list.addItem(item)
        return True

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        for widget in (self.home_button, self.new_test_button, self.review_list, self.description_label):
            widget.setStyleSheet(style)
