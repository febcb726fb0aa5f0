"""Component for the landing page: start button and recent results."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
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
    HOME_CLEAR_HISTORY_BUTTON,
    HOME_DESCRIPTION,
    HOME_HISTORY_EMPTY,
    HOME_HISTORY_ROW_TEMPLATE,
    HOME_HISTORY_TITLE,
    HOME_START_BUTTON,
    HOME_TITLE,
)
from angle_practice.core.models import TestSession
from angle_practice.core.scoring import get_performance_level, get_performance_stats
from angle_practice.core.session_controller import TestController
from angle_practice.styling.styles import Styles
from angle_practice.ui.dialog_helpers import confirm_clear_history, show_warning

_HISTORY_TIME_FORMAT = "%Y-%m-%d %H:%M"


def format_history_row(session: TestSession) -> str:
    stats = get_performance_stats(session)
    score = session.score if session.score is not None else stats.score
    return HOME_HISTORY_ROW_TEMPLATE.format(
        started=session.start_time.astimezone().strftime(_HISTORY_TIME_FORMAT),
        score=score,
        total=stats.total_questions,
        level=get_performance_level(score).level,
        duration=stats.completion_time,
    )


class HomePanel(QWidget):
    """UI component for starting a test and browsing saved results."""

    def __init__(
        self,
        controller: TestController,
        on_start_test: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self.on_start_test = on_start_test
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel(HOME_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.description_label = QLabel(HOME_DESCRIPTION, self)
        self.description_label.setWordWrap(True)
        self.description_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.description_label)

        self.start_button = QPushButton(HOME_START_BUTTON, self)
        self.start_button.setObjectName("primaryButton")
        self.start_button.clicked.connect(self._handle_start_click)
        layout.addWidget(self.start_button, alignment=Qt.AlignCenter)

        history_header = QHBoxLayout()
        self.history_label = QLabel(HOME_HISTORY_TITLE, self)
        history_header.addWidget(self.history_label)
        history_header.addStretch()
        self.clear_history_button = QPushButton(HOME_CLEAR_HISTORY_BUTTON, self)
        self.clear_history_button.clicked.connect(self._handle_clear_history)
        history_header.addWidget(self.clear_history_button)
        layout.addLayout(history_header)

        self.history_list = QListWidget(self)
        self.history_list.setAlternatingRowColors(True)
        layout.addWidget(self.history_list, stretch=1)

        self.empty_label = QLabel(HOME_HISTORY_EMPTY, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.empty_label)

    def _handle_start_click(self) -> None:
        self.on_start_test()

    def _handle_clear_history(self) -> None:
        if not confirm_clear_history(self):
            return
        if not self.controller.clear_history():
            show_warning(self, "Clear history", "Saved results could not be removed.")
        self.refresh_history()

    def refresh_history(self) -> None:
        self.history_list.clear()
        history = self.controller.get_history()
        for session in history:
            item = QListWidgetItem(format_history_row(session))
            item.setData(Qt.UserRole, session.id)
            self.history_list.addItem(item)

        has_history = bool(history)
        self.empty_label.setVisible(not has_history)
        self.history_list.setVisible(has_history)
        self.clear_history_button.setEnabled(has_history)

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        self.start_button.setStyleSheet(style)
        self.clear_history_button.setStyleSheet(style)
        self.description_label.setStyleSheet(style)
        self.history_list.setStyleSheet(style)
