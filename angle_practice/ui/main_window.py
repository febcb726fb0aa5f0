"""Qt main window switching between the home, test and results modes."""

from __future__ import annotations

from enum import Enum, auto
import logging

from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from angle_practice.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from angle_practice.constants.storage_constants import DEFAULT_MAX_STORED_TESTS
from angle_practice.constants.ui_constants import (
    RECOVERY_MESSAGE,
    RECOVERY_TITLE,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from angle_practice.core.models import TestState
from angle_practice.core.session_controller import TestController
from angle_practice.styling.color_palette import Theme
from angle_practice.styling.styles import Styles
from angle_practice.ui.components.home_panel import HomePanel
from angle_practice.ui.components.results_panel import ResultsPanel
from angle_practice.ui.components.test_panel import TestPanel
from angle_practice.ui.dialog_helpers import confirm_resume_session, show_info
from angle_practice.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class Mode(Enum):
    """High-level UI mode, derived from the controller state."""

    HOME = auto()
    TEST = auto()
    RESULTS = auto()


def mode_for_state(state: TestState) -> Mode:
    if state.is_active:
        return Mode.TEST
    session = state.current_session
    if session is not None and session.is_completed:
        return Mode.RESULTS
    return Mode.HOME


class MainWindow(QMainWindow):
    """Main Qt window orchestrating the three application modes."""

    def __init__(self, controller: TestController, confirm_dialogs: bool = True) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.controller = controller
        self._confirm_dialogs = confirm_dialogs
        self._mode = Mode.HOME

        self._ui_font_size: int = 12
        self._theme = Theme.LIGHT
        self._generator_seed: int | None = None

        self._build_ui()
        self._apply_styles()
        self.controller.subscribe(self._handle_state_change)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_toolbar_buttons(root_layout)

        self.mode_stack = QStackedWidget(self)
        self.home_panel = HomePanel(self.controller, on_start_test=self._handle_start_test, parent=self)
        self.test_panel = TestPanel(self.controller, parent=self, confirm_submit=self._confirm_dialogs)
        self.results_panel = ResultsPanel(
            self.controller,
            on_new_test=self._handle_start_test,
            on_home=self._handle_back_home,
            parent=self,
        )
        self.mode_stack.addWidget(self.home_panel)
        self.mode_stack.addWidget(self.test_panel)
        self.mode_stack.addWidget(self.results_panel)
        root_layout.addWidget(self.mode_stack)

        self._set_mode(Mode.HOME)

    def _build_toolbar_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton("Settings", self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    @property
    def mode(self) -> Mode:
        return self._mode

    def _set_mode(self, mode: Mode) -> None:
        self._mode = mode
        index_map = {
            Mode.HOME: 0,
            Mode.TEST: 1,
            Mode.RESULTS: 2,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])
        # Settings change the generator and history size; keep them out of a running test.
        self.settings_button.setEnabled(mode != Mode.TEST)

        if mode == Mode.HOME:
            self.home_panel.refresh_history()
        elif mode == Mode.RESULTS:
            self.results_panel.show_results()

    def _handle_state_change(self, state: TestState) -> None:
        mode = mode_for_state(state)
        if mode != self._mode:
            logger.debug("Switching to %s mode", mode.name.lower())
            self._set_mode(mode)

    def _handle_start_test(self) -> None:
        if self._generator_seed is not None:
            self.controller.set_generator_seed(self._generator_seed)
        self.controller.start_new_test()

    def _handle_back_home(self) -> None:
        self.controller.reset_test()

    def offer_recovery(self) -> bool:
        """Prompt to resume an unfinished test left in storage.

        Returns:
            True when a recovered test was resumed
        """
        session = self.controller.recover_session()
        if session is None:
            return False

        started = session.start_time.astimezone().strftime("%Y-%m-%d %H:%M")
        if confirm_resume_session(self, RECOVERY_TITLE, RECOVERY_MESSAGE.format(started=started)):
            return self.controller.resume_session(session)

        self.controller.discard_recovered_session()
        return False

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details, font_point_size=self._ui_font_size)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT, font_point_size=self._ui_font_size)

    def _handle_settings(self) -> None:
        storage = self.controller.storage
        max_stored_tests = storage.max_stored_tests if storage is not None else DEFAULT_MAX_STORED_TESTS
        dialog = SettingsDialog(
            self,
            self._ui_font_size,
            self._theme,
            max_stored_tests,
            self._generator_seed,
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._theme = dialog.get_theme()
            self._generator_seed = dialog.get_generator_seed()

            self.controller.set_generator_seed(self._generator_seed)
            if storage is not None and dialog.get_max_stored_tests() != max_stored_tests:
                storage.update_settings(max_stored_tests=dialog.get_max_stored_tests())

            self._apply_styles()
            if self._mode == Mode.HOME:
                self.home_panel.refresh_history()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme))

        ui_style = f"font-size: {self._ui_font_size}pt;"
        for button in (self.about_button, self.help_button, self.settings_button):
            button.setStyleSheet(ui_style)

        self.home_panel.apply_font_size(self._ui_font_size)
        self.test_panel.apply_font_size(self._ui_font_size)
        self.test_panel.set_theme(self._theme)
        self.results_panel.apply_font_size(self._ui_font_size)
        self.results_panel.set_theme(self._theme)
