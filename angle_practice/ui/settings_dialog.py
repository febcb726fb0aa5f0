"""Settings dialog for configuring Angle Practice preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from angle_practice.constants.storage_constants import DEFAULT_MAX_STORED_TESTS
from angle_practice.styling.color_palette import Theme

MAX_SEED_VALUE = 2_147_483_647


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent=None,
        ui_font_size: int = 12,
        theme: Theme = Theme.LIGHT,
        max_stored_tests: int = DEFAULT_MAX_STORED_TESTS,
        generator_seed: int | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._ui_font_size = ui_font_size
        self._theme = theme
        self._max_stored_tests = max(1, min(500, max_stored_tests))
        self._generator_seed = generator_seed

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        display_group = QGroupBox("Display")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        font_row = QHBoxLayout()
        font_label = QLabel("UI Font Size:")
        font_label.setToolTip("Font size for buttons, instructions and lists")
        self.ui_font_spinbox = QSpinBox()
        self.ui_font_spinbox.setRange(8, 24)
        self.ui_font_spinbox.setValue(self._ui_font_size)
        self.ui_font_spinbox.setSuffix(" pt")
        font_row.addWidget(font_label)
        font_row.addStretch()
        font_row.addWidget(self.ui_font_spinbox)
        display_layout.addLayout(font_row)

        theme_row = QHBoxLayout()
        theme_label = QLabel("Theme:")
        self.theme_combo = QComboBox()
        for theme in Theme:
            self.theme_combo.addItem(theme.name.title(), theme.name)
        self.theme_combo.setCurrentIndex(self.theme_combo.findData(self._theme.name))
        theme_row.addWidget(theme_label)
        theme_row.addStretch()
        theme_row.addWidget(self.theme_combo)
        display_layout.addLayout(theme_row)

        layout.addWidget(display_group)

        test_group = QGroupBox("Tests")
        test_layout = QVBoxLayout()
        test_group.setLayout(test_layout)

        history_row = QHBoxLayout()
        history_label = QLabel("Results kept in history:")
        history_label.setToolTip("Oldest results are removed once this many tests are saved.")
        self.history_spinbox = QSpinBox()
        self.history_spinbox.setRange(1, 500)
        self.history_spinbox.setValue(self._max_stored_tests)
        history_row.addWidget(history_label)
        history_row.addStretch()
        history_row.addWidget(self.history_spinbox)
        test_layout.addLayout(history_row)

        self.seed_checkbox = QCheckBox("Use a fixed question seed")
        self.seed_checkbox.setToolTip("Every new test then starts with the same generated questions.")
        self.seed_checkbox.setChecked(self._generator_seed is not None)
        test_layout.addWidget(self.seed_checkbox)

        seed_row = QHBoxLayout()
        seed_label = QLabel("Seed:")
        self.seed_spinbox = QSpinBox()
        self.seed_spinbox.setRange(0, MAX_SEED_VALUE)
        self.seed_spinbox.setValue(self._generator_seed or 0)
        self.seed_spinbox.setEnabled(self._generator_seed is not None)
        self.seed_checkbox.toggled.connect(self.seed_spinbox.setEnabled)
        seed_row.addWidget(seed_label)
        seed_row.addStretch()
        seed_row.addWidget(self.seed_spinbox)
        test_layout.addLayout(seed_row)

        layout.addWidget(test_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_ui_font_size(self) -> int:
        """Get the selected UI font size."""
        return self.ui_font_spinbox.value()

    def get_theme(self) -> Theme:
        return Theme[self.theme_combo.currentData()]

    def get_max_stored_tests(self) -> int:
        """Get how many completed tests history should keep."""
        return self.history_spinbox.value()

    def get_generator_seed(self) -> int | None:
        """Get the fixed generator seed, or None for fresh randomness."""
        if not self.seed_checkbox.isChecked():
            return None
        return self.seed_spinbox.value()
