"""Four ranking slots showing the angles picked so far, smallest first."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from angle_practice.constants.ui_constants import ANSWER_SLOT_LABELS
from angle_practice.core.models import Question
from angle_practice.styling.color_palette import Theme
from angle_practice.styling.styles import Styles
from angle_practice.ui.components.angle_widget import AngleWidget

_SLOT_ANGLE_SIZE = 96


class AnswerSlotsWidget(QWidget):
    """Read-only view of the in-progress ranking."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._theme = Theme.LIGHT
        self._frames: list[QFrame] = []
        self._previews: list[AngleWidget] = []
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QHBoxLayout()
        self.setLayout(layout)
        for label_text in ANSWER_SLOT_LABELS:
            frame = QFrame(self)
            frame.setObjectName("answerSlot")
            frame_layout = QVBoxLayout()
            frame.setLayout(frame_layout)

            label = QLabel(label_text, frame)
            label.setAlignment(Qt.AlignCenter)
            frame_layout.addWidget(label)

            preview = AngleWidget(size=_SLOT_ANGLE_SIZE, interactive=False, parent=frame)
            preview.setVisible(False)
            frame_layout.addWidget(preview, alignment=Qt.AlignCenter)

            frame.setStyleSheet(Styles.get_slot_style(filled=False, theme=self._theme))
            layout.addWidget(frame)
            self._frames.append(frame)
            self._previews.append(preview)

    def update_slots(self, question: Question | None, selections: tuple[str, ...]) -> None:
        for index, (frame, preview) in enumerate(zip(self._frames, self._previews)):
            angle = None
            if question is not None and index < len(selections):
                angle = question.angle_by_id(selections[index])
            preview.set_angle(angle)
            preview.setVisible(angle is not None)
            frame.setStyleSheet(Styles.get_slot_style(filled=angle is not None, theme=self._theme))

    def filled_count(self) -> int:
        return sum(1 for preview in self._previews if preview.angle is not None)

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        for frame, preview in zip(self._frames, self._previews):
            preview.set_theme(theme)
            frame.setStyleSheet(Styles.get_slot_style(filled=preview.angle is not None, theme=theme))
