"""Clickable card that draws one angle from its rotation and arm lengths."""

from __future__ import annotations

import math

from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QColor, QMouseEvent, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from angle_practice.constants.generator_constants import ARM_LENGTH_MAX
from angle_practice.constants.ui_constants import ANGLE_CANVAS_SIZE, ANGLE_PEN_WIDTH
from angle_practice.core.models import Angle
from angle_practice.styling.color_palette import ColorPalette, Theme

_PADDING = 10
_BADGE_RADIUS = 13


def arm_endpoints(angle: Angle, center: QPointF, scale: float) -> tuple[QPointF, QPointF]:
    """Return the two arm end points; the vertex sits at ``center``."""
    rotation = math.radians(angle.rotation)
    opening = math.radians(angle.degrees)
    first = QPointF(
        center.x() + math.cos(rotation) * angle.arm_length_1 * scale,
        center.y() + math.sin(rotation) * angle.arm_length_1 * scale,
    )
    second = QPointF(
        center.x() + math.cos(rotation + opening) * angle.arm_length_2 * scale,
        center.y() + math.sin(rotation + opening) * angle.arm_length_2 * scale,
    )
    return first, second


class AngleWidget(QWidget):
    """Renders an angle card; emits ``clicked`` with the angle id."""

    clicked = Signal(str)

    def __init__(
        self,
        angle: Angle | None = None,
        size: int = ANGLE_CANVAS_SIZE,
        interactive: bool = True,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._angle = angle
        self._interactive = interactive
        self._selection_order: int | None = None
        self._theme = Theme.LIGHT
        self.setFixedSize(size, size)
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        if interactive:
            self.setCursor(Qt.PointingHandCursor)

    @property
    def angle(self) -> Angle | None:
        return self._angle

    @property
    def selection_order(self) -> int | None:
        return self._selection_order

    def set_angle(self, angle: Angle | None) -> None:
        self._angle = angle
        self._selection_order = None
        self.update()

    def set_selection_order(self, order: int | None) -> None:
        if order == self._selection_order:
            return
        self._selection_order = order
        self.update()

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self.update()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if (
            self._interactive
            and self.isEnabled()
            and self._angle is not None
            and event.button() == Qt.LeftButton
        ):
            self.clicked.emit(self._angle.id)
        super().mousePressEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        rect = QRectF(self.rect()).adjusted(1, 1, -1, -1)

        selected = self._selection_order is not None
        background = ColorPalette.ANGLE_SELECTED_BG if selected else ColorPalette.BACKGROUND_PRIMARY
        border = ColorPalette.ANGLE_SELECTED_BORDER if selected else ColorPalette.BORDER_PRIMARY
        painter.setPen(QPen(QColor(border.get(self._theme)), 2))
        painter.setBrush(QColor(background.get(self._theme)))
        painter.drawRoundedRect(rect, 8, 8)

        if self._angle is not None:
            center = rect.center()
            scale = (min(rect.width(), rect.height()) / 2 - _PADDING) / ARM_LENGTH_MAX
            first, second = arm_endpoints(self._angle, center, scale)
            stroke = QColor(ColorPalette.ANGLE_STROKE.get(self._theme))
            pen = QPen(stroke, ANGLE_PEN_WIDTH)
            pen.setCapStyle(Qt.RoundCap)
            painter.setPen(pen)
            painter.drawLine(center, first)
            painter.drawLine(center, second)
            painter.setBrush(stroke)
            painter.drawEllipse(center, ANGLE_PEN_WIDTH, ANGLE_PEN_WIDTH)

        if selected:
            badge_center = QPointF(rect.right() - _BADGE_RADIUS - 4, rect.top() + _BADGE_RADIUS + 4)
            painter.setPen(Qt.NoPen)
            painter.setBrush(QColor(ColorPalette.ANGLE_SELECTED_BORDER.get(self._theme)))
            painter.drawEllipse(badge_center, _BADGE_RADIUS, _BADGE_RADIUS)
            painter.setPen(QColor(ColorPalette.BUTTON_PRIMARY_TEXT.get(Theme.LIGHT)))
            badge_rect = QRectF(
                badge_center.x() - _BADGE_RADIUS,
                badge_center.y() - _BADGE_RADIUS,
                2 * _BADGE_RADIUS,
                2 * _BADGE_RADIUS,
            )
            painter.drawText(badge_rect, Qt.AlignCenter, str(self._selection_order))

        painter.end()
