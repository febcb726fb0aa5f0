"""Helper functions for common dialog patterns in the practice UI."""

from __future__ import annotations

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QMessageBox, QWidget


def _apply_optional_font(widget: QWidget, font_point_size: int | None) -> None:
    if font_point_size is None or font_point_size <= 0:
        return

    font: QFont = widget.font()
    font.setPointSize(font_point_size)
    widget.setFont(font)


def _ask(parent: QWidget, title: str, message: str, default_yes: bool = False) -> bool:
    default = QMessageBox.Yes if default_yes else QMessageBox.No
    reply = QMessageBox.question(parent, title, message, QMessageBox.Yes | QMessageBox.No, default)
    return reply == QMessageBox.Yes


def confirm_resume_session(parent: QWidget, title: str, message: str) -> bool:
    """Ask whether an unfinished test found in storage should be resumed.

    Returns:
        True to resume, False to discard the snapshot
    """
    return _ask(parent, title, message, default_yes=True)


def confirm_submit_test(parent: QWidget, title: str, message: str) -> bool:
    """Confirm early submission of the running test."""
    return _ask(parent, title, message)


def confirm_clear_history(parent: QWidget) -> bool:
    return _ask(parent, "Clear history", "Delete all saved test results? This cannot be undone.")


def show_info(
    parent: QWidget,
    title: str,
    message: str,
    *,
    font_point_size: int | None = None,
) -> None:
    """Show information dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Information message
        font_point_size: Optional point size for the dialog text
    """
    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Information)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)
    msg_box.setStandardButtons(QMessageBox.Ok)
    _apply_optional_font(msg_box, font_point_size)
    msg_box.exec()


def show_warning(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.warning(parent, title, message)
