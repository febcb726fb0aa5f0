"""Qt UI components for the angle practice application."""

from .dialog_helpers import (
    confirm_clear_history,
    confirm_resume_session,
    confirm_submit_test,
    show_info,
    show_warning,
)
from .main_window import MainWindow, Mode
from .qt_ticker import QtTicker

__all__ = [
    "MainWindow",
    "Mode",
    "QtTicker",
    "confirm_clear_history",
    "confirm_resume_session",
    "confirm_submit_test",
    "show_info",
    "show_warning",
]
