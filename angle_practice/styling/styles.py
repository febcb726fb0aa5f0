"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.BUTTON_DISABLED_TEXT.get(theme)};
            }}
            QPushButton#primaryButton {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
            }}
            QListWidget, QSpinBox, QComboBox, QLineEdit {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QProgressBar {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                max-height: 10px;
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                border-radius: 4px;
            }}
            QGroupBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_timer_style(is_warning: bool, theme: Theme = Theme.LIGHT) -> str:
        if is_warning:
            background = ColorPalette.TIMER_WARNING_BG.get(theme)
            text = ColorPalette.TIMER_WARNING_TEXT.get(theme)
        else:
            background = ColorPalette.TIMER_NORMAL_BG.get(theme)
            text = ColorPalette.TIMER_NORMAL_TEXT.get(theme)
        return (
            f"background-color: {background}; color: {text}; font-family: monospace; "
            "font-size: 16pt; font-weight: bold; padding: 4px 12px; border-radius: 6px;"
        )

    @staticmethod
    def get_performance_style(role: str, theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.for_role(role).get(theme)}; font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_slot_style(filled: bool, theme: Theme = Theme.LIGHT) -> str:
        if filled:
            border = f"2px solid {ColorPalette.ANGLE_SELECTED_BORDER.get(theme)}"
            background = ColorPalette.ANGLE_SELECTED_BG.get(theme)
        else:
            border = f"2px dashed {ColorPalette.SLOT_EMPTY_BORDER.get(theme)}"
            background = ColorPalette.BACKGROUND_SECONDARY.get(theme)
        return f"QFrame#answerSlot {{ border: {border}; background-color: {background}; border-radius: 6px; }}"
