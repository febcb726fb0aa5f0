"""Color palette for Angle Practice supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#111827", dark="#F5F5F5")
    TEXT_SECONDARY = ThemeColors(light="#4B5563", dark="#AAAAAA")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BACKGROUND_SECONDARY = ThemeColors(light="#F3F4F6", dark="#2D2D2D")

    BORDER_PRIMARY = ThemeColors(light="#D1D5DB", dark="#555555")

    BUTTON_PRIMARY_BG = ThemeColors(light="#2563EB", dark="#4A9EFF")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")
    BUTTON_SECONDARY_BG = ThemeColors(light="#F3F4F6", dark="#3A3A3A")
    BUTTON_HOVER_BG = ThemeColors(light="#E5E7EB", dark="#505050")
    BUTTON_DISABLED_TEXT = ThemeColors(light="#9CA3AF", dark="#666666")

    # Angle cards
    ANGLE_STROKE = ThemeColors(light="#1F2937", dark="#E5E7EB")
    ANGLE_SELECTED_BG = ThemeColors(light="#EFF6FF", dark="#1E3A5F")
    ANGLE_SELECTED_BORDER = ThemeColors(light="#3B82F6", dark="#60A5FA")
    SLOT_EMPTY_BORDER = ThemeColors(light="#9CA3AF", dark="#6B7280")

    # Timer
    TIMER_NORMAL_BG = ThemeColors(light="#DBEAFE", dark="#1E3A8A")
    TIMER_NORMAL_TEXT = ThemeColors(light="#1D4ED8", dark="#BFDBFE")
    TIMER_WARNING_BG = ThemeColors(light="#FEE2E2", dark="#7F1D1D")
    TIMER_WARNING_TEXT = ThemeColors(light="#B91C1C", dark="#FECACA")

    # Performance bands, keyed by PerformanceLevel.color
    SUCCESS = ThemeColors(light="#16A34A", dark="#6FCF6F")
    ACCENT = ThemeColors(light="#2563EB", dark="#4A9EFF")
    WARNING = ThemeColors(light="#CA8A04", dark="#FFC83D")
    CAUTION = ThemeColors(light="#EA580C", dark="#FB923C")
    ERROR = ThemeColors(light="#DC2626", dark="#FF6B6B")

    @classmethod
    def for_role(cls, role: str) -> ThemeColors:
        """Resolve a palette role name such as ``"success"``; unknown roles map to text."""
        return getattr(cls, role.upper(), cls.TEXT_PRIMARY)
