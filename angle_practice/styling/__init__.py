"""Styling module for the Angle Practice application."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
