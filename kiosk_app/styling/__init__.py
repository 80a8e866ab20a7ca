"""Styling module for the Memory Trail kiosk."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
