"""Color palette for the kiosk supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Kiosk theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the kiosk screens."""

    TEXT_PRIMARY = ThemeColors(
        light="#0F172A",      # Slate 900
        dark="#F1F5F9"        # Slate 100
    )

    TEXT_MUTED = ThemeColors(
        light="#64748B",      # Slate 500
        dark="#94A3B8"        # Slate 400
    )

    BACKGROUND = ThemeColors(
        light="#F8FAFC",
        dark="#0B1120"        # Night blue
    )

    CARD_BACKGROUND = ThemeColors(
        light="#FFFFFF",
        dark="#111A30"
    )

    BORDER = ThemeColors(
        light="#CBD5E1",
        dark="#334155"
    )

    # Touch buttons
    ACCENT_PRIMARY = ThemeColors(
        light="#0891B2",      # Cyan 600
        dark="#22D3EE"        # Cyan 400
    )

    ACCENT_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#0B1120"
    )

    ACCENT_DISABLED = ThemeColors(
        light="#A5F3FC",
        dark="#155E75"
    )

    # Result outcomes
    SUCCESS = ThemeColors(
        light="#059669",      # Emerald
        dark="#34D399"
    )

    NOT_QUITE = ThemeColors(
        light="#D97706",      # Amber
        dark="#FBBF24"
    )

    BADGE = ThemeColors(
        light="#B45309",
        dark="#FBBF24"
    )
