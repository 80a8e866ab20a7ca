"""Centralized styles and font definitions for the kiosk."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.DARK) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 18px;
            }}
            QPushButton {{
                background-color: {ColorPalette.CARD_BACKGROUND.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 2px solid {ColorPalette.BORDER.get(theme)};
                border-radius: 12px;
                padding: 16px 32px;
                min-height: 48px;
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                color: {ColorPalette.ACCENT_TEXT.get(theme)};
                border: 2px solid {ColorPalette.ACCENT_PRIMARY.get(theme)};
            }}
            QComboBox {{
                background-color: {ColorPalette.CARD_BACKGROUND.get(theme)};
                border: 2px solid {ColorPalette.BORDER.get(theme)};
                border-radius: 8px;
                padding: 8px;
                min-height: 40px;
            }}
        """

    @staticmethod
    def get_primary_button_style(theme: Theme = Theme.DARK) -> str:
        return f"""
            QPushButton {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                color: {ColorPalette.ACCENT_TEXT.get(theme)};
                border: none;
                font-size: 22px;
                font-weight: bold;
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.ACCENT_DISABLED.get(theme)};
            }}
        """

    @staticmethod
    def get_title_style() -> str:
        return "font-size: 40pt; font-weight: bold;"

    @staticmethod
    def get_subtitle_style(theme: Theme = Theme.DARK) -> str:
        return f"font-size: 18pt; color: {ColorPalette.TEXT_MUTED.get(theme)};"

    @staticmethod
    def get_outcome_style(is_correct: bool, theme: Theme = Theme.DARK) -> str:
        color = ColorPalette.SUCCESS if is_correct else ColorPalette.NOT_QUITE
        return f"font-size: 40pt; font-weight: bold; color: {color.get(theme)};"

    @staticmethod
    def get_badge_style(theme: Theme = Theme.DARK) -> str:
        return f"font-size: 18pt; font-weight: bold; color: {ColorPalette.BADGE.get(theme)};"
