"""Qt presentation layer for the kiosk."""

from .dialog_helpers import build_info_box, show_privacy_notice
from .kiosk_main_window import KioskMainWindow

__all__ = [
    "KioskMainWindow",
    "build_info_box",
    "show_privacy_notice",
]
