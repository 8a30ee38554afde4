"""UI layer - PySide6 presentation components."""

from .main_window import MainWindow
from .review_detail_panel import ReviewDetailPanel
from .translation_config_dialog import TranslationConfigDialog

__all__ = ["MainWindow", "ReviewDetailPanel", "TranslationConfigDialog"]
