"""Translation Config Dialog - source/target language picker with support status."""

from typing import List, Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
)

from cafe_reviews.core import AvailableLanguage, LanguagePair, SupportCheck, TranslationSupport


class TranslationConfigDialog(QDialog):
    """
    Lets the user pick a language pair and shows whether it is supported.

    language_pair_changed is emitted only when the selected pair actually
    differs from the last one emitted.
    """

    language_pair_changed = Signal(object)  # LanguagePair
    cleared = Signal()

    UNSUPPORTED_MESSAGE = "Translation between same language isn't supported."

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Translation Config")
        self._last_pair = LanguagePair()

        main_layout = QVBoxLayout(self)

        intro = QLabel(
            "Select a source and a target language for translation; "
            "see whether the translation is supported."
        )
        intro.setWordWrap(True)
        main_layout.addWidget(intro)

        form = QFormLayout()
        self.source_combo = QComboBox()
        self.target_combo = QComboBox()
        form.addRow("Source", self.source_combo)
        form.addRow("Target", self.target_combo)
        main_layout.addLayout(form)

        self.status_icon = QLabel("?")
        self.status_icon.setStyleSheet("font-size: 28px;")
        self.status_message = QLabel("")
        self.status_message.setWordWrap(True)
        main_layout.addWidget(self.status_icon)
        main_layout.addWidget(self.status_message)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Close)
        clear_button = QPushButton("Clear")
        buttons.addButton(clear_button, QDialogButtonBox.ButtonRole.ResetRole)
        clear_button.clicked.connect(self.clear_selection)
        buttons.rejected.connect(self.reject)
        main_layout.addWidget(buttons)

        self.source_combo.currentIndexChanged.connect(self._on_selection_changed)
        self.target_combo.currentIndexChanged.connect(self._on_selection_changed)

        self.set_languages([])

    def set_languages(self, languages: List[AvailableLanguage]) -> None:
        """Fill both pickers, keeping the current selection where possible."""
        pair = self.selected_pair()
        for combo, selected in ((self.source_combo, pair.source), (self.target_combo, pair.target)):
            combo.blockSignals(True)
            combo.clear()
            combo.addItem("Select...", None)
            for language in languages:
                combo.addItem(language.localized_name(), language.locale_code)
            index = combo.findData(selected) if selected else 0
            combo.setCurrentIndex(max(index, 0))
            combo.blockSignals(False)
        self._on_selection_changed()

    def selected_pair(self) -> LanguagePair:
        return LanguagePair(
            source=self._current_code(self.source_combo),
            target=self._current_code(self.target_combo),
        )

    def clear_selection(self) -> None:
        for combo in (self.source_combo, self.target_combo):
            combo.blockSignals(True)
            combo.setCurrentIndex(0)
            combo.blockSignals(False)
        self._last_pair = LanguagePair()
        self.cleared.emit()

    def show_support(self, check: SupportCheck) -> None:
        """Render the support result for the current pair."""
        if check.pair != self.selected_pair():
            return
        if check.support is TranslationSupport.SUPPORTED:
            self.status_icon.setText("✅")
            self.status_message.setText("")
        elif check.support is TranslationSupport.UNSUPPORTED:
            self.status_icon.setText("❌")
            self.status_message.setText(self.UNSUPPORTED_MESSAGE)
        else:
            self.status_icon.setText("?")
            self.status_message.setText("")

    def _on_selection_changed(self, *_args) -> None:
        pair = self.selected_pair()
        if pair == self._last_pair:
            return
        self._last_pair = pair
        self.language_pair_changed.emit(pair)

    @staticmethod
    def _current_code(combo: QComboBox) -> Optional[str]:
        return combo.currentData()
