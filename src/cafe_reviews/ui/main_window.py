"""Main Window - Application shell with the review list, detail panel and toolbar."""

from typing import List, Optional

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QMessageBox,
    QSplitter,
)

from cafe_reviews.core import Review, SupportCheck

from .review_detail_panel import ReviewDetailPanel
from .translation_config_dialog import TranslationConfigDialog


class MainWindow(QMainWindow):
    """Lists cafe reviews and hosts the detail panel and translation actions."""

    reload_requested = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Cafe Reviews")
        self.setGeometry(100, 100, 1000, 650)

        self._store = None
        self._coordinator = None

        self.review_list = QListWidget()
        self.review_list.currentRowChanged.connect(self._on_row_changed)

        self.detail_panel = ReviewDetailPanel()
        self.config_dialog = TranslationConfigDialog(self)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.addWidget(self.review_list)
        splitter.addWidget(self.detail_panel)
        splitter.setStretchFactor(1, 2)
        self.setCentralWidget(splitter)

        self._create_toolbar()
        self.statusBar().showMessage("Ready")

    def _create_toolbar(self):
        toolbar = self.addToolBar("Translation")

        self.translate_names_action = QAction("Translate Names", self)
        self.translate_names_action.setEnabled(False)
        toolbar.addAction(self.translate_names_action)

        config_action = QAction("Translation Config...", self)
        config_action.triggered.connect(self.config_dialog.show)
        toolbar.addAction(config_action)

        self.reload_action = QAction("Reload Reviews", self)
        self.reload_action.setShortcut("Ctrl+R")
        self.reload_action.triggered.connect(self._on_reload_triggered)
        toolbar.addAction(self.reload_action)

    def set_store(self, store):
        """Observe a ReviewStore. Store signals may come from worker threads."""
        self._store = store
        store.reviews_reset.connect(self._on_reviews_reset)
        store.review_changed.connect(self._on_review_changed)

    def set_coordinator(self, coordinator):
        """Inject the ReviewsCoordinator and wire UI signals to it.

        The coordinator is expected to expose:
        - request_name_translation()
        - request_text_translation(str)
        - request_review_translation(int)
        - on_language_pair_changed(LanguagePair)
        - reset(), load_reviews(), actions_enabled()
        """
        self._coordinator = coordinator

        self.translate_names_action.triggered.connect(coordinator.request_name_translation)
        self.detail_panel.translate_clicked.connect(self._on_translate_clicked)
        self.detail_panel.translate_review_clicked.connect(self._on_translate_review_clicked)
        self.config_dialog.language_pair_changed.connect(coordinator.on_language_pair_changed)
        self.config_dialog.cleared.connect(coordinator.reset)
        self.reload_requested.connect(coordinator.load_reviews)

        coordinator.languages_ready.connect(self.config_dialog.set_languages)
        coordinator.support_checked.connect(self._on_support_checked)
        coordinator.busy_changed.connect(self._on_busy_changed)
        coordinator.translated_text_changed.connect(self.detail_panel.set_translated_text)
        coordinator.translation_finished.connect(self._on_translation_finished)
        coordinator.translation_failed.connect(self._on_translation_failed)

    def display_reviews(self, reviews: List[Review]) -> None:
        """Replace the list contents, keeping the selected row when possible."""
        row = self.review_list.currentRow()
        self.review_list.blockSignals(True)
        self.review_list.clear()
        for review in reviews:
            self.review_list.addItem(QListWidgetItem(self._item_text(review)))
        self.review_list.blockSignals(False)

        if reviews:
            row = min(max(row, 0), len(reviews) - 1)
            self.review_list.setCurrentRow(row)
            self.detail_panel.display_review(reviews[row])
        else:
            self.detail_panel.display_review(None)
        self._refresh_actions()

    def update_review(self, index: int, review: Review) -> None:
        """Refresh a single row, and the detail panel if it shows that review."""
        item = self.review_list.item(index)
        if item is None:
            return
        item.setText(self._item_text(review))
        if index == self.review_list.currentRow():
            self.detail_panel.display_review(review)

    def selected_index(self) -> Optional[int]:
        row = self.review_list.currentRow()
        return row if row >= 0 else None

    def set_actions_enabled(self, enabled: bool) -> None:
        self.translate_names_action.setEnabled(enabled)
        self.detail_panel.set_actions_enabled(enabled)

    def show_status(self, message: str) -> None:
        self.statusBar().showMessage(message, 5000)

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)

    def show_info(self, title: str, message: str):
        """Display an information message to the user."""
        QMessageBox.information(self, title, message)

    @Slot()
    def _on_reviews_reset(self):
        self.display_reviews(self._store.reviews())

    @Slot(int)
    def _on_review_changed(self, index: int):
        if 0 <= index < len(self._store):
            self.update_review(index, self._store.get(index))

    def _on_row_changed(self, row: int):
        if row >= 0 and self._store is not None and row < len(self._store):
            self.detail_panel.display_review(self._store.get(row))
            self._refresh_actions()

    def _on_reload_triggered(self):
        self.reload_requested.emit()

    def _on_translate_clicked(self):
        review = self.detail_panel.review
        if review is not None:
            self._coordinator.request_text_translation(review.description)

    def _on_translate_review_clicked(self):
        index = self.selected_index()
        if index is not None:
            self._coordinator.request_review_translation(index)

    def _on_support_checked(self, check: SupportCheck):
        self.config_dialog.show_support(check)
        self._refresh_actions()

    def _on_busy_changed(self, busy: bool):
        self.show_status("Translating..." if busy else "Ready")
        self._refresh_actions()

    def _on_translation_finished(self, outcome):
        self.show_status(f"Translated {outcome.applied} names")

    def _on_translation_failed(self, error: str):
        self.show_error("Translation Error", error)

    def _refresh_actions(self):
        enabled = self._coordinator is not None and self._coordinator.actions_enabled()
        self.set_actions_enabled(enabled)

    @staticmethod
    def _item_text(review: Review) -> str:
        return f"{review.name}\n{review.address}"
