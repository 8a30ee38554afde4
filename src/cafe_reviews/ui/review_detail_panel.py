"""Review Detail Panel - shows one review and its translate actions."""

from typing import Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from cafe_reviews.core import Review


class ReviewDetailPanel(QWidget):
    """Detail view with the review text, highlights, address, price and rating."""

    translate_clicked = Signal()
    translate_review_clicked = Signal()

    def __init__(self):
        super().__init__()
        self.review: Optional[Review] = None

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(12, 12, 12, 12)
        main_layout.setSpacing(8)

        self.name_label = QLabel("")
        self.name_label.setStyleSheet("font-weight: bold; font-size: 18px;")
        main_layout.addWidget(self.name_label)

        actions_layout = QHBoxLayout()
        self.translate_button = QPushButton("Translate")
        self.translate_button.clicked.connect(self.translate_clicked.emit)
        self.translate_review_button = QPushButton("Translate Review")
        self.translate_review_button.clicked.connect(self.translate_review_clicked.emit)
        actions_layout.addWidget(self.translate_button)
        actions_layout.addWidget(self.translate_review_button)
        actions_layout.addStretch()
        main_layout.addLayout(actions_layout)

        self.description_label = QLabel("")
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet("font-weight: bold;")
        main_layout.addWidget(self.description_label)

        main_layout.addWidget(self._heading("Highlights"))
        self.highlights_label = QLabel("")
        self.highlights_label.setWordWrap(True)
        main_layout.addWidget(self.highlights_label)

        main_layout.addWidget(self._heading("Address"))
        self.address_label = QLabel("")
        main_layout.addWidget(self.address_label)

        self.price_label = QLabel("")
        main_layout.addWidget(self.price_label)
        self.rating_label = QLabel("")
        main_layout.addWidget(self.rating_label)

        main_layout.addWidget(self._heading("Translation"))
        self.translation_text = QTextEdit()
        self.translation_text.setReadOnly(True)
        self.translation_text.setPlaceholderText("(Not requested yet)")
        self.translation_text.setFixedHeight(120)
        main_layout.addWidget(self.translation_text)

        main_layout.addStretch()
        self.set_actions_enabled(False)

    @staticmethod
    def _heading(text: str) -> QLabel:
        label = QLabel(text)
        label.setStyleSheet("font-weight: bold; color: gray;")
        return label

    def display_review(self, review: Optional[Review]) -> None:
        """Show a review, or clear the panel when review is None."""
        if review is None or self.review is None or review.id != self.review.id:
            self.translation_text.clear()
        self.review = review
        if review is None:
            for label in (self.name_label, self.description_label, self.highlights_label,
                          self.address_label, self.price_label, self.rating_label):
                label.clear()
            return

        self.name_label.setText(review.name)
        self.description_label.setText(review.description)
        self.highlights_label.setText(review.highlights)
        self.address_label.setText(review.address)
        self.price_label.setText(f"Price Range: {review.price_range}")
        self.rating_label.setText(f"Rating: {review.rating:g} / 5")

    def set_translated_text(self, text: str) -> None:
        self.translation_text.setPlainText(text)

    def set_actions_enabled(self, enabled: bool) -> None:
        has_review = self.review is not None
        self.translate_button.setEnabled(enabled and has_review)
        self.translate_review_button.setEnabled(enabled and has_review)
