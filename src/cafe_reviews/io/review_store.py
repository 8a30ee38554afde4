"""Review Store - ordered, observable list of reviews."""

import threading
from dataclasses import replace as copy_review
from typing import List

from PySide6.QtCore import QObject, Signal

from cafe_reviews.core import Review, TranslatableField


class ReviewIndexError(IndexError):
    """Raised when a store position does not exist."""


class ReviewStore(QObject):
    """
    Holds the loaded reviews in file order.

    Array position is the addressing scheme used by batch translation.
    Reads return copies; writes go through apply_translation/replace and
    are announced with review_changed so views can re-render one row.
    """

    reviews_reset = Signal()
    review_changed = Signal(int)

    def __init__(self):
        super().__init__()
        self._reviews: List[Review] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._reviews)

    def load(self, reviews: List[Review]) -> None:
        """Replace the store contents."""
        with self._lock:
            self._reviews = [copy_review(review) for review in reviews]
        self.reviews_reset.emit()

    def reviews(self) -> List[Review]:
        """Snapshot of all reviews."""
        with self._lock:
            return [copy_review(review) for review in self._reviews]

    def get(self, index: int) -> Review:
        """Snapshot of the review at index."""
        with self._lock:
            self._check_index(index)
            return copy_review(self._reviews[index])

    def field_texts(self, field: TranslatableField) -> List[str]:
        """Current text of one field for every review, in order."""
        with self._lock:
            return [review.text_for(field) for review in self._reviews]

    def apply_translation(self, index: int, field: TranslatableField, text: str) -> None:
        """
        Overwrite one translatable field of the review at index.

        Raises:
            ReviewIndexError: if index is not a valid position.
        """
        with self._lock:
            self._check_index(index)
            self._reviews[index].set_text(field, text)
        self.review_changed.emit(index)

    def replace(self, index: int, review: Review) -> None:
        """
        Swap in a new version of the review at index.

        Raises:
            ReviewIndexError: if index is not a valid position.
            ValueError: if the new review has a different id.
        """
        with self._lock:
            self._check_index(index)
            if self._reviews[index].id != review.id:
                raise ValueError(
                    f"Review id mismatch at {index}: {self._reviews[index].id} != {review.id}"
                )
            self._reviews[index] = copy_review(review)
        self.review_changed.emit(index)

    def _check_index(self, index: int) -> None:
        if not (0 <= index < len(self._reviews)):
            raise ReviewIndexError(
                f"Review index {index} out of bounds for store with {len(self._reviews)} reviews"
            )
