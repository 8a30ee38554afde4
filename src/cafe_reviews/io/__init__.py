"""I/O layer - Loading and holding review data."""

from .review_loader import ReviewDecodeError, ReviewLoader
from .review_store import ReviewIndexError, ReviewStore

__all__ = ["ReviewLoader", "ReviewDecodeError", "ReviewStore", "ReviewIndexError"]
