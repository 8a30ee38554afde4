"""Review Loader - parses the cafe reviews JSON file."""

import json
import logging
import uuid
from pathlib import Path
from typing import List

from cafe_reviews.core import Review

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("name", "address", "description", "highlights", "price_range")


class ReviewDecodeError(ValueError):
    """Raised when the reviews file is malformed. No partial list is produced."""


class ReviewLoader:
    """Data Factory responsible for turning the reviews JSON blob into Review entities."""

    @staticmethod
    def bundled_reviews_path() -> Path:
        """Path to the reviews file shipped with the package."""
        return Path(__file__).resolve().parent.parent / "data" / "cafe_reviews.json"

    def load(self, path: Path) -> List[Review]:
        """
        Read and decode a reviews file.

        Raises:
            ReviewDecodeError: if the file can't be read or decoded.
        """
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            raise ReviewDecodeError(f"Error reading reviews file {path}: {e}") from e
        return self.parse(data)

    def load_or_empty(self, path: Path) -> List[Review]:
        """Load reviews, falling back to an empty list when the file is malformed."""
        try:
            reviews = self.load(path)
        except ReviewDecodeError as e:
            logger.error("Error decoding reviews: %s", e)
            return []
        logger.info("Loaded %d reviews from %s", len(reviews), path)
        return reviews

    def parse(self, data: bytes) -> List[Review]:
        """
        Decode a JSON array of review objects.

        Args:
            data: Raw bytes of the reviews file.

        Returns:
            Reviews in file order.

        Raises:
            ReviewDecodeError: if the blob isn't well-formed, a field is missing or
                mistyped, a rating is out of range, or ids repeat.
        """
        try:
            payload = json.loads(data)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ReviewDecodeError(f"Invalid JSON: {e}") from e

        if not isinstance(payload, list):
            raise ReviewDecodeError("Expected a JSON array of reviews")

        reviews = [self._parse_review(idx, entry) for idx, entry in enumerate(payload)]

        seen = set()
        for review in reviews:
            if review.id in seen:
                raise ReviewDecodeError(f"Duplicate review id: {review.id}")
            seen.add(review.id)

        return reviews

    def _parse_review(self, position: int, entry) -> Review:
        """Parse a single review object at the given array position."""
        if not isinstance(entry, dict):
            raise ReviewDecodeError(f"Review {position} is not an object")

        values = {}
        for field in TEXT_FIELDS:
            if field not in entry:
                raise ReviewDecodeError(f"Review {position} is missing '{field}'")
            if not isinstance(entry[field], str):
                raise ReviewDecodeError(f"Review {position}: '{field}' must be a string")
            values[field] = entry[field]

        rating = entry.get("rating")
        if "rating" not in entry:
            raise ReviewDecodeError(f"Review {position} is missing 'rating'")
        # bool is an int subclass
        if isinstance(rating, bool) or not isinstance(rating, (int, float)):
            raise ReviewDecodeError(f"Review {position}: 'rating' must be a number")

        review_id = entry.get("id")
        if review_id is None:
            review_id = str(uuid.uuid4())
        elif not isinstance(review_id, str):
            raise ReviewDecodeError(f"Review {position}: 'id' must be a string")

        try:
            return Review(id=review_id, rating=float(rating), **values)
        except ValueError as e:
            raise ReviewDecodeError(f"Review {position}: {e}") from e
