"""Review entity - a single cafe review loaded from the data file."""

from dataclasses import dataclass
from enum import Enum


class TranslatableField(str, Enum):
    """Review fields that may be overwritten by a translation."""

    NAME = "name"
    DESCRIPTION = "description"
    HIGHLIGHTS = "highlights"


@dataclass
class Review:
    """Represents one cafe with its review text, price label and rating.

    Attributes:
        id: Opaque identifier, unique within a store. Never changes.
        name: Display name of the cafe.
        address: Street address.
        description: Free-text review body.
        highlights: Free-text highlights.
        price_range: Price label such as "$$".
        rating: Rating between 0 and 5 inclusive.
    """

    id: str
    name: str
    address: str
    description: str
    highlights: str
    price_range: str
    rating: float

    def __post_init__(self):
        if not (0 <= self.rating <= 5):
            raise ValueError(f"Invalid rating: {self.rating}. Must be 0-5")

    def text_for(self, field: TranslatableField) -> str:
        """Return the current text of a translatable field."""
        return getattr(self, TranslatableField(field).value)

    def set_text(self, field: TranslatableField, text: str) -> None:
        """Overwrite a translatable field."""
        setattr(self, TranslatableField(field).value, text)
