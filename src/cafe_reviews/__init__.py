"""
Cafe Reviews - browse cafe reviews and translate them.

This package provides a desktop application with:
- A review list loaded from a bundled JSON file
- A language-pair picker with support checks
- Single, per-review and batch translation through an external provider
"""

__version__ = "0.1.0"

# Make key components available at package level
from cafe_reviews.core import LanguagePair, Review, TranslatableField
from cafe_reviews.io import ReviewLoader, ReviewStore

__all__ = [
    "Review",
    "TranslatableField",
    "LanguagePair",
    "ReviewLoader",
    "ReviewStore",
]
