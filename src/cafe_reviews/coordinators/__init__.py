"""Coordinators - Orchestration layer connecting UI with business logic."""

from .batch_translation_coordinator import BatchTranslationCoordinator, BatchTranslationOutcome
from .reviews_coordinator import ReviewsCoordinator

__all__ = [
    "BatchTranslationCoordinator",
    "BatchTranslationOutcome",
    "ReviewsCoordinator",
]
