"""Services layer - configuration, language catalog and translation providers."""

from cafe_reviews.services.settings_manager import SettingsManager
from cafe_reviews.services.logging_setup import configure_logging
from cafe_reviews.services.api_workers import ProviderWorker, WorkerSignals

# Translation providers
from cafe_reviews.services.translation import (
    GeminiTranslationProvider,
    TranslationProvider,
    TranslationProviderError,
    TranslationRequest,
    TranslationResponse,
    TranslationResult,
    UnknownSupportStatus,
)

from cafe_reviews.services.language_catalog import LanguageCatalog

__all__ = [
    "SettingsManager",
    "configure_logging",
    "ProviderWorker",
    "WorkerSignals",
    "TranslationProvider",
    "TranslationProviderError",
    "TranslationRequest",
    "TranslationResponse",
    "TranslationResult",
    "UnknownSupportStatus",
    "GeminiTranslationProvider",
    "LanguageCatalog",
]
