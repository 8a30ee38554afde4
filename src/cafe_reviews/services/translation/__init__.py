"""Translation providers - abstract interface and Gemini implementation."""

from cafe_reviews.services.translation.translation_provider import (
    TranslationProvider,
    TranslationProviderError,
    TranslationRequest,
    TranslationResponse,
    TranslationResult,
    UnknownSupportStatus,
)
from cafe_reviews.services.translation.gemini_translation_provider import GeminiTranslationProvider

__all__ = [
    "TranslationProvider",
    "TranslationProviderError",
    "TranslationRequest",
    "TranslationResponse",
    "TranslationResult",
    "UnknownSupportStatus",
    "GeminiTranslationProvider",
]
