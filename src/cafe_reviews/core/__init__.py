"""Domain layer - Pure entities representing reviews and languages."""

from .client_identifier import ClientIdentifier, InvalidClientIdentifier
from .language import (
    AvailableLanguage,
    LanguagePair,
    SupportCheck,
    SupportStatus,
    TranslationSupport,
)
from .review import Review, TranslatableField

__all__ = [
    "Review",
    "TranslatableField",
    "AvailableLanguage",
    "LanguagePair",
    "SupportCheck",
    "SupportStatus",
    "TranslationSupport",
    "ClientIdentifier",
    "InvalidClientIdentifier",
]
