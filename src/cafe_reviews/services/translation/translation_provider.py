"""Translation Provider - interface to an external translation backend."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, List, Optional

from cafe_reviews.core import LanguagePair, SupportStatus


class TranslationProviderError(RuntimeError):
    """Raised when the provider fails; aborts whatever operation is in progress."""


class UnknownSupportStatus(ValueError):
    """Raised when the provider reports a status outside SupportStatus."""


@dataclass(frozen=True)
class TranslationRequest:
    """A source string and the caller's identifier for it."""

    source_text: str
    client_identifier: Optional[str] = None


@dataclass(frozen=True)
class TranslationResponse:
    """Translated text with the identifier echoed from its request."""

    source_text: str
    target_text: str
    client_identifier: Optional[str] = None


@dataclass
class TranslationResult:
    """Result of a single-text translation."""

    text: str
    model: str
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        """True if translation failed."""
        return self.error is not None


class TranslationProvider(ABC):
    """
    Abstract translation backend.

    Implementations (e.g., GeminiTranslationProvider) own language
    availability and the translation itself. Every method may raise
    TranslationProviderError.
    """

    name: str = "provider"

    @abstractmethod
    def supported_languages(self) -> List[str]:
        """Locale codes the provider can translate between."""
        pass

    @abstractmethod
    def status(self, source: str, target: str) -> SupportStatus:
        """
        Support status for a language pair.

        Raises:
            UnknownSupportStatus: if the backend answers with an unrecognized status.
        """
        pass

    @abstractmethod
    def translate(self, text: str, pair: LanguagePair) -> TranslationResponse:
        """Translate a single string."""
        pass

    @abstractmethod
    def translations(
        self, requests: List[TranslationRequest], pair: LanguagePair
    ) -> List[TranslationResponse]:
        """Translate a fixed list; responses are in submission order."""
        pass

    @abstractmethod
    def translate_batch(
        self, requests: List[TranslationRequest], pair: LanguagePair
    ) -> Iterator[TranslationResponse]:
        """
        Translate a batch lazily.

        Responses carry the client identifier of their request and may come
        back in any order. Iteration may stop early by raising
        TranslationProviderError.
        """
        pass
