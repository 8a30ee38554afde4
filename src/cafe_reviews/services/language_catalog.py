"""Language Catalog - supported languages and language-pair support checks."""

import logging
import threading
from typing import List, Optional

from cafe_reviews.core import (
    AvailableLanguage,
    LanguagePair,
    SupportCheck,
    SupportStatus,
    TranslationSupport,
)
from cafe_reviews.services.translation import (
    TranslationProvider,
    TranslationProviderError,
    UnknownSupportStatus,
)

logger = logging.getLogger(__name__)


class LanguageCatalog:
    """
    Queries the provider for languages and pair support.

    Keeps only the most recently checked pair. Checking a different pair
    drops the previous result straight away, and whichever check finishes
    last overwrites last_check.
    """

    def __init__(self, provider: TranslationProvider):
        self.provider = provider
        self._last_check: Optional[SupportCheck] = None
        self._lock = threading.Lock()

    @property
    def last_check(self) -> Optional[SupportCheck]:
        return self._last_check

    def available_languages(self) -> List[AvailableLanguage]:
        """Supported languages sorted by display name."""
        try:
            codes = self.provider.supported_languages()
        except TranslationProviderError as e:
            logger.error("Could not fetch supported languages: %s", e)
            return []
        return sorted({AvailableLanguage(code) for code in codes})

    def check_support(self, source: Optional[str], target: Optional[str]) -> SupportCheck:
        """
        Check whether the provider can translate from source to target.

        An unset side gives UNKNOWN without calling the provider.
        """
        pair = LanguagePair(source=source, target=target)

        with self._lock:
            if self._last_check is None or self._last_check.pair != pair:
                self._last_check = SupportCheck(pair, TranslationSupport.UNKNOWN)

        if not pair.is_complete:
            return SupportCheck(pair, TranslationSupport.UNKNOWN)

        check = SupportCheck(pair, self._query_support(pair))
        with self._lock:
            self._last_check = check
        return check

    def cached_support(self, pair: LanguagePair) -> TranslationSupport:
        """Support for pair if it was the last one checked, otherwise UNKNOWN."""
        check = self._last_check
        if check is not None and check.pair == pair:
            return check.support
        return TranslationSupport.UNKNOWN

    def reset(self) -> None:
        with self._lock:
            self._last_check = None

    def _query_support(self, pair: LanguagePair) -> TranslationSupport:
        try:
            status = self.provider.status(pair.source, pair.target)
        except UnknownSupportStatus as e:
            logger.info("Translation support status for %s -> %s is unknown: %s",
                        pair.source, pair.target, e)
            return TranslationSupport.UNKNOWN
        except TranslationProviderError as e:
            logger.error("Support check for %s -> %s failed: %s", pair.source, pair.target, e)
            return TranslationSupport.UNKNOWN

        if status in (SupportStatus.INSTALLED, SupportStatus.SUPPORTED):
            return TranslationSupport.SUPPORTED
        if status is SupportStatus.UNSUPPORTED:
            return TranslationSupport.UNSUPPORTED

        logger.info("Translation support status for %s -> %s is unknown: %r",
                    pair.source, pair.target, status)
        return TranslationSupport.UNKNOWN
