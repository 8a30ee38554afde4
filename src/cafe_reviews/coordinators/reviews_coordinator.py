"""Reviews Coordinator - view-model connecting the review UI with translation services."""

import logging
from pathlib import Path
from typing import Callable, List, Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from cafe_reviews.core import (
    AvailableLanguage,
    LanguagePair,
    SupportCheck,
    TranslationSupport,
)
from cafe_reviews.io import ReviewIndexError, ReviewLoader, ReviewStore
from cafe_reviews.services import LanguageCatalog, ProviderWorker, TranslationProvider

from .batch_translation_coordinator import BatchTranslationCoordinator

logger = logging.getLogger(__name__)

NO_PROVIDER_MESSAGE = "API key not configured. Add GEMINI_API_KEY to .env file."


class _ProviderCall(QObject):
    """Helper living in the GUI thread so worker results are handled there."""

    def __init__(
        self,
        on_result: Callable[[object], None],
        on_error: Callable[[str], None],
        on_finished: Callable[["_ProviderCall"], None],
    ):
        super().__init__()
        self._on_result = on_result
        self._on_error = on_error
        self._on_finished = on_finished

    @Slot(object)
    def handle_result(self, result):
        self._on_result(result)

    @Slot(str)
    def handle_error(self, error: str):
        self._on_error(error)

    @Slot()
    def handle_finished(self):
        self._on_finished(self)


class ReviewsCoordinator(QObject):
    """
    Orchestrates review loading, language selection and translation.

    Responsibilities:
    - Load reviews into the ReviewStore.
    - Fetch supported languages and check the selected language pair.
    - Run one translation operation at a time on the thread pool and
      report its outcome through signals.
    """

    languages_ready = Signal(object)
    support_checked = Signal(object)
    busy_changed = Signal(bool)
    translated_text_changed = Signal(str)
    review_translated = Signal(int, object)
    translation_finished = Signal(object)
    translation_failed = Signal(str)

    def __init__(
        self,
        store: ReviewStore,
        loader: ReviewLoader,
        provider: Optional[TranslationProvider],
        reviews_file: Optional[Path] = None,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        if store is None:
            raise ValueError("ReviewStore must not be None")
        if loader is None:
            raise ValueError("ReviewLoader must not be None")

        self.store = store
        self.loader = loader
        self.provider = provider
        self.reviews_file = reviews_file
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self.catalog = LanguageCatalog(provider) if provider is not None else None
        self.batch = BatchTranslationCoordinator(provider) if provider is not None else None

        self.available_languages: List[AvailableLanguage] = []
        self.language_pair = LanguagePair()
        self.support_check = SupportCheck(self.language_pair, TranslationSupport.UNKNOWN)
        self.is_busy = False

        # Keep references so helpers aren't garbage collected while workers run
        self._pending_calls: set[_ProviderCall] = set()

    def load_reviews(self, path: Optional[Path] = None) -> int:
        """
        Load reviews from path (or the configured/bundled file). Returns the count.

        Refused while a translation runs, since its responses address the
        current store positions.
        """
        if self.is_busy:
            self.translation_failed.emit("Cannot reload reviews while a translation is in progress")
            return len(self.store)

        path = path or self.reviews_file or self.loader.bundled_reviews_path()
        reviews = self.loader.load_or_empty(path)
        self.store.load(reviews)
        return len(reviews)

    def prepare_supported_languages(self) -> None:
        """Fetch the provider's languages in the background."""
        if self.catalog is None:
            self.languages_ready.emit([])
            return
        self._start(self.catalog.available_languages, self._handle_languages, "language lookup")

    @Slot(object)
    def on_language_pair_changed(self, pair: LanguagePair) -> None:
        """Check support for a newly selected pair. Re-selecting the same pair is a no-op."""
        if pair == self.language_pair:
            return

        self.language_pair = pair
        self.support_check = SupportCheck(pair, TranslationSupport.UNKNOWN)
        self.support_checked.emit(self.support_check)

        if self.catalog is None or not pair.is_complete:
            return

        self._start(
            lambda: self.catalog.check_support(pair.source, pair.target),
            self._handle_support_check,
            "language support check",
        )

    def request_text_translation(self, text: str) -> None:
        """Translate a single string; result arrives via translated_text_changed."""
        if not self._can_start():
            return
        pair = self.language_pair
        self._start_operation(
            lambda: self.batch.translate(text, pair),
            self._handle_text_result,
            "translate",
        )

    def request_review_translation(self, index: int) -> None:
        """Translate description and highlights of one review in a single request."""
        if not self._can_start():
            return
        try:
            review = self.store.get(index)
        except ReviewIndexError as e:
            self.translation_failed.emit(str(e))
            return
        pair = self.language_pair
        self._start_operation(
            lambda: (index, self.batch.translate_all_at_once(review, pair)),
            self._handle_review_result,
            "translate review",
        )

    def request_name_translation(self) -> None:
        """Translate the names of all reviews as one batch."""
        if not self._can_start():
            return
        pair = self.language_pair
        self._start_operation(
            lambda: self.batch.translate_sequence(self.store, pair),
            self._handle_batch_outcome,
            "translate names",
        )

    def reset(self) -> None:
        """Forget the selected pair and its support result."""
        if self.catalog is not None:
            self.catalog.reset()
        self.on_language_pair_changed(LanguagePair())

    def actions_enabled(self) -> bool:
        """Return True if translation actions should be enabled."""
        return (
            self.provider is not None
            and not self.is_busy
            and self.support_check.pair == self.language_pair
            and self.support_check.is_supported
        )

    def _can_start(self) -> bool:
        if self.provider is None:
            self.translation_failed.emit(NO_PROVIDER_MESSAGE)
            return False
        if self.is_busy:
            self.translation_failed.emit("A translation is already in progress")
            return False
        if not self.language_pair.is_complete:
            self.translation_failed.emit("Select a source and a target language first")
            return False
        if not self.support_check.is_supported:
            self.translation_failed.emit("The selected language pair is not supported")
            return False
        return True

    def _start_operation(self, task, on_result, description: str) -> None:
        self._set_busy(True)
        self._start(task, on_result, description, on_done=lambda: self._set_busy(False))

    def _start(self, task, on_result, description: str, on_done=None) -> None:
        worker = ProviderWorker(task, description)

        def finished(call: _ProviderCall):
            self._pending_calls.discard(call)
            if on_done is not None:
                on_done()

        call = _ProviderCall(on_result, self._handle_worker_error, finished)
        self._pending_calls.add(call)

        worker.signals.result.connect(call.handle_result)
        worker.signals.error.connect(call.handle_error)
        worker.signals.finished.connect(call.handle_finished)

        self.thread_pool.start(worker)

    def _set_busy(self, busy: bool) -> None:
        if self.is_busy != busy:
            self.is_busy = busy
            self.busy_changed.emit(busy)

    def _handle_languages(self, languages: List[AvailableLanguage]) -> None:
        self.available_languages = languages
        self.languages_ready.emit(languages)

    def _handle_support_check(self, check: SupportCheck) -> None:
        # The user may have picked another pair while this one was checked
        if check.pair != self.language_pair:
            logger.debug("Ignoring stale support check for %s", check.pair)
            return
        self.support_check = check
        self.support_checked.emit(check)

    def _handle_text_result(self, result) -> None:
        if result.is_error:
            self.translation_failed.emit(result.error or "Unknown error")
            return
        self.translated_text_changed.emit(result.text)

    def _handle_review_result(self, indexed_review) -> None:
        index, review = indexed_review
        try:
            self.store.replace(index, review)
        except (ReviewIndexError, ValueError) as e:
            logger.warning("Could not apply translated review %d: %s", index, e)
            self.translation_failed.emit(str(e))
            return
        self.review_translated.emit(index, review)

    def _handle_batch_outcome(self, outcome) -> None:
        self.translation_finished.emit(outcome)
        if outcome.is_error:
            self.translation_failed.emit(outcome.error)

    def _handle_worker_error(self, error: str) -> None:
        logger.error(error)
        self.translation_failed.emit(error)
