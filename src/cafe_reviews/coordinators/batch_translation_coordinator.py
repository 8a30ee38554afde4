"""Batch Translation Coordinator - routes provider responses back to reviews."""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from cafe_reviews.core import ClientIdentifier, LanguagePair, Review, TranslatableField
from cafe_reviews.io import ReviewIndexError, ReviewStore
from cafe_reviews.services.translation import (
    TranslationProvider,
    TranslationProviderError,
    TranslationRequest,
    TranslationResult,
)

logger = logging.getLogger(__name__)


@dataclass
class BatchTranslationOutcome:
    """Summary of one batch run."""

    applied: int = 0
    discarded: int = 0
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


class BatchTranslationCoordinator:
    """
    Issues translation requests and applies the results.

    Three strategies, kept apart on purpose:
    - translate(): one string, one response.
    - translate_all_at_once(): description and highlights of one review,
      correlated by the position of each response.
    - translate_sequence(): one field of every review, correlated by client
      identifier so responses may arrive in any order.
    """

    def __init__(self, provider: TranslationProvider):
        self.provider = provider
        self.translated_text = ""

    @staticmethod
    def identifier_for(index: int) -> str:
        return ClientIdentifier(index).format()

    @staticmethod
    def index_for(identifier: Optional[str], limit: int) -> Optional[int]:
        token = ClientIdentifier.try_parse(identifier, limit)
        return token.index if token is not None else None

    def translate(self, text: str, pair: LanguagePair) -> TranslationResult:
        """
        Translate a single string into translated_text.

        On failure translated_text keeps its previous value and the result
        carries the error.
        """
        try:
            response = self.provider.translate(text, pair)
        except TranslationProviderError as e:
            logger.error("Error executing translate: %s", e)
            return TranslationResult(text="", model=self.provider.name, error=str(e))

        self.translated_text = response.target_text
        return TranslationResult(text=response.target_text, model=self.provider.name)

    def translate_all_at_once(self, review: Review, pair: LanguagePair) -> Review:
        """
        Translate a review's description and highlights in one fixed request.

        The first response becomes the description and the last one the
        highlights. With a single response only the description changes.
        A missing response keeps the original text; a provider failure
        returns the review unchanged.
        """
        requests = [
            TranslationRequest(source_text=review.description),
            TranslationRequest(source_text=review.highlights),
        ]

        try:
            responses = self.provider.translations(requests, pair)
        except TranslationProviderError as e:
            logger.error("Error executing translate_all_at_once: %s", e)
            return review

        return replace(
            review,
            description=responses[0].target_text if responses else review.description,
            highlights=responses[-1].target_text if len(responses) > 1 else review.highlights,
        )

    def translate_sequence(
        self,
        store: ReviewStore,
        pair: LanguagePair,
        field: TranslatableField = TranslatableField.NAME,
    ) -> BatchTranslationOutcome:
        """
        Translate one field of every review in the store.

        Each request is tagged with its index. Responses are applied as
        they arrive; unparseable or out-of-range identifiers are dropped.
        A provider failure stops the run but keeps what was already applied.
        """
        outcome = BatchTranslationOutcome()
        texts = store.field_texts(field)
        if not texts:
            return outcome

        requests = [
            TranslationRequest(source_text=text, client_identifier=self.identifier_for(index))
            for index, text in enumerate(texts)
        ]

        try:
            for response in self.provider.translate_batch(requests, pair):
                index = self.index_for(response.client_identifier, len(texts))
                if index is None:
                    logger.warning("Discarding response with client identifier %r",
                                   response.client_identifier)
                    outcome.discarded += 1
                    continue
                try:
                    store.apply_translation(index, field, response.target_text)
                except ReviewIndexError as e:
                    logger.warning("Discarding response for index %d: %s", index, e)
                    outcome.discarded += 1
                    continue
                outcome.applied += 1
        except TranslationProviderError as e:
            logger.error("Error executing translate_sequence: %s", e)
            outcome.error = str(e)
        except Exception as e:
            logger.exception("Unexpected error executing translate_sequence")
            outcome.error = f"Unexpected translation error: {e}"

        logger.info("Batch translation of %s finished: %d applied, %d discarded",
                    TranslatableField(field).value, outcome.applied, outcome.discarded)
        return outcome
