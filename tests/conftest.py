"""Shared fixtures: a scriptable translation provider and review data."""

import json
import os
from typing import Dict, Iterator, List, Optional

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from cafe_reviews.core import LanguagePair, Review, SupportStatus
from cafe_reviews.io import ReviewStore
from cafe_reviews.services import (
    TranslationProvider,
    TranslationProviderError,
    TranslationRequest,
    TranslationResponse,
)


class FakeTranslationProvider(TranslationProvider):
    """
    In-memory provider for deterministic tests.

    By default translates by appending "2" to the source text, e.g.
    "Cafe A" -> "Cafe A2". Tests tweak the public attributes to script
    reordering, bad identifiers and failures.
    """

    name = "fake"

    def __init__(self):
        self.languages: List[str] = ["en-US", "de-DE", "fr-FR"]
        self.statuses: Dict[tuple, object] = {}
        self.batch_order: Optional[List[int]] = None
        self.batch_responses: Optional[List[TranslationResponse]] = None
        self.fixed_responses: Optional[List[TranslationResponse]] = None
        self.fail_after: Optional[int] = None
        self.fail_translate = False
        self.status_error: Optional[Exception] = None
        self.calls: List[str] = []
        self.submitted: List[TranslationRequest] = []

    def render(self, text: str) -> str:
        return f"{text}2"

    def supported_languages(self) -> List[str]:
        self.calls.append("supported_languages")
        return list(self.languages)

    def status(self, source: str, target: str):
        self.calls.append("status")
        if self.status_error is not None:
            raise self.status_error
        if (source, target) in self.statuses:
            return self.statuses[(source, target)]
        if source == target:
            return SupportStatus.UNSUPPORTED
        return SupportStatus.SUPPORTED

    def translate(self, text: str, pair: LanguagePair) -> TranslationResponse:
        self.calls.append("translate")
        if self.fail_translate:
            raise TranslationProviderError("translation service unavailable")
        return TranslationResponse(source_text=text, target_text=self.render(text))

    def translations(self, requests, pair):
        self.calls.append("translations")
        self.submitted = list(requests)
        if self.fail_translate:
            raise TranslationProviderError("translation service unavailable")
        if self.fixed_responses is not None:
            return list(self.fixed_responses)
        return [
            TranslationResponse(
                source_text=r.source_text,
                target_text=self.render(r.source_text),
                client_identifier=r.client_identifier,
            )
            for r in requests
        ]

    def translate_batch(self, requests, pair) -> Iterator[TranslationResponse]:
        self.calls.append("translate_batch")
        self.submitted = list(requests)
        if self.batch_responses is not None:
            responses = list(self.batch_responses)
        else:
            order = self.batch_order or list(range(len(requests)))
            responses = [
                TranslationResponse(
                    source_text=requests[i].source_text,
                    target_text=self.render(requests[i].source_text),
                    client_identifier=requests[i].client_identifier,
                )
                for i in order
            ]

        for count, response in enumerate(responses):
            if self.fail_after is not None and count >= self.fail_after:
                raise TranslationProviderError("stream interrupted")
            yield response
        if self.fail_after is not None and self.fail_after >= len(responses):
            raise TranslationProviderError("stream interrupted")


class ImmediateThreadPool:
    """Stand-in for QThreadPool that runs workers synchronously."""

    def __init__(self):
        self.started = []

    def start(self, worker):
        self.started.append(worker)
        worker.run()


class DeferredThreadPool:
    """Stand-in for QThreadPool that holds workers until run_all() is called."""

    def __init__(self):
        self.pending = []

    def start(self, worker):
        self.pending.append(worker)

    def run_all(self):
        pending, self.pending = self.pending, []
        for worker in pending:
            worker.run()


def make_review(index: int, name: str, **overrides) -> Review:
    values = dict(
        id=f"r{index}",
        name=name,
        address=f"{index} Main Street",
        description=f"Description {index}",
        highlights=f"Highlights {index}",
        price_range="$$",
        rating=4.0,
    )
    values.update(overrides)
    return Review(**values)


@pytest.fixture
def fake_provider():
    return FakeTranslationProvider()


@pytest.fixture
def immediate_pool():
    return ImmediateThreadPool()


@pytest.fixture
def deferred_pool():
    return DeferredThreadPool()


@pytest.fixture
def pair():
    return LanguagePair(source="en-US", target="de-DE")


@pytest.fixture
def review_factory():
    return make_review


@pytest.fixture
def cafe_store():
    """Store holding three reviews named Cafe A, Cafe B, Cafe C."""
    store = ReviewStore()
    store.load([make_review(i, name) for i, name in enumerate(["Cafe A", "Cafe B", "Cafe C"])])
    return store


@pytest.fixture
def reviews_json():
    """Raw bytes of a valid two-review file."""
    return json.dumps([
        {
            "id": "a",
            "name": "Cafe A",
            "address": "1 First Street",
            "description": "Lovely",
            "highlights": "Coffee",
            "price_range": "$",
            "rating": 4.5,
        },
        {
            "id": "b",
            "name": "Cafe B",
            "address": "2 Second Street",
            "description": "Busy",
            "highlights": "Tea",
            "price_range": "$$",
            "rating": 3,
        },
    ]).encode("utf-8")
