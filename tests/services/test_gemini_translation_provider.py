"""Unit tests for GeminiTranslationProvider with a mocked genai client."""

import json
from unittest.mock import MagicMock, patch

import pytest

from cafe_reviews.core import LanguagePair, SupportStatus
from cafe_reviews.services import (
    GeminiTranslationProvider,
    TranslationProviderError,
    TranslationRequest,
)


def response(text):
    result = MagicMock()
    result.text = text
    return result


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def provider(client):
    return GeminiTranslationProvider(api_key="test-key", client=client)


@pytest.fixture
def pair():
    return LanguagePair("en-US", "de-DE")


class TestStatus:

    def test_supported_pair(self, provider):
        assert provider.status("en-US", "de-DE") is SupportStatus.SUPPORTED

    def test_same_language_unsupported(self, provider):
        assert provider.status("en-US", "en-GB") is SupportStatus.UNSUPPORTED

    def test_unknown_code_unsupported(self, provider):
        assert provider.status("en-US", "xx-XX") is SupportStatus.UNSUPPORTED

    def test_never_installed(self, provider):
        statuses = {
            provider.status(a, b)
            for a in provider.supported_languages()
            for b in provider.supported_languages()
        }
        assert SupportStatus.INSTALLED not in statuses


class TestTranslate:

    def test_translate_returns_stripped_text(self, provider, client, pair):
        client.models.generate_content.return_value = response("  Hallo  ")

        result = provider.translate("Hello", pair)

        assert result.target_text == "Hallo"
        assert result.source_text == "Hello"
        prompt = client.models.generate_content.call_args.kwargs["contents"]
        assert "English (en-US)" in prompt
        assert "German (de-DE)" in prompt

    def test_empty_response_raises(self, provider, client, pair):
        client.models.generate_content.return_value = response("")
        with pytest.raises(TranslationProviderError):
            provider.translate("Hello", pair)

    def test_incomplete_pair_raises(self, provider):
        with pytest.raises(TranslationProviderError):
            provider.translate("Hello", LanguagePair("en-US", None))

    def test_api_error_raises_provider_error(self, provider, client, pair):
        client.models.generate_content.side_effect = Exception("deadline exceeded")
        with pytest.raises(TranslationProviderError, match="timed out"):
            provider.translate("Hello", pair)

    @patch("cafe_reviews.services.translation.gemini_translation_provider.time.sleep")
    def test_rate_limit_retries_then_succeeds(self, sleep, provider, client, pair):
        client.models.generate_content.side_effect = [
            Exception("429 RESOURCE_EXHAUSTED"),
            response("Hallo"),
        ]

        assert provider.translate("Hello", pair).target_text == "Hallo"
        sleep.assert_called_once_with(2)

    @patch("cafe_reviews.services.translation.gemini_translation_provider.time.sleep")
    def test_rate_limit_gives_up_after_max_retries(self, sleep, provider, client, pair):
        client.models.generate_content.side_effect = Exception("429 quota")
        with pytest.raises(TranslationProviderError, match="quota"):
            provider.translate("Hello", pair)
        assert client.models.generate_content.call_count == GeminiTranslationProvider.MAX_RETRIES


class TestTranslations:

    def test_responses_follow_submission_order(self, provider, client, pair):
        client.models.generate_content.side_effect = [response("Eins"), response("Zwei")]
        requests = [TranslationRequest("One"), TranslationRequest("Two")]

        responses = provider.translations(requests, pair)

        assert [r.target_text for r in responses] == ["Eins", "Zwei"]


class TestTranslateBatch:

    def test_yields_responses_keyed_by_identifier(self, provider, client, pair):
        client.models.generate_content.return_value = response(json.dumps({"1": "B2", "0": "A2"}))
        requests = [TranslationRequest("A", "0"), TranslationRequest("B", "1")]

        responses = list(provider.translate_batch(requests, pair))

        assert {(r.client_identifier, r.target_text, r.source_text) for r in responses} == {
            ("0", "A2", "A"),
            ("1", "B2", "B"),
        }
        config = client.models.generate_content.call_args.kwargs["config"]
        assert config.response_mime_type == "application/json"

    def test_chunks_are_requested_lazily(self, provider, client, pair, monkeypatch):
        monkeypatch.setattr(GeminiTranslationProvider, "BATCH_CHUNK_SIZE", 1)
        client.models.generate_content.side_effect = [
            response(json.dumps({"0": "A2"})),
            response(json.dumps({"1": "B2"})),
        ]
        stream = provider.translate_batch(
            [TranslationRequest("A", "0"), TranslationRequest("B", "1")], pair
        )

        first = next(stream)

        assert first.target_text == "A2"
        assert client.models.generate_content.call_count == 1

    def test_malformed_json_raises(self, provider, client, pair):
        client.models.generate_content.return_value = response("not json")
        with pytest.raises(TranslationProviderError):
            list(provider.translate_batch([TranslationRequest("A", "0")], pair))

    def test_non_object_json_raises(self, provider, client, pair):
        client.models.generate_content.return_value = response("[\"A2\"]")
        with pytest.raises(TranslationProviderError):
            list(provider.translate_batch([TranslationRequest("A", "0")], pair))

    def test_non_text_values_are_skipped(self, provider, client, pair):
        client.models.generate_content.return_value = response(
            json.dumps({"0": None, "1": "B2", "2": {"text": "C2"}})
        )
        requests = [
            TranslationRequest("A", "0"),
            TranslationRequest("B", "1"),
            TranslationRequest("C", "2"),
        ]

        responses = list(provider.translate_batch(requests, pair))

        assert [(r.client_identifier, r.target_text) for r in responses] == [("1", "B2")]
