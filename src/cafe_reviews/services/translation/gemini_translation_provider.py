"""Gemini Translation Provider - Implements translation via Google Gemini API."""

import json
import logging
import time
from typing import Iterator, List, Optional

import google.genai as genai
from google.genai import types

from cafe_reviews.core import AvailableLanguage, LanguagePair, SupportStatus
from cafe_reviews.services.translation.translation_provider import (
    TranslationProvider,
    TranslationProviderError,
    TranslationRequest,
    TranslationResponse,
)

logger = logging.getLogger(__name__)


class GeminiTranslationProvider(TranslationProvider):
    """
    Translation provider using Google Gemini API.

    Nothing is installed on-device, so status() never reports INSTALLED.
    Batches are sent as JSON objects keyed by client identifier, a chunk at
    a time, and responses are yielded as each chunk comes back.
    """

    name = "gemini"
    MODEL_NAME = "gemini-2.0-flash"
    BATCH_CHUNK_SIZE = 20
    MAX_RETRIES = 3

    SUPPORTED_LANGUAGES = [
        "ar-AE", "de-DE", "en-GB", "en-US", "es-ES", "fr-FR", "hi-IN", "id-ID",
        "it-IT", "ja-JP", "ko-KR", "nl-NL", "pl-PL", "pt-BR", "ru-RU", "th-TH",
        "tr-TR", "uk-UA", "vi-VN", "zh-CN", "zh-TW",
    ]

    TRANSLATION_PROMPT = """Translate the following text from {source} to {target}.
Preserve the tone and nuance of the original.
Only output the translation, nothing else.

Text:
{text}"""

    BATCH_PROMPT = """Translate every value of the following JSON object from {source} to {target}.
Keep the keys unchanged. Respond with a JSON object mapping each key to its translation.

{payload}"""

    def __init__(self, api_key: str, model_name: Optional[str] = None, client=None):
        self.api_key = api_key
        self.model_name = model_name or self.MODEL_NAME
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def supported_languages(self) -> List[str]:
        return list(self.SUPPORTED_LANGUAGES)

    def status(self, source: str, target: str) -> SupportStatus:
        codes = {code.lower() for code in self.SUPPORTED_LANGUAGES}
        if source.lower() not in codes or target.lower() not in codes:
            return SupportStatus.UNSUPPORTED
        if AvailableLanguage(source).language_code == AvailableLanguage(target).language_code:
            return SupportStatus.UNSUPPORTED
        return SupportStatus.SUPPORTED

    def translate(self, text: str, pair: LanguagePair) -> TranslationResponse:
        source, target = self._language_names(pair)
        prompt = self.TRANSLATION_PROMPT.format(source=source, target=target, text=text)
        translated = self._generate(prompt)
        return TranslationResponse(source_text=text, target_text=translated)

    def translations(
        self, requests: List[TranslationRequest], pair: LanguagePair
    ) -> List[TranslationResponse]:
        responses = []
        for request in requests:
            response = self.translate(request.source_text, pair)
            responses.append(
                TranslationResponse(
                    source_text=request.source_text,
                    target_text=response.target_text,
                    client_identifier=request.client_identifier,
                )
            )
        return responses

    def translate_batch(
        self, requests: List[TranslationRequest], pair: LanguagePair
    ) -> Iterator[TranslationResponse]:
        source, target = self._language_names(pair)
        for start in range(0, len(requests), self.BATCH_CHUNK_SIZE):
            chunk = requests[start:start + self.BATCH_CHUNK_SIZE]
            sources = {request.client_identifier: request.source_text for request in chunk}
            prompt = self.BATCH_PROMPT.format(
                source=source,
                target=target,
                payload=json.dumps(sources, ensure_ascii=False),
            )
            raw = self._generate(prompt, json_output=True)
            try:
                translated = json.loads(raw)
            except json.JSONDecodeError as e:
                raise TranslationProviderError(f"Malformed batch response: {e}") from e
            if not isinstance(translated, dict):
                raise TranslationProviderError("Batch response is not a JSON object")

            for identifier, text in translated.items():
                if not isinstance(text, str):
                    logger.warning("Skipping non-text translation for %r: %r", identifier, text)
                    continue
                yield TranslationResponse(
                    source_text=sources.get(identifier, ""),
                    target_text=text,
                    client_identifier=identifier,
                )

    def _language_names(self, pair: LanguagePair) -> tuple[str, str]:
        if not pair.is_complete:
            raise TranslationProviderError("Source and target languages must both be set")
        return (
            AvailableLanguage(pair.source).localized_name(),
            AvailableLanguage(pair.target).localized_name(),
        )

    def _generate(self, prompt: str, json_output: bool = False) -> str:
        """Run one generate_content call, retrying on rate limits."""
        retry_delay = 2
        attempt = 0

        while True:
            attempt += 1
            try:
                logger.debug(
                    "Gemini request attempt %d/%d, model %s, %d prompt chars",
                    attempt, self.MAX_RETRIES, self.model_name, len(prompt),
                )
                response = self.client.models.generate_content(
                    model=self.model_name,
                    contents=prompt,
                    config=types.GenerateContentConfig(
                        temperature=0.3,
                        top_p=0.95,
                        top_k=40,
                        max_output_tokens=2048,
                        response_mime_type="application/json" if json_output else None,
                    ),
                )
            except Exception as e:
                error_msg = str(e).lower()
                is_rate_limit = (
                    "429" in error_msg
                    or "resource_exhausted" in error_msg
                    or "quota" in error_msg
                    or "rate_limit" in error_msg
                )

                if is_rate_limit and attempt < self.MAX_RETRIES:
                    logger.warning("Rate limit detected. Retrying in %d seconds...", retry_delay)
                    time.sleep(retry_delay)
                    retry_delay *= 2
                    continue

                logger.error("Gemini request failed (%s): %s", type(e).__name__, e)

                if "api_key" in error_msg or "authentication" in error_msg or "invalid" in error_msg:
                    raise TranslationProviderError(f"Invalid API key or request: {e}") from e
                elif is_rate_limit:
                    raise TranslationProviderError("API quota exceeded. Please try again later.") from e
                elif "deadline" in error_msg or "timeout" in error_msg:
                    raise TranslationProviderError("Request timed out. Please check your connection.") from e
                raise TranslationProviderError(f"Translation failed: {e}") from e

            if not response.text:
                raise TranslationProviderError("Empty response from API")
            return response.text.strip()
