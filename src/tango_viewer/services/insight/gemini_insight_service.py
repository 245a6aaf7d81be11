"""Gemini Insight Service - "Gemini Sensei" word explanations via Google Gemini API."""

import logging
import time
from typing import Dict

import google.genai as genai
from google.genai import types

from tango_viewer.core import VocabRecord
from tango_viewer.services.insight.insight_service import InsightResult, InsightService

logger = logging.getLogger(__name__)


class GeminiInsightService(InsightService):
    """Insight service using Google Gemini API.

    Successful answers are kept per record id for the lifetime of the
    instance, so reopening a card does not spend another request.
    """

    MODEL_NAME = "gemini-2.5-flash"
    MAX_RETRIES = 3
    INITIAL_RETRY_DELAY = 2

    PROMPT_TEMPLATE = """You are a helpful and friendly Japanese language tutor named "Gemini Sensei".
A user wants to understand the word "{expression}" [{reading}] better.
The word is a {part_of_speech} and its basic definition is: "{definition}".

Please provide a concise and clear explanation for a Japanese language learner. Structure your response in English with the following sections using Markdown headings:

### Deeper Meaning & Nuance
Explain the word's nuances, common contexts, and any cultural significance if applicable. If there are similar words, briefly explain the difference.

### More Examples
Provide 2-3 new, practical example sentences. For each example, provide the Japanese sentence (with the target word in bold), its reading in furigana style (e.g., 日本[にほん]), and the English translation.

### Mnemonic
Provide a simple and memorable mnemonic to help remember the word.

Keep your response friendly and encouraging!
"""

    def __init__(self) -> None:
        self._cache: Dict[str, InsightResult] = {}

    def build_prompt(self, record: VocabRecord) -> str:
        return self.PROMPT_TEMPLATE.format(
            expression=record.expression,
            reading=record.reading,
            part_of_speech=record.part_of_speech or "word",
            definition=record.definition,
        )

    def explain_word(self, record: VocabRecord, api_key: str) -> InsightResult:
        """Generate an explanation, retrying on rate limits with exponential backoff."""
        cached = self._cache.get(record.id)
        if cached is not None:
            return cached

        result = self._request(self.build_prompt(record), api_key)
        if result.is_success():
            self._cache[record.id] = result
        return result

    def clear_cache(self) -> None:
        self._cache.clear()

    def _request(self, prompt: str, api_key: str) -> InsightResult:
        retry_delay = self.INITIAL_RETRY_DELAY
        attempt = 0

        while True:
            attempt += 1
            try:
                client = genai.Client(api_key=api_key)
                logger.debug(
                    "Insight request attempt %d/%d, model=%s, prompt=%d chars",
                    attempt,
                    self.MAX_RETRIES,
                    self.MODEL_NAME,
                    len(prompt),
                )

                response = client.models.generate_content(
                    model=self.MODEL_NAME,
                    contents=prompt,
                    config=types.GenerateContentConfig(
                        temperature=0.7,
                        max_output_tokens=1024,
                    ),
                )

                if not response.text:
                    return InsightResult(
                        text=None,
                        model=self.MODEL_NAME,
                        error="Empty response from API",
                    )

                return InsightResult(
                    text=response.text.strip(),
                    model=self.MODEL_NAME,
                    error=None,
                )

            except Exception as exc:
                error_msg = str(exc).lower()
                is_rate_limit = (
                    "429" in error_msg
                    or "resource_exhausted" in error_msg
                    or "quota" in error_msg
                    or "rate_limit" in error_msg
                )

                if is_rate_limit and attempt < self.MAX_RETRIES:
                    logger.warning(
                        "Rate limit on attempt %d/%d, retrying in %ss",
                        attempt,
                        self.MAX_RETRIES,
                        retry_delay,
                    )
                    time.sleep(retry_delay)
                    retry_delay *= 2
                    continue

                logger.error("Insight request failed (%s): %s", type(exc).__name__, exc)
                return self._classify_error(exc, error_msg, is_rate_limit)

    def _classify_error(self, exc: Exception, error_msg: str, is_rate_limit: bool) -> InsightResult:
        if is_rate_limit:
            message = "API quota exceeded. Please try again later."
        elif "api_key" in error_msg or "authentication" in error_msg or "invalid" in error_msg:
            message = f"Invalid API key or request: {exc}"
        elif "deadline" in error_msg or "timeout" in error_msg:
            message = "Request timed out. Please check your connection."
        else:
            message = "Sorry, I had trouble thinking of an explanation. Please try again."
        return InsightResult(text=None, model=self.MODEL_NAME, error=message)
