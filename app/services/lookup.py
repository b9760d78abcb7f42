"""Word lookup: prompt construction, remote completion and response validation."""

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from openai import OpenAIError
from pydantic import ValidationError

from app.exceptions import (
    IncompleteResponseError,
    ModelReportedError,
    ResponseParseError,
    TransportFailure,
    WordLookupError,
)
from app.schemas import WordDetails
from app.services import llm
from app.services.word_schema import WORD_DETAILS_SCHEMA, ResponseSpec, to_json_schema

logger = logging.getLogger(__name__)

# Fields that must be present for the result to be rendered at all
REQUIRED_FIELDS = ("syllabification", "etymology", "synonyms", "forms")

INCOMPLETE_MESSAGE = "Received incomplete data from the API."

CompletionFn = Callable[[str, dict[str, Any], str], Awaitable[str]]


def normalize_word(raw: str) -> str:
    """Trim and lower-case user input."""
    return raw.strip().lower()


def build_prompt(word: str) -> str:
    """Build the analysis prompt for a single English word."""
    return (
        f'Analyze the English word "{word}". Provide a detailed linguistic breakdown '
        "in a structured JSON format. I need: its primary part of speech; "
        "syllabification; IPA pronunciation; a common, easy-to-understand Chinese "
        "meaning; an etymological meaning in Chinese that explains how the prefixes, "
        "root, and suffixes combine to form the meaning; at least three example "
        "sentences with Chinese translations for the primary form; other word forms "
        "(noun, adjective, etc.). For each form, provide its definition in Chinese, "
        "an example sentence, and its Chinese translation; detailed etymology "
        "including the primary root's language of origin, its meaning in Chinese, a "
        "brief history in Chinese of the root's development and how it entered "
        "English, and a list of related English words. For each related word, "
        "provide its Chinese translation and a morphological breakdown. Also include "
        "a list of synonyms. For each synonym, provide a clear explanation in Chinese "
        f'about its usage difference compared to "{word}", and an example sentence '
        "(with its Chinese translation) that highlights this difference. Finally, "
        "provide a list of visually or phonetically similar English words that are "
        f'commonly confused with "{word}". For each of these \'confusable\' words, '
        "give its primary part of speech and a concise Chinese definition. If the "
        "word is invalid, return a JSON object with an 'error' key."
    )


def parse_word_details(text: str) -> WordDetails:
    """
    Validate raw completion text and type it as WordDetails.

    Only the top-level shape is checked; nested items are taken as returned.

    Raises:
        ResponseParseError: Text is not valid JSON
        ModelReportedError: The model returned an ``error`` field
        IncompleteResponseError: Required fields are missing or unusable
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Response was not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise IncompleteResponseError(INCOMPLETE_MESSAGE)

    if data.get("error"):
        raise ModelReportedError(str(data["error"]))

    if not all(data.get(name) for name in REQUIRED_FIELDS):
        raise IncompleteResponseError(INCOMPLETE_MESSAGE)

    try:
        return WordDetails.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Word details failed type validation: {e}")
        raise IncompleteResponseError(INCOMPLETE_MESSAGE) from e


class WordLookupService:
    """Fetch word details from the completion service."""

    def __init__(
        self,
        complete: CompletionFn | None = None,
        schema: ResponseSpec = WORD_DETAILS_SCHEMA,
    ) -> None:
        self._complete = complete or llm.complete_json
        self._schema = schema

    async def fetch(self, word: str) -> WordDetails:
        """
        Look up a single, already normalized word.

        Every failure is logged and raised as a WordLookupError subclass whose
        message names the word and the reason.
        """
        try:
            text = await self._request(word)
            details = parse_word_details(text)
        except WordLookupError as e:
            logger.error(f"Error fetching word details for '{word}': {e}")
            raise type(e)(f'Failed to fetch details for "{word}": {e}', word=word) from e

        logger.info(f"Fetched details for '{word}'")
        return details

    async def _request(self, word: str) -> str:
        prompt = build_prompt(word)
        try:
            return await self._complete(prompt, to_json_schema(self._schema), self._schema.name)
        except (OpenAIError, ValueError) as e:
            raise TransportFailure(str(e) or type(e).__name__) from e
