"""Central LLM client for structured JSON completions."""

import logging
from typing import Any

from openai import AsyncOpenAI

from app.config import settings

logger = logging.getLogger(__name__)

# Global client instance
_client: AsyncOpenAI | None = None


def get_client() -> AsyncOpenAI:
    """Get or create the global OpenAI client."""
    global _client
    if _client is None:
        _client = AsyncOpenAI(api_key=settings.openai_api_key, timeout=settings.llm_timeout)
    return _client


async def complete_json(
    prompt: str,
    schema: dict[str, Any],
    schema_name: str,
    model: str | None = None,
) -> str:
    """
    Make a single chat completion request with JSON schema output.

    The schema is sent non-strict so the model can still answer with an
    ``{"error": ...}`` object for inputs it rejects. There is no retry.

    Args:
        prompt: The user prompt to send
        schema: JSON schema for structured output
        schema_name: Name for the schema
        model: Optional model override (defaults to settings.openai_model)

    Returns:
        Raw response text, expected to be JSON

    Raises:
        APITimeoutError: Request timed out
        APIStatusError: HTTP error from API
        APIConnectionError: Cannot connect to API
        ValueError: Empty response
    """
    client = get_client()
    model = model or settings.openai_model

    logger.debug("Requesting %s completion from %s", schema_name, model)
    response = await client.chat.completions.create(
        model=model,
        messages=[{"role": "user", "content": prompt}],
        response_format={
            "type": "json_schema",
            "json_schema": {
                "name": schema_name,
                "strict": False,
                "schema": schema,
            },
        },
    )

    content = response.choices[0].message.content
    if not content:
        raise ValueError("Empty response from OpenAI")

    return content
