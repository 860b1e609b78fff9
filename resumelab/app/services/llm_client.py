"""
Chat-completion client for the hosted LLM (Groq, OpenAI-compatible API).
Requests JSON-object replies; callers get a parsed dict or a typed LLMServiceError.
"""
import json

import openai
from openai import OpenAI

from resumelab.app.core.config import settings
from resumelab.app.core.exceptions import (
    LLMNotConfiguredError,
    LLMResponseError,
    LLMServiceError,
    LLMTimeoutError,
)
from resumelab.app.core.logging_config import get_logger

logger = get_logger("services.llm_client")


def get_client() -> OpenAI:
    if not settings.groq_api_key:
        raise LLMNotConfiguredError("GROQ_API_KEY is not configured")
    return OpenAI(
        api_key=settings.groq_api_key,
        base_url=settings.llm_base_url,
        timeout=settings.llm_timeout,
        max_retries=0,
    )


def chat_completion(messages: list[dict]) -> str:
    """Send messages to the LLM and return the reply text."""
    client = get_client()
    try:
        resp = client.chat.completions.create(
            model=settings.llm_model,
            messages=messages,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            top_p=settings.llm_top_p,
            response_format={"type": "json_object"},
        )
    except openai.APITimeoutError as e:
        logger.warning("LLM API call timed out after %ss", settings.llm_timeout)
        raise LLMTimeoutError("LLM API request timeout") from e
    except openai.APIStatusError as e:
        logger.error("LLM API error %s: %s", e.status_code, e.message)
        raise LLMServiceError(f"LLM API error {e.status_code}: {e.message}") from e
    except openai.APIError as e:
        logger.error("LLM API call failed: %s", e)
        raise LLMServiceError(f"Failed to call LLM API: {e}") from e

    choices = getattr(resp, "choices", None) or []
    content = choices[0].message.content if choices and choices[0].message else None
    if not content:
        raise LLMResponseError("Invalid response structure from LLM API")
    return content


def chat_json(messages: list[dict]) -> dict:
    """chat_completion + JSON decode. The reply must be a JSON object."""
    content = chat_completion(messages)
    try:
        result = json.loads(content)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse LLM reply as JSON: %s | raw=%s", e, content[:2000])
        raise LLMResponseError("Failed to parse AI response as JSON") from e
    if not isinstance(result, dict):
        logger.error("LLM reply is JSON but not an object | raw=%s", content[:2000])
        raise LLMResponseError("Failed to parse AI response as JSON")
    return result
