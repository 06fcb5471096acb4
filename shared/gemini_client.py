"""
Gemini client for text generation.

This module provides the GeminiClient class for calling Google's
generateContent REST endpoint. The client performs exactly one request per
call: the intent resolver falls back to keyword matching instead of retrying.
"""

import json
import logging
import time
from typing import Any

import httpx

from routing.errors import ConfigError, ParseError, SchemaError, TransportError
from shared.config import get_settings

logger = logging.getLogger(__name__)

GENERATION_CONFIG: dict[str, Any] = {
    "temperature": 0.3,  # Low temperature for deterministic classification
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 1024,
}

HARM_CATEGORIES = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)
SAFETY_THRESHOLD = "BLOCK_MEDIUM_AND_ABOVE"


def build_request_body(prompt: str) -> dict[str, Any]:
    """Build the generateContent JSON body for a single-turn prompt."""
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": dict(GENERATION_CONFIG),
        "safetySettings": [
            {"category": category, "threshold": SAFETY_THRESHOLD}
            for category in HARM_CATEGORIES
        ],
    }


def extract_candidate_text(payload: Any) -> str:
    """
    Pull the generated text out of a generateContent response.

    Raises:
        SchemaError: If the response has no candidate text (e.g., blocked by
                     safety filters)
    """
    try:
        candidate = payload["candidates"][0]
        text = candidate["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        finish_reason = None
        if isinstance(payload, dict):
            candidates = payload.get("candidates") or [{}]
            if isinstance(candidates, list) and isinstance(candidates[0], dict):
                finish_reason = candidates[0].get("finishReason")
        raise SchemaError(
            f"Invalid response from Gemini API: no candidate text "
            f"(finishReason={finish_reason})"
        ) from e

    if not isinstance(text, str):
        raise SchemaError("Invalid response from Gemini API: candidate text is not a string")
    return text


class GeminiClient:
    """
    Client for the Gemini generateContent API.

    Credentials and endpoint come from settings unless given explicitly. An
    httpx.AsyncClient may be injected (tests use one backed by
    httpx.MockTransport); otherwise a short-lived client is opened per call.
    """

    def __init__(
        self,
        api_key: str | None = None,
        api_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        settings = get_settings()
        self.api_key = settings.GEMINI_API_KEY if api_key is None else api_key
        self.api_url = (api_url or settings.GEMINI_API_URL).rstrip("/")
        self.timeout = settings.GEMINI_TIMEOUT_SECONDS if timeout is None else timeout
        self._http_client = http_client

        logger.info(f"GeminiClient initialized: {self.api_url}, configured={self.is_configured}")

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    async def generate(self, prompt: str) -> str:
        """
        Send a prompt and return the generated text.

        Args:
            prompt: Complete prompt text

        Returns:
            Text of the first candidate

        Raises:
            ConfigError: If no API key is configured (no request is made)
            TransportError: On network failure, timeout or non-2xx status
            ParseError: If the response body is not JSON
            SchemaError: If the response carries no candidate text
        """
        if not self.is_configured:
            raise ConfigError("Gemini API key not configured")

        start_time = time.time()
        body = build_request_body(prompt)

        try:
            if self._http_client is not None:
                response = await self._post(self._http_client, body)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._post(client, body)
        except httpx.TimeoutException as e:
            logger.error(f"Gemini request timed out after {self.timeout}s: {e}")
            raise TransportError(f"Gemini request timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.error(f"HTTP error calling Gemini: {e}")
            raise TransportError(f"Gemini network error: {e}") from e

        latency_ms = (time.time() - start_time) * 1000

        if response.status_code < 200 or response.status_code >= 300:
            logger.error(
                f"Gemini API error: {response.status_code} - {response.text[:500]}",
                extra={"latency_ms": round(latency_ms)},
            )
            raise TransportError(
                f"Gemini API error: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            raise ParseError(f"Gemini response body is not JSON: {e}") from e

        text = extract_candidate_text(payload)

        logger.info(
            f"Gemini reply received: {len(text)} characters",
            extra={"latency_ms": round(latency_ms)},
        )
        return text

    async def _post(self, client: httpx.AsyncClient, body: dict[str, Any]) -> httpx.Response:
        return await client.post(
            self.api_url,
            params={"key": self.api_key},
            json=body,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
