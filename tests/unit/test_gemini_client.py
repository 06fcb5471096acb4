"""
Unit tests for gemini_client.py - Gemini generateContent client.

Tests cover:
- Request shape: API key query parameter, prompt, generation config, safety settings
- Candidate text extraction
- ConfigError without API key (no request made)
- TransportError on non-2xx status, network errors and timeouts
- ParseError / SchemaError on malformed bodies

Testing strategy:
- httpx.MockTransport-backed AsyncClient injected into GeminiClient
"""

import json

import httpx
import pytest

from routing.errors import ConfigError, ParseError, SchemaError, TransportError
from shared.gemini_client import (
    HARM_CATEGORIES,
    GeminiClient,
    build_request_body,
    extract_candidate_text,
)

API_URL = "https://gemini.test/v1beta/models/test-model:generateContent"


def _ok_payload(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}, "finishReason": "STOP"}]}


def _make_client(handler, api_key: str = "secret-key") -> tuple[GeminiClient, httpx.AsyncClient]:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = GeminiClient(api_key=api_key, api_url=API_URL, timeout=5.0, http_client=http_client)
    return client, http_client


# ============================================================================
# Request body
# ============================================================================


class TestBuildRequestBody:
    """Tests for build_request_body()."""

    def test_prompt_is_single_text_part(self):
        body = build_request_body("hello")
        assert body["contents"] == [{"parts": [{"text": "hello"}]}]

    def test_generation_config(self):
        config = build_request_body("hello")["generationConfig"]

        assert config == {"temperature": 0.3, "topK": 40, "topP": 0.95, "maxOutputTokens": 1024}

    def test_safety_settings_cover_four_categories(self):
        settings = build_request_body("hello")["safetySettings"]

        assert [s["category"] for s in settings] == list(HARM_CATEGORIES)
        assert len(settings) == 4
        assert all(s["threshold"] == "BLOCK_MEDIUM_AND_ABOVE" for s in settings)


class TestExtractCandidateText:
    """Tests for extract_candidate_text()."""

    def test_returns_first_candidate_text(self):
        assert extract_candidate_text(_ok_payload("hi")) == "hi"

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"candidates": []},
            {"candidates": [{"finishReason": "SAFETY"}]},
            {"candidates": [{"content": {"parts": []}}]},
            {"candidates": [{"content": {"parts": [{"text": 42}]}}]},
            ["not", "a", "dict"],
        ],
    )
    def test_missing_text_raises_schema_error(self, payload):
        with pytest.raises(SchemaError):
            extract_candidate_text(payload)


# ============================================================================
# GeminiClient.generate()
# ============================================================================


class TestGenerate:
    """Tests for GeminiClient.generate()."""

    @pytest.mark.asyncio
    async def test_successful_call(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=_ok_payload('{"intent": {"route": "/"}}'))

        client, http_client = _make_client(handler)
        async with http_client:
            text = await client.generate("classify this")

        assert text == '{"intent": {"route": "/"}}'
        assert len(seen) == 1

        request = seen[0]
        assert request.method == "POST"
        assert request.url.params["key"] == "secret-key"
        assert str(request.url).startswith(API_URL)

        body = json.loads(request.content)
        assert body["contents"][0]["parts"][0]["text"] == "classify this"
        assert body["generationConfig"]["temperature"] == 0.3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("api_key", ["", "   "])
    async def test_missing_api_key_raises_config_error_without_request(self, api_key):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json=_ok_payload("never"))

        client, http_client = _make_client(handler, api_key=api_key)
        async with http_client:
            with pytest.raises(ConfigError):
                await client.generate("classify this")

        assert calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 403, 429, 500, 503])
    async def test_non_2xx_raises_transport_error(self, status):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, text="upstream failure")

        client, http_client = _make_client(handler)
        async with http_client:
            with pytest.raises(TransportError) as exc_info:
                await client.generate("classify this")

        assert exc_info.value.status_code == status
        assert str(status) in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_network_error_raises_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client, http_client = _make_client(handler)
        async with http_client:
            with pytest.raises(TransportError) as exc_info:
                await client.generate("classify this")

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_timeout_raises_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        client, http_client = _make_client(handler)
        async with http_client:
            with pytest.raises(TransportError, match="timed out"):
                await client.generate("classify this")

    @pytest.mark.asyncio
    async def test_non_json_body_raises_parse_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>oops</html>")

        client, http_client = _make_client(handler)
        async with http_client:
            with pytest.raises(ParseError):
                await client.generate("classify this")

    @pytest.mark.asyncio
    async def test_blocked_reply_raises_schema_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"candidates": [{"finishReason": "SAFETY"}]})

        client, http_client = _make_client(handler)
        async with http_client:
            with pytest.raises(SchemaError, match="SAFETY"):
                await client.generate("classify this")


class TestClientConfiguration:
    """Tests for settings-driven defaults."""

    def test_defaults_come_from_settings(self):
        client = GeminiClient()

        assert client.api_key == "test-gemini-key"
        assert client.api_url == API_URL
        assert client.is_configured is True

    def test_explicit_empty_key_is_not_configured(self):
        assert GeminiClient(api_key="").is_configured is False
