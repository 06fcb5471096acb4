"""
Test configuration and fixtures.

This module sets up test environment and provides shared fixtures for all tests.
"""

import os

import pytest

# Deterministic settings for tests. Must be set BEFORE shared.config is first used
os.environ["GEMINI_API_KEY"] = "test-gemini-key"
os.environ["GEMINI_API_URL"] = "https://gemini.test/v1beta/models/test-model:generateContent"
os.environ["ENABLE_GENERATIVE_CLASSIFIER"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"


@pytest.fixture(scope="function", autouse=True)
def reset_cached_singletons():
    """
    Reset cached settings and the resolver singleton after each test.

    Tests that tweak environment variables with monkeypatch would otherwise
    leak configuration into later tests.
    """
    from shared.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

    import routing.resolver

    routing.resolver._resolver = None


@pytest.fixture
def gemini_reply():
    """Build a Gemini-style JSON reply text."""
    import json

    def _build(route: str = "/dashboard", confidence: float | None = 0.9, **overrides) -> str:
        intent = {
            "route": route,
            "description": "User wants to see the dashboard",
            "keywords": ["dashboard"],
        }
        if confidence is not None:
            intent["confidence"] = confidence
        reply = {
            "intent": intent,
            "reasoning": "The user explicitly asked for the dashboard.",
            "suggestedActions": ["View your data", "Check analytics"],
            "ttsMessage": "I understand you want to see the dashboard. I'll take you there now.",
        }
        reply.update(overrides)
        return json.dumps(reply)

    return _build
