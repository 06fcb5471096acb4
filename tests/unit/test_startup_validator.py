"""
Unit tests for startup configuration validation.

Tests cover:
- All checks pass with a complete configuration
- CRITICAL failures (timeouts, threshold) block startup
- IMPORTANT failures (API key, https) only warn
"""

import logging

import pytest

from shared.config import Settings
from shared.startup_validator import StartupValidationError, validate_startup_config


def _settings(**overrides) -> Settings:
    values = {
        "GEMINI_API_KEY": "test-gemini-key",
        "GEMINI_API_URL": "https://gemini.test/v1beta/models/test-model:generateContent",
    }
    values.update(overrides)
    return Settings(**values)


class TestValidateStartupConfig:
    """Tests for validate_startup_config()."""

    @pytest.mark.asyncio
    async def test_all_checks_pass(self):
        results = await validate_startup_config(_settings())

        assert results == {
            "gemini_timeout_seconds": True,
            "classification_timeout_seconds": True,
            "auto_navigate_threshold": True,
            "gemini_api_key": True,
            "gemini_api_url_https": True,
        }

    @pytest.mark.asyncio
    async def test_uses_cached_settings_by_default(self):
        results = await validate_startup_config()
        assert results["gemini_api_key"] is True

    @pytest.mark.asyncio
    async def test_missing_api_key_only_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="shared.startup_validator"):
            results = await validate_startup_config(_settings(GEMINI_API_KEY=""))

        assert results["gemini_api_key"] is False
        assert "GEMINI_API_KEY not set" in caplog.text

    @pytest.mark.asyncio
    async def test_plain_http_url_only_warns(self):
        results = await validate_startup_config(
            _settings(GEMINI_API_URL="http://localhost:8080/generate")
        )
        assert results["gemini_api_url_https"] is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"GEMINI_TIMEOUT_SECONDS": 0}, "GEMINI_TIMEOUT_SECONDS"),
            ({"CLASSIFICATION_TIMEOUT_SECONDS": -1}, "CLASSIFICATION_TIMEOUT_SECONDS"),
            ({"AUTO_NAVIGATE_THRESHOLD": 0}, "AUTO_NAVIGATE_THRESHOLD"),
            ({"AUTO_NAVIGATE_THRESHOLD": 1.5}, "AUTO_NAVIGATE_THRESHOLD"),
        ],
    )
    async def test_critical_failure_blocks_startup(self, overrides, message):
        with pytest.raises(StartupValidationError, match=message):
            await validate_startup_config(_settings(**overrides))

    @pytest.mark.asyncio
    async def test_multiple_critical_failures_reported_together(self):
        with pytest.raises(StartupValidationError) as exc_info:
            await validate_startup_config(
                _settings(GEMINI_TIMEOUT_SECONDS=0, AUTO_NAVIGATE_THRESHOLD=2)
            )

        assert "2 errors" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_offline_mode_is_valid(self):
        results = await validate_startup_config(
            _settings(GEMINI_API_KEY="", ENABLE_GENERATIVE_CLASSIFIER=False)
        )
        assert results["auto_navigate_threshold"] is True
