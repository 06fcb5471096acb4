"""
Startup configuration validation module.

This module provides startup-time validation for critical configuration
to catch misconfigurations early (fail-fast) rather than at runtime when
a user speaks the first request.

Usage:
    from shared.startup_validator import validate_startup_config, StartupValidationError

    async def main():
        try:
            await validate_startup_config()
        except StartupValidationError as e:
            logger.critical(f"Startup blocked: {e}")
            sys.exit(1)
"""

import logging

from shared.config import Settings, get_settings

logger = logging.getLogger(__name__)


class StartupValidationError(Exception):
    """Raised when critical startup validation fails."""

    pass


async def validate_startup_config(settings: Settings | None = None) -> dict[str, bool]:
    """
    Validate all critical configuration at startup.

    Performs tiered validation:
    - TIER 1 (CRITICAL): Block startup if any fail
    - TIER 2 (IMPORTANT): Warn but allow startup

    A missing Gemini API key is only IMPORTANT: the API still starts and the
    analyze-intent endpoint answers 500 until the key is configured.

    Args:
        settings: Settings to validate (defaults to the cached application settings)

    Returns:
        dict of {check_name: passed} for all validations

    Raises:
        StartupValidationError: If any CRITICAL check fails
    """
    settings = settings or get_settings()
    results: dict[str, bool] = {}
    critical_failures: list[str] = []

    # =========================================================================
    # TIER 1: CRITICAL (block startup if any fail)
    # =========================================================================

    # 1. Timeouts must be positive
    for name in ("GEMINI_TIMEOUT_SECONDS", "CLASSIFICATION_TIMEOUT_SECONDS"):
        value = getattr(settings, name)
        if value <= 0:
            critical_failures.append(f"{name} must be positive (got {value})")
            results[name.lower()] = False
        else:
            results[name.lower()] = True

    # 2. Auto-navigation threshold must be a usable confidence
    threshold = settings.AUTO_NAVIGATE_THRESHOLD
    if not 0.0 < threshold <= 1.0:
        critical_failures.append(
            f"AUTO_NAVIGATE_THRESHOLD must be in (0, 1] (got {threshold})"
        )
        results["auto_navigate_threshold"] = False
    else:
        results["auto_navigate_threshold"] = True

    # =========================================================================
    # TIER 2: IMPORTANT (warn but allow startup)
    # =========================================================================

    # 3. Gemini API key
    if not settings.GEMINI_API_KEY.strip():
        logger.warning(
            "  [WARN] GEMINI_API_KEY not set - /api/analyze-intent will answer 500"
        )
        results["gemini_api_key"] = False
    else:
        results["gemini_api_key"] = True
        logger.info("  [OK] Gemini API key configured")

    # 4. Gemini endpoint must be HTTPS (API key travels in the query string)
    if not settings.GEMINI_API_URL.startswith("https://"):
        logger.warning("  [WARN] GEMINI_API_URL should use https://")
        results["gemini_api_url_https"] = False
    else:
        results["gemini_api_url_https"] = True

    # 5. Offline mode
    if not settings.ENABLE_GENERATIVE_CLASSIFIER:
        logger.info(
            "  [INFO] Generative classifier disabled - keyword matching only"
        )

    # =========================================================================
    # Summary and result
    # =========================================================================

    passed = sum(1 for v in results.values() if v)
    total = len(results)
    logger.info(f"Startup validation: {passed}/{total} checks passed")

    if critical_failures:
        logger.critical("=" * 60)
        logger.critical("STARTUP BLOCKED - Critical configuration errors:")
        for i, failure in enumerate(critical_failures, 1):
            logger.critical(f"  {i}. {failure}")
        logger.critical("=" * 60)
        raise StartupValidationError(
            f"Critical startup validation failed ({len(critical_failures)} errors): "
            f"{'; '.join(critical_failures)}"
        )

    return results
