"""
Structured JSON logging for the intent router.

Every log line is a single JSON object on stderr. Classification logs carry
the outcome as top-level fields so a log pipeline can chart routing quality
without parsing messages:

    {"timestamp": "...", "level": "INFO", "logger": "routing.resolver",
     "message": "Intent resolved | ...", "route": "/dashboard",
     "confidence": 0.9, "source": "generative", "latency_ms": 412}

A rising share of "heuristic" source with "generative" enabled means Gemini
is failing and the keyword fallback is carrying traffic.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from shared.config import get_settings

# LogRecord attributes promoted to top-level JSON fields when passed via extra=
RESOLUTION_FIELDS = ("route", "confidence", "source", "latency_ms")
REQUEST_FIELDS = ("request_path",)


def resolution_extra(
    route: str,
    confidence: float,
    source: str,
    latency_ms: float,
) -> dict[str, Any]:
    """
    Build the extra= mapping for a classification log line.

    Args:
        route: Resolved catalog route
        confidence: Final confidence in [0.1, 1.0]
        source: Producing path ("generative", "heuristic", "fallback")
        latency_ms: Time spent classifying, rounded to whole milliseconds

    Returns:
        dict suitable for logger.info(..., extra=...)
    """
    return {
        "route": route,
        "confidence": round(confidence, 4),
        "source": source,
        "latency_ms": round(latency_ms),
    }


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for intent router logs.

    Outputs:
    - timestamp (ISO 8601, UTC)
    - level, logger, message
    - route, confidence, source, latency_ms (classification outcome, if given)
    - request_path (HTTP handler logs, if given)
    - exception (formatted traceback, if exc_info was set)
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field_name in RESOLUTION_FIELDS + REQUEST_FIELDS:
            if hasattr(record, field_name):
                log_data[field_name] = getattr(record, field_name)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Enum sources and other non-JSON values are logged as text
        return json.dumps(log_data, default=str)


def configure_logging() -> None:
    """
    Install the JSON formatter on the root logger.

    Called once when the API module is imported. LOG_LEVEL comes from
    settings (unknown names fall back to INFO). At DEBUG the keyword
    classifier also logs its per-utterance matches; at WARNING only
    fallbacks, repairs of unknown routes and provider errors remain.
    """
    settings = get_settings()

    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(console_handler)

    root_logger.info(
        f"Logging configured: level={logging.getLevelName(log_level)}, format=JSON, "
        f"generative={'on' if settings.ENABLE_GENERATIVE_CLASSIFIER else 'off'}"
    )
