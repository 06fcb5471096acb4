"""
Repair rules applied to every classification result.

All functions are pure and idempotent: normalizing an already valid result
returns an equal result.
"""

import logging
import math
from dataclasses import replace
from typing import Any

from routing import catalog
from routing.messages import build_tts_message
from routing.models import ClassificationResult, RouteIntent

logger = logging.getLogger(__name__)

MIN_CONFIDENCE = 0.1
MAX_CONFIDENCE = 1.0

# Applied to the confidence of an out-of-catalog route before falling back to the default route
INVALID_ROUTE_PENALTY = 0.5


def clamp_confidence(value: Any) -> float:
    """
    Coerce a confidence value into [MIN_CONFIDENCE, MAX_CONFIDENCE].

    Missing, non-numeric and NaN values count as the minimum confidence.
    Integers too large for a float clamp to the maximum.
    """
    if isinstance(value, bool):
        return MIN_CONFIDENCE
    try:
        confidence = float(value)
    except OverflowError:
        return MAX_CONFIDENCE if value > 0 else MIN_CONFIDENCE
    except (TypeError, ValueError):
        return MIN_CONFIDENCE
    if math.isnan(confidence):
        return MIN_CONFIDENCE
    return min(MAX_CONFIDENCE, max(MIN_CONFIDENCE, confidence))


def repair_intent(intent: RouteIntent) -> RouteIntent:
    """
    Guarantee the intent points at a catalog route with a usable confidence.

    An out-of-catalog route is replaced with the default route and its
    confidence halved (never below MIN_CONFIDENCE).
    """
    confidence = clamp_confidence(intent.confidence)
    route = intent.route
    description = intent.description

    if not catalog.is_valid_route(route):
        fallback = catalog.default_route()
        penalized = max(MIN_CONFIDENCE, confidence * INVALID_ROUTE_PENALTY)
        logger.warning(
            f"Route {route!r} not in catalog, using {fallback.route} | "
            f"confidence {confidence:.2f} -> {penalized:.2f}"
        )
        route = fallback.route
        confidence = penalized

    if not description or not str(description).strip():
        entry = catalog.get_route(route)
        description = entry.description if entry else ""

    keywords = intent.keywords if isinstance(intent.keywords, list) else []
    keywords = [str(k) for k in keywords if k is not None and str(k).strip()]

    if (
        route == intent.route
        and confidence == intent.confidence
        and description == intent.description
        and keywords == intent.keywords
    ):
        return intent

    return RouteIntent(
        route=route,
        confidence=confidence,
        description=str(description),
        keywords=keywords,
    )


def ensure_tts_message(result: ClassificationResult) -> ClassificationResult:
    """Synthesize the spoken message when a producer left it empty."""
    message = result.tts_message
    if isinstance(message, str) and message.strip():
        return result
    return replace(result, tts_message=build_tts_message(result.intent))


def normalize_result(result: ClassificationResult) -> ClassificationResult:
    """Apply every repair rule so the result satisfies the routing invariants."""
    intent = repair_intent(result.intent)

    actions = result.suggested_actions
    if not isinstance(actions, list) or not all(isinstance(a, str) for a in actions):
        actions = catalog.suggested_actions_for(intent.route)

    reasoning = result.reasoning if isinstance(result.reasoning, str) else ""

    if (
        intent is not result.intent
        or actions is not result.suggested_actions
        or reasoning is not result.reasoning
    ):
        result = replace(result, intent=intent, suggested_actions=actions, reasoning=reasoning)

    return ensure_tts_message(result)
