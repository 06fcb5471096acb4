"""
Intent Resolution Service - single entry point for classifying an utterance.

Policy:
    utterance ─ empty? ──────────────► InputError (no classifier, no network)
        │
        ▼
    primary classifier (Gemini), bounded by CLASSIFICATION_TIMEOUT_SECONDS
        │  any failure: config, transport, parse, schema, timeout
        ▼
    heuristic classifier (keyword matching, always succeeds)
        │
        ▼
    normalize_result ──► ClassificationResult

There are no retries: one failure triggers immediate fallback to keep latency
bounded.
"""

import asyncio
import logging
import time

import httpx

from routing.errors import InputError, IntentRoutingError
from routing.heuristic import HeuristicClassifier
from routing.models import ClassificationResult, IntentClassifier
from routing.normalization import normalize_result
from shared.config import get_settings
from shared.logging_config import resolution_extra

logger = logging.getLogger(__name__)


def validate_utterance(utterance: object) -> str:
    """
    Reject input that must never reach a classifier.

    Returns:
        The utterance stripped of surrounding whitespace

    Raises:
        InputError: If utterance is not a string or is blank
    """
    if not isinstance(utterance, str):
        raise InputError("Invalid input: user input must be a string")
    text = utterance.strip()
    if not text:
        raise InputError("Invalid input: user input is empty")
    return text


class IntentResolutionService:
    """
    Resolves utterances to routes, falling back to keyword matching.

    resolve() never raises for a non-empty utterance.
    """

    def __init__(
        self,
        primary: IntentClassifier | None = None,
        fallback: HeuristicClassifier | None = None,
        timeout: float | None = None,
    ) -> None:
        self.primary = primary
        self.fallback = fallback or HeuristicClassifier()
        self.timeout = get_settings().CLASSIFICATION_TIMEOUT_SECONDS if timeout is None else timeout

    async def resolve(self, utterance: str) -> ClassificationResult:
        """
        Classify an utterance into a catalog route.

        Args:
            utterance: Raw user text

        Returns:
            ClassificationResult whose route is in the catalog, whose
            confidence is in [0.1, 1.0] and whose tts_message is non-empty

        Raises:
            InputError: If utterance is empty or not a string
        """
        text = validate_utterance(utterance)
        start_time = time.time()

        result: ClassificationResult | None = None
        if self.primary is not None:
            result = await self._try_primary(text)

        if result is None:
            result = await self.fallback.classify(text)

        result = normalize_result(result)

        latency_ms = (time.time() - start_time) * 1000
        logger.info(
            f"Intent resolved | route={result.route} | confidence={result.confidence:.2f} "
            f"| source={result.source.value} | latency={latency_ms:.0f}ms",
            extra=resolution_extra(
                result.route, result.confidence, result.source.value, latency_ms
            ),
        )
        return result

    async def _try_primary(self, text: str) -> ClassificationResult | None:
        """Run the primary classifier; None means fall back."""
        try:
            return await asyncio.wait_for(self.primary.classify(text), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning(
                f"Generative classification exceeded {self.timeout}s, "
                f"falling back to keyword analysis"
            )
        except (IntentRoutingError, httpx.HTTPError) as e:
            logger.warning(
                f"Generative classification failed ({type(e).__name__}: {e}), "
                f"falling back to keyword analysis"
            )
        except Exception as e:
            logger.error(
                f"Unexpected error in generative classification: {e}, "
                f"falling back to keyword analysis",
                exc_info=True,
            )
        return None


# Singleton instance for reuse across requests
_resolver: IntentResolutionService | None = None


def get_resolver() -> IntentResolutionService:
    """
    Get singleton instance of IntentResolutionService.

    The generative classifier is wired in unless ENABLE_GENERATIVE_CLASSIFIER
    is False.

    Returns:
        IntentResolutionService: Singleton service instance
    """
    global _resolver
    if _resolver is None:
        settings = get_settings()
        primary = None
        if settings.ENABLE_GENERATIVE_CLASSIFIER:
            from routing.generative import GenerativeClassifier

            primary = GenerativeClassifier()
        _resolver = IntentResolutionService(primary=primary)
    return _resolver
