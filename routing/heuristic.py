"""
Heuristic Classifier - deterministic keyword scoring.

Always available: used when the generative service is unreachable or replies
with something unusable. Same utterance and same catalog always produce the
same RouteIntent.

Scoring per catalog entry (lower-cased utterance, substring matching):
- +0.8 when the route slug appears (never for the default route)
- +0.3 per keyword found (cumulative)
- +0.1 per space-separated description word longer than 3 characters found
  (punctuation stays attached, so "charts," does not match "charts")
The total is clamped to [0, 1]. The strictly highest score wins; ties go to
the entry declared first in the catalog.
"""

import logging
from collections.abc import Sequence

from routing import catalog
from routing.messages import build_keyword_reasoning, build_tts_message
from routing.models import ClassificationResult, ResultSource, RouteEntry, RouteIntent

logger = logging.getLogger(__name__)

SLUG_WEIGHT = 0.8
KEYWORD_WEIGHT = 0.3
DESCRIPTION_WORD_WEIGHT = 0.1
MIN_DESCRIPTION_WORD_LENGTH = 4

# Best scores under this value fall back to the default route
MIN_MATCH_CONFIDENCE = 0.2
DEFAULT_CONFIDENCE = 0.5
DEFAULT_KEYWORDS = ("default",)


def _description_words(description: str) -> list[str]:
    # Split on single spaces only: "charts," keeps its comma and never matches "charts"
    return [
        word
        for word in description.lower().split(" ")
        if len(word) >= MIN_DESCRIPTION_WORD_LENGTH
    ]


def score_entry(entry: RouteEntry, text: str) -> tuple[float, list[str]]:
    """
    Score one catalog entry against lower-cased text.

    Returns:
        Tuple of (clamped score, ordered unique triggers that matched)
    """
    score = 0.0
    triggers: list[str] = []

    def _hit(trigger: str, weight: float) -> None:
        nonlocal score
        score += weight
        if trigger not in triggers:
            triggers.append(trigger)

    if entry.route != catalog.DEFAULT_ROUTE and entry.slug and entry.slug in text:
        _hit(entry.slug, SLUG_WEIGHT)

    for keyword in entry.keywords:
        if keyword in text:
            _hit(keyword, KEYWORD_WEIGHT)

    for word in _description_words(entry.description):
        if word in text:
            _hit(word, DESCRIPTION_WORD_WEIGHT)

    return min(1.0, max(0.0, score)), triggers


class HeuristicClassifier:
    """Deterministic, local intent classifier using keyword overlap."""

    def __init__(self, routes: Sequence[RouteEntry] | None = None) -> None:
        self.routes = tuple(routes) if routes is not None else catalog.list_routes()

    def match(self, utterance: str) -> RouteIntent:
        """
        Map free text to the best matching route.

        Args:
            utterance: Raw user text (callers reject empty input beforehand)

        Returns:
            RouteIntent for the winning entry, or the default route at
            confidence 0.5 with keywords ["default"] when nothing matched well.
        """
        text = utterance.lower().strip()

        best_entry: RouteEntry | None = None
        best_score = 0.0
        best_triggers: list[str] = []

        for entry in self.routes:
            score, triggers = score_entry(entry, text)
            # Strict comparison keeps the first declared entry on ties
            if score > best_score:
                best_entry, best_score, best_triggers = entry, score, triggers

        if best_entry is None or best_score < MIN_MATCH_CONFIDENCE:
            fallback = catalog.default_route()
            return RouteIntent(
                route=fallback.route,
                confidence=DEFAULT_CONFIDENCE,
                description=fallback.description,
                keywords=list(DEFAULT_KEYWORDS),
            )

        return RouteIntent(
            route=best_entry.route,
            confidence=best_score,
            description=best_entry.description,
            keywords=best_triggers,
        )

    async def classify(self, utterance: str) -> ClassificationResult:
        """Keyword-based ClassificationResult for an utterance."""
        intent = self.match(utterance)

        logger.debug(
            f"Keyword match | route={intent.route} | confidence={intent.confidence:.2f} "
            f"| keywords={intent.keywords}"
        )

        return ClassificationResult(
            intent=intent,
            reasoning=build_keyword_reasoning(utterance, intent),
            suggested_actions=catalog.suggested_actions_for(intent.route),
            tts_message=build_tts_message(intent),
            source=ResultSource.HEURISTIC,
        )
