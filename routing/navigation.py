"""
Auto-navigation policy for the UI shell.

A single threshold decides whether the shell navigates on its own after a
short delay or waits for the user to pick a suggestion. Confidence must be
strictly greater than the threshold, matching the committal TTS wording.
"""

from dataclasses import dataclass

from routing.models import ClassificationResult
from shared.config import get_settings


@dataclass(frozen=True)
class NavigationDecision:
    """What the shell should do with a classification result."""

    route: str
    auto_navigate: bool
    delay_seconds: float = 0.0


class NavigationPolicy:
    """Turns ClassificationResults into NavigationDecisions."""

    def __init__(self, threshold: float | None = None, delay_seconds: float | None = None) -> None:
        settings = get_settings()
        self.threshold = settings.AUTO_NAVIGATE_THRESHOLD if threshold is None else threshold
        self.delay_seconds = (
            settings.AUTO_NAVIGATE_DELAY_SECONDS if delay_seconds is None else delay_seconds
        )

    def decide(self, result: ClassificationResult) -> NavigationDecision:
        if result.confidence > self.threshold:
            return NavigationDecision(
                route=result.route,
                auto_navigate=True,
                delay_seconds=self.delay_seconds,
            )
        return NavigationDecision(route=result.route, auto_navigate=False)
