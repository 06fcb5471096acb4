"""
Data models for intent routing.

This module defines the structures shared by both classifiers:
- RouteEntry: Static catalog entry (destination page)
- RouteIntent: Best-guess destination with confidence
- ClassificationResult: RouteIntent plus reasoning, actions and TTS text
- ResultSource: Which path produced a result
- IntentClassifier: Interface implemented by every classifier
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol


class ResultSource(str, Enum):
    """Path that produced a ClassificationResult."""

    GENERATIVE = "generative"  # Gemini reply
    HEURISTIC = "heuristic"  # Local keyword scoring
    FALLBACK = "fallback"  # Hard-coded answer after an unexpected failure


@dataclass(frozen=True)
class RouteEntry:
    """
    Destination page known to the router.

    Attributes:
        route: Path identifier, unique key (e.g., "/dashboard")
        description: Human-readable description shown to the model
        keywords: Words and phrases associated with the page
    """

    route: str
    description: str
    keywords: tuple[str, ...] = ()

    @property
    def slug(self) -> str:
        """Route identifier without the leading separator ("" for the root)."""
        return self.route[1:] if self.route.startswith("/") else self.route

    @property
    def display_name(self) -> str:
        """Name used in spoken messages ("home" for the root route)."""
        return "home" if self.route == "/" else self.route.replace("/", "", 1)


@dataclass(frozen=True)
class RouteIntent:
    """
    Classifier's best guess at the destination for an utterance.

    Attributes:
        route: Catalog key once resolution completes
        confidence: Score in [0.0, 1.0]
        description: Free text describing what the user wants
        keywords: Triggers matched or extracted from the input (may be empty)
    """

    route: str
    confidence: float
    description: str = ""
    keywords: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "route": self.route,
            "confidence": self.confidence,
            "description": self.description,
            "keywords": list(self.keywords),
        }


@dataclass(frozen=True)
class ClassificationResult:
    """
    Result returned to the UI for a single utterance.

    Created fresh per utterance and never mutated; repairs build new instances
    with dataclasses.replace().
    """

    intent: RouteIntent
    reasoning: str = ""
    suggested_actions: list[str] = field(default_factory=list)
    tts_message: str = ""
    source: ResultSource = ResultSource.HEURISTIC

    @property
    def route(self) -> str:
        return self.intent.route

    @property
    def confidence(self) -> float:
        return self.intent.confidence

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase wire shape consumed by the UI."""
        return {
            "intent": self.intent.to_dict(),
            "reasoning": self.reasoning,
            "suggestedActions": list(self.suggested_actions),
            "ttsMessage": self.tts_message,
            "source": self.source.value,
        }


class IntentClassifier(Protocol):
    """Anything that turns an utterance into a ClassificationResult."""

    async def classify(self, utterance: str) -> ClassificationResult:
        ...
