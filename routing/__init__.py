"""
Intent routing: free text or speech to a destination page.

Key components:
- catalog: Static registry of destination routes
- HeuristicClassifier: Deterministic keyword scoring (always available)
- GenerativeClassifier: Gemini-based classification with reply repair
- IntentResolutionService: Tries Gemini, falls back to keywords, never fails
  for non-empty input

Architecture:
    utterance → IntentResolutionService
        ├─ GenerativeClassifier (Gemini)
        │   ↓ any failure
        └─ HeuristicClassifier
            ↓
        ClassificationResult → SpeechAnnouncer / NavigationPolicy
"""

from routing.errors import (
    ConfigError,
    InputError,
    IntentRoutingError,
    ParseError,
    SchemaError,
    TransportError,
)
from routing.heuristic import HeuristicClassifier
from routing.models import (
    ClassificationResult,
    IntentClassifier,
    ResultSource,
    RouteEntry,
    RouteIntent,
)
from routing.resolver import IntentResolutionService, get_resolver

__all__ = [
    "ClassificationResult",
    "ConfigError",
    "HeuristicClassifier",
    "InputError",
    "IntentClassifier",
    "IntentResolutionService",
    "IntentRoutingError",
    "ParseError",
    "ResultSource",
    "RouteEntry",
    "RouteIntent",
    "SchemaError",
    "TransportError",
    "get_resolver",
]
