"""
Spoken messages for the text-to-speech confirmation.

Both classifiers and the resolver share these templates so a synthesized
message reads the same whichever path produced the result.
"""

import math

from routing.models import RouteEntry, RouteIntent

# Above this confidence the message commits to navigating; at or below it asks
COMMIT_CONFIDENCE = 0.7

WELCOME_MESSAGE = (
    "Welcome to Adrah! I'm powered by AI to help you navigate. You can type or "
    "speak what you want to do, and I'll intelligently route you to the right "
    "page. For example, say 'Show me the dashboard' or 'I need to contact "
    "support'. I'll always be here at the bottom to help you navigate."
)


def confidence_percent(confidence: float) -> int:
    """Confidence as a whole percentage, rounding halves up (0.125 -> 13)."""
    return int(math.floor(confidence * 100 + 0.5))


def route_display_name(route: str) -> str:
    return RouteEntry(route=route, description="").display_name


def build_tts_message(intent: RouteIntent) -> str:
    """
    Build the spoken confirmation for an intent.

    Examples:
        >>> build_tts_message(RouteIntent(route="/dashboard", confidence=0.85))
        "I understand you want to visit the dashboard page. I'm 85% confident ..."
        >>> build_tts_message(RouteIntent(route="/", confidence=0.5))
        "I think you might want the home page, but I'm only 50% sure. ..."
    """
    pct = confidence_percent(intent.confidence)
    name = route_display_name(intent.route)

    if intent.confidence > COMMIT_CONFIDENCE:
        return (
            f"I understand you want to visit the {name} page. "
            f"I'm {pct}% confident that's what you're looking for. "
            f"I'll take you there now."
        )
    return (
        f"I think you might want the {name} page, but I'm only {pct}% sure. "
        f"Would you like me to take you there, or would you prefer to try a different request?"
    )


def build_keyword_reasoning(utterance: str, intent: RouteIntent) -> str:
    """Reasoning text for a keyword-based match."""
    keywords = ", ".join(intent.keywords) if intent.keywords else "none"
    return (
        f'Keyword-based match for your input "{utterance}": detected keywords: {keywords}. '
        f"This suggests you want the {intent.description.lower()}."
    )
