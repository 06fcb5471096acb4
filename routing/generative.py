"""
Generative Classifier - Gemini-based intent classification.

Builds a prompt from the route catalog and the user's utterance, sends it to
Gemini and turns the JSON-shaped reply into a ClassificationResult.

Errors are NOT swallowed here: ConfigError, TransportError, ParseError and
SchemaError propagate so the resolver can fall back to keyword matching.
Recoverable defects in an otherwise valid reply (unknown route, missing TTS
message, confidence out of range) are repaired instead.
"""

import json
import logging
import time
from collections.abc import Sequence
from typing import Any

from routing import catalog
from routing.errors import ParseError, SchemaError
from routing.models import ClassificationResult, ResultSource, RouteEntry, RouteIntent
from routing.normalization import normalize_result
from shared.gemini_client import GeminiClient
from shared.logging_config import resolution_extra

logger = logging.getLogger(__name__)


def build_prompt(utterance: str, routes: Sequence[RouteEntry] | None = None) -> str:
    """
    Build the complete classification prompt.

    The prompt is designed to:
    1. List every catalog route so the model can only pick known pages
    2. Require a single JSON object in an exact format
    3. Fix the tone of the spoken message (commit above 0.7, ask otherwise)
    """
    routes = routes if routes is not None else catalog.list_routes()
    route_lines = "\n".join(f"- {entry.route}: {entry.description}" for entry in routes)

    return f"""You are an AI assistant that helps users navigate a website by understanding their intent and routing them to the appropriate page. You also provide natural, conversational responses for text-to-speech.

Available routes and their descriptions:
{route_lines}

User input: "{utterance}"

Please analyze the user's intent and respond with a JSON object in this exact format:
{{
  "intent": {{
    "route": "/route-path",
    "confidence": 0.85,
    "description": "Brief description of what the user wants",
    "keywords": ["keyword1", "keyword2"]
  }},
  "reasoning": "Explain why you chose this route based on the user's input",
  "suggestedActions": ["action1", "action2", "action3"],
  "ttsMessage": "A natural, conversational message to speak to the user about the analysis and next steps"
}}

Rules:
1. Choose the most appropriate route from the available routes above
2. Confidence should be between 0.1 and 1.0
3. Include relevant keywords from the user's input
4. Provide clear reasoning for your choice
5. Suggest 2-3 relevant actions the user might want to take
6. Create a natural, conversational TTS message that:
   - Acknowledges what the user said
   - Explains what you understood
   - Mentions the confidence level naturally
   - Describes the destination page
   - If confidence > 0.7, indicate you'll take them there
   - If confidence <= 0.7, ask if they want to proceed or try again
   - Keep it conversational and friendly, not robotic
7. If the user's intent is unclear, default to "/" with lower confidence

Example TTS messages:
- High confidence: "I understand you want to see the dashboard. I'm 85% confident that's what you're looking for. I'll take you there now."
- Low confidence: "I think you might want to contact support, but I'm only 60% sure. Would you like me to take you to the contact page, or would you prefer to try a different request?"

Respond only with the JSON object, no additional text."""


def _find_balanced_object(text: str) -> str | None:
    """Return the first balanced {...} substring, ignoring braces inside strings."""
    start = text.find("{")
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        for idx in range(start, len(text)):
            ch = text[idx]
            if in_string:
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == '"':
                    in_string = False
                continue
            if ch == '"':
                in_string = True
            elif ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return text[start:idx + 1]
        # Unbalanced from this brace, try the next one
        start = text.find("{", start + 1)
    return None


def extract_json_object(text: str) -> dict[str, Any]:
    """
    Extract the first JSON object from a model reply.

    The model sometimes wraps the JSON in prose or markdown code fences.

    Raises:
        ParseError: If no object is found or it does not deserialize
    """
    if not isinstance(text, str):
        raise ParseError("Reply is not text")

    candidate = _find_balanced_object(text)
    if candidate is None:
        raise ParseError(f"No JSON found in response: {text[:100]!r}")

    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON response from AI: {e}") from e

    if not isinstance(data, dict):
        raise ParseError("JSON reply is not an object")
    return data


def parse_reply(text: str) -> ClassificationResult:
    """
    Parse and validate a model reply into a ClassificationResult.

    Raises:
        ParseError: If the reply holds no parseable JSON object
        SchemaError: If intent.route is missing
    """
    data = extract_json_object(text)

    intent_data = data.get("intent")
    if not isinstance(intent_data, dict):
        raise SchemaError("Invalid response structure from AI: missing intent")

    route = intent_data.get("route")
    if not isinstance(route, str) or not route.strip():
        raise SchemaError("Invalid response structure from AI: missing intent.route")

    keywords = intent_data.get("keywords")
    suggested_actions = data.get("suggestedActions")
    tts_message = data.get("ttsMessage")
    reasoning = data.get("reasoning")

    result = ClassificationResult(
        intent=RouteIntent(
            route=route.strip(),
            confidence=intent_data.get("confidence"),
            description=str(intent_data.get("description") or ""),
            keywords=keywords if isinstance(keywords, list) else [],
        ),
        reasoning=reasoning if isinstance(reasoning, str) else "",
        suggested_actions=suggested_actions if isinstance(suggested_actions, list) else None,
        tts_message=tts_message if isinstance(tts_message, str) else "",
        source=ResultSource.GENERATIVE,
    )
    return normalize_result(result)


class GenerativeClassifier:
    """Classifies utterances by asking Gemini, one request per utterance."""

    def __init__(self, client: GeminiClient | None = None) -> None:
        self.client = client or GeminiClient()

    async def classify(self, utterance: str) -> ClassificationResult:
        """
        Classify an utterance with Gemini.

        Args:
            utterance: Non-empty user text

        Returns:
            Repaired ClassificationResult with source=GENERATIVE

        Raises:
            ConfigError, TransportError, ParseError, SchemaError
        """
        start_time = time.time()

        prompt = build_prompt(utterance)
        reply = await self.client.generate(prompt)

        try:
            result = parse_reply(reply)
        except (ParseError, SchemaError):
            logger.error(f"Failed to parse AI response: {reply[:200]!r}")
            raise

        latency_ms = (time.time() - start_time) * 1000
        logger.info(
            f"Intent classified by Gemini | route={result.route} | "
            f"confidence={result.confidence:.2f} | latency={latency_ms:.0f}ms",
            extra=resolution_extra(
                result.route, result.confidence, result.source.value, latency_ms
            ),
        )
        return result
