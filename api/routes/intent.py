"""
API routes for intent analysis.

The input bar posts the user's text here and receives the destination page,
reasoning, suggested actions and the message to speak.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.models.intent import (
    FALLBACK_RESPONSE,
    AnalyzeIntentRequest,
    ClassificationResponse,
    ErrorResponse,
)
from routing import catalog
from routing.errors import ConfigError, InputError
from routing.resolver import IntentResolutionService, get_resolver, validate_utterance
from shared.config import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["intent"])


def require_generative_config(settings: Settings) -> None:
    """
    Check the server can reach Gemini.

    Raises:
        ConfigError: If the generative classifier is enabled but has no API key
    """
    if settings.ENABLE_GENERATIVE_CLASSIFIER and not settings.GEMINI_API_KEY.strip():
        raise ConfigError("Gemini API key not configured")


@router.post(
    "/analyze-intent",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze_intent(
    payload: AnalyzeIntentRequest,
    settings: Annotated[Settings, Depends(get_settings)],
    resolver: Annotated[IntentResolutionService, Depends(get_resolver)],
) -> JSONResponse:
    """
    Classify the user's request into a destination page.

    **Body:**
    ```json
    {"userInput": "show me the dashboard"}
    ```

    **Returns:**
    ```json
    {
        "intent": {
            "route": "/dashboard",
            "confidence": 1.0,
            "description": "Dashboard - main user interface, overview of data and controls",
            "keywords": ["dashboard"]
        },
        "reasoning": "...",
        "suggestedActions": ["View your data", "Check analytics", "Manage settings"],
        "ttsMessage": "I understand you want to visit the dashboard page. ...",
        "source": "generative"
    }
    ```

    **Errors:**
    - **400**: userInput missing, not a string, or blank
    - **500**: Gemini API key not configured

    Any other failure answers 200 with a low-confidence home page result so
    the UI never receives a broken shape.
    """
    try:
        text = validate_utterance(payload.userInput)
    except InputError as e:
        logger.info(f"Rejected analyze-intent request: {e}")
        return JSONResponse(status_code=400, content=ErrorResponse(error="Invalid input").model_dump())

    try:
        require_generative_config(settings)
    except ConfigError as e:
        logger.error(f"Analyze-intent unavailable: {e}")
        return JSONResponse(status_code=500, content=ErrorResponse(error=str(e)).model_dump())

    try:
        result = await resolver.resolve(text)
        response = ClassificationResponse.from_result(result)
        return JSONResponse(status_code=200, content=response.model_dump())
    except Exception as e:
        logger.error(
            f"Error in analyze-intent API: {e}",
            extra={"request_path": "/api/analyze-intent"},
            exc_info=True,
        )
        return JSONResponse(status_code=200, content=FALLBACK_RESPONSE.model_dump())


@router.get("/routes")
async def list_routes() -> dict[str, list[dict]]:
    """List the destination pages the router can choose from."""
    return {
        "routes": [
            {
                "route": entry.route,
                "description": entry.description,
                "keywords": list(entry.keywords),
                "suggestedActions": catalog.suggested_actions_for(entry.route),
            }
            for entry in catalog.list_routes()
        ]
    }
