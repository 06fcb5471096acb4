"""Pydantic models for the analyze-intent endpoint."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from routing.models import ClassificationResult


class AnalyzeIntentRequest(BaseModel):
    """Body sent by the input bar: {"userInput": "..."}."""
    model_config = ConfigDict(extra="allow")

    userInput: StrictStr


class RouteIntentPayload(BaseModel):
    route: str
    confidence: float = Field(ge=0.0, le=1.0)
    description: str
    keywords: list[str] = []


class ClassificationResponse(BaseModel):
    """ClassificationResult in the camelCase shape the UI consumes."""

    intent: RouteIntentPayload
    reasoning: str
    suggestedActions: list[str] = []
    ttsMessage: str
    source: str

    @classmethod
    def from_result(cls, result: ClassificationResult) -> "ClassificationResponse":
        return cls.model_validate(result.to_dict())


class ErrorResponse(BaseModel):
    """Body of 400 and 500 answers from the analyze-intent endpoint."""

    error: str


# Returned with status 200 when anything unexpected happens after a valid request
FALLBACK_RESPONSE = ClassificationResponse(
    intent=RouteIntentPayload(
        route="/",
        confidence=0.3,
        description="Home page - general information and overview",
        keywords=["fallback"],
    ),
    reasoning="Unable to analyze your request. Taking you to the home page.",
    suggestedActions=["Try rephrasing your request", "Browse the menu", "Contact support"],
    ttsMessage=(
        "I had trouble understanding your request. I'll take you to the home page "
        "where you can explore our features."
    ),
    source="fallback",
)
