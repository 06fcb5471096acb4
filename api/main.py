"""
FastAPI API Service Entry Point
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.models.intent import ErrorResponse
from api.routes import intent
from shared.config import get_settings
from shared.logging_config import configure_logging
from shared.startup_validator import StartupValidationError, validate_startup_config

# Configure structured JSON logging on startup
configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Adrah Intent Router API",
    version="1.0.0",
)

# Load settings for CORS configuration
settings = get_settings()
origins = [origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(intent.router)


# =========================================================================
# STARTUP VALIDATION
# =========================================================================
@app.on_event("startup")
async def startup_config_validation():
    """
    Validate critical configuration at startup.

    A missing Gemini key does not block startup: the analyze-intent endpoint
    reports it with a 500 instead.

    Raises:
        StartupValidationError: If critical configuration is invalid
    """
    logger.info("Running API startup configuration validation...")
    try:
        await validate_startup_config()
        logger.info("API startup configuration validation passed")
    except StartupValidationError as e:
        logger.critical(f"API startup blocked due to configuration errors: {e}")
        raise  # FastAPI will fail to start


# Malformed bodies (missing or non-string userInput) are client errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return 400 with the error shape the UI understands."""
    logger.info(
        f"Invalid request body: {exc.errors()}",
        extra={"request_path": request.url.path},
    )
    return JSONResponse(status_code=400, content=ErrorResponse(error="Invalid input").model_dump())


@app.get("/health")
async def health_check() -> JSONResponse:
    """
    Health check endpoint for container health checks and monitoring.

    The service is healthy without Gemini (keyword matching still works),
    so the generative status is informational only.
    """
    current = get_settings()
    generative = "disabled"
    if current.ENABLE_GENERATIVE_CLASSIFIER:
        generative = "configured" if current.GEMINI_API_KEY.strip() else "not_configured"

    return JSONResponse(
        status_code=200,
        content={"status": "healthy", "generative": generative},
    )


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint"""
    return {"message": "Adrah Intent Router API - POST /api/analyze-intent, GET /health"}
