"""
Configuration module - Central access point for environment variables.

CRITICAL: Access ALL environment variables through this module.
NEVER use os.getenv() directly in application code.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Google Gemini (generative intent classification)
    GEMINI_API_KEY: str = Field(
        default="",
        description="Gemini API key. Empty means the generative classifier is not configured"
    )
    GEMINI_API_URL: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent",
        description="Gemini generateContent endpoint (model is part of the URL)"
    )
    GEMINI_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="HTTP timeout for a single Gemini request"
    )

    # Intent resolution
    ENABLE_GENERATIVE_CLASSIFIER: bool = Field(
        default=True,
        description="Set to False to always use keyword matching (offline mode)"
    )
    CLASSIFICATION_TIMEOUT_SECONDS: float = Field(
        default=12.0,
        description="Upper bound for the generative path before falling back to keywords"
    )

    # UI shell behaviour
    AUTO_NAVIGATE_THRESHOLD: float = Field(
        default=0.7,
        description="Navigate automatically when confidence is strictly above this value"
    )
    AUTO_NAVIGATE_DELAY_SECONDS: float = Field(default=2.0)

    # Application Settings
    LOG_LEVEL: str = Field(default="INFO")
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed CORS origins"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once.
    """
    return Settings()
