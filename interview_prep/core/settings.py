"""
Application Settings Module

This module reads the service configuration from environment variables (and a
local .env file) into an immutable Settings object. Settings are read once per
application instance, in the lifespan handler, and passed to whatever needs them.

Dependencies:
- dotenv: For environment variable loading.
- dataclasses: For the immutable settings container.
- loguru: For logging configuration problems.

Author: @kcaparas1630
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional
from dotenv import load_dotenv
from loguru import logger

# Ensure .env is loaded
load_dotenv()

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_MODEL = "gemini-2.0-flash-exp"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_CORS_ORIGINS = ["http://localhost:3000"]
DEFAULT_RATE_LIMIT = "10/minute"


@dataclass(frozen=True)
class Settings:
    """Configuration for the question generation service."""
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    environment: str = "production"

    @property
    def is_test(self) -> bool:
        return self.environment == "test"


def _parse_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"Environment variable {name} must be a number, got {raw!r}") from e


def _parse_origins(raw: Optional[str]) -> List[str]:
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def load_settings() -> Settings:
    """
    Build Settings from the current environment.

    Returns:
        Settings: The resolved configuration.

    Raises:
        ValueError: If a numeric variable cannot be parsed, or if no provider
            API key is configured outside of the test environment.
    """
    environment = os.getenv("ENV", "production")
    api_key = os.getenv("QUESTION_PROVIDER_API_KEY") or os.getenv("GOOGLE_GENERATIVE_AI_API_KEY")

    if not api_key:
        if environment == "test":
            logger.warning("QUESTION_PROVIDER_API_KEY not set - provider calls will fail and fall back")
        else:
            raise ValueError(
                "QUESTION_PROVIDER_API_KEY environment variable is not set. "
                "Please set it in your .env file or environment variables."
            )

    return Settings(
        api_key=api_key,
        base_url=os.getenv("QUESTION_PROVIDER_BASE_URL", DEFAULT_BASE_URL),
        model=os.getenv("QUESTION_PROVIDER_MODEL", DEFAULT_MODEL),
        temperature=_parse_float("QUESTION_PROVIDER_TEMPERATURE", DEFAULT_TEMPERATURE),
        timeout_seconds=_parse_float("QUESTION_PROVIDER_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS")),
        environment=environment,
    )
