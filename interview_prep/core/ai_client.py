"""
AI Client Lifecycle

This module builds the question generation provider client and the services
that depend on it. Instead of a process-wide singleton, the client is created
once in the application lifespan, stored on ``app.state`` and handed to route
handlers through FastAPI dependencies, so its lifetime is owned by the app.

Dependencies:
- openai: AsyncOpenAI client for the OpenAI-compatible generation endpoint.
- fastapi: Request access for dependency injection.
- loguru: For logging client creation and shutdown.

Author: @kcaparas1630
"""

from typing import Optional
import random
from fastapi import Request
from openai import AsyncOpenAI
from loguru import logger
from interview_prep.core.settings import Settings
from interview_prep.services.question_generation import (
    FallbackQuestionSelector,
    QuestionGenerationService,
    QuestionRequester,
)

PLACEHOLDER_API_KEY = "not-configured"


def create_generation_client(settings: Settings) -> AsyncOpenAI:
    """
    Create the AsyncOpenAI client used for question generation.

    Retries are disabled so that the configured timeout bounds the whole call;
    quota errors are recovered by the fallback question bank instead.

    Args:
        settings (Settings): Resolved service configuration.

    Returns:
        AsyncOpenAI: A client pointed at the configured base URL.
    """
    try:
        client = AsyncOpenAI(
            api_key=settings.api_key or PLACEHOLDER_API_KEY,
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
            max_retries=0,
        )
    except Exception as e:
        logger.error(f"Failed to initialize question provider client: {e}")
        raise RuntimeError(f"Failed to initialize question provider client: {e}") from e

    logger.info(f"Initialized question provider client for model {settings.model}")
    return client


def build_question_service(
    settings: Settings,
    client: AsyncOpenAI,
    rng: Optional[random.Random] = None,
) -> QuestionGenerationService:
    """Wire the requester and fallback selector around an existing client."""
    requester = QuestionRequester(
        client,
        model=settings.model,
        temperature=settings.temperature,
        timeout_seconds=settings.timeout_seconds,
    )
    return QuestionGenerationService(requester, FallbackQuestionSelector(rng=rng))


async def close_generation_client(client: Optional[AsyncOpenAI]) -> None:
    if client is None:
        return
    await client.close()
    logger.info("Question provider client closed")


def get_question_service(request: Request) -> QuestionGenerationService:
    """FastAPI dependency returning the app-owned question generation service."""
    service = getattr(request.app.state, "question_service", None)
    if service is None:
        raise RuntimeError("Question generation service is not initialized")
    return service

