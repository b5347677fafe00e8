from dotenv import load_dotenv
from typing import Optional
from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from contextlib import asynccontextmanager
from slowapi import _rate_limit_exceeded_handler
# Settings
from interview_prep.core.settings import Settings, load_settings
# AI client lifecycle
from interview_prep.core.ai_client import build_question_service, close_generation_client, create_generation_client
# Rate Limiter
from interview_prep.core.route_limiters import limiter
# Routers
from interview_prep.routes.health import router as health_router
from interview_prep.routes.generate_questions import router as generate_questions_router
# CORS Middleware
from interview_prep.core.cors_middleware import add_cors_middleware
# Logger
from loguru import logger
# Error Handling
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException

from interview_prep.errors.handlers import http_exception_handler, generic_exception_handler, request_validation_handler

# Load environment variables
load_dotenv()

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events."""
    # Startup
    settings: Settings = app.state.settings
    client = None
    try:
        client = create_generation_client(settings)
        app.state.generation_client = client
        app.state.question_service = build_question_service(settings, client)
        logger.info("Application startup completed successfully")
    except Exception as e:
        logger.error(f"Error during application startup: {e}")
        raise

    yield

    # Shutdown
    await close_generation_client(client)
    app.state.question_service = None
    logger.info("Application shutdown")

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application from the given (or environment) settings."""
    settings = settings or load_settings()

    app = FastAPI(
        title="Interview Question Service API",
        description="Generates mock interview questions with a curated fallback",
        version="0.1.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    # Add CORS middleware
    add_cors_middleware(app, settings.cors_origins)

    # Centralized error handlers
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Add rate limiter to the app
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Include routers
    app.include_router(health_router)
    app.include_router(generate_questions_router)
    return app

app = create_app()
