"""
Description:
This module sets up a rate limiter for the application using SlowAPI.
It initializes a Limiter instance with a key function to identify clients by their IP address and sets default limits for requests.

Dependencies:
- slowapi: For rate limiting functionality.
- slowapi.util: For utility functions like get_remote_address to retrieve the client's IP address.
- loguru: For logging information about the rate limiter initialization.

Author: @kcaparas1630
"""
import os
from slowapi import Limiter
from slowapi.util import get_remote_address
from loguru import logger
from interview_prep.core.settings import DEFAULT_RATE_LIMIT

# Set up rate limiter (30 requests per minute per IP unless a route says otherwise)
limiter = Limiter(key_func=get_remote_address, default_limits=["30/minute"])
logger.info("Rate limiter initialized")

def generate_questions_rate_limit() -> str:
    """Limit for the generate-questions route, read on every request."""
    return os.getenv("GENERATE_QUESTIONS_RATE_LIMIT", DEFAULT_RATE_LIMIT)
