"""
Question Requester Module

This module asks the generation provider for interview questions. It composes
the prompt, makes one chat completion call through an OpenAI-compatible client
and decodes the JSON array in the reply.

Failures are reported through the domain exceptions:
- QuotaExceeded: the provider refused the call for quota or rate limit reasons
- ProviderError: any other failure of the provider call
- ParseError: the provider answered but the reply holds no usable JSON array

The requester keeps no state between calls and can be shared by concurrent
requests.

Dependencies:
- openai: For AI client interactions.
- loguru: For logging operations.
- interview_prep.helper.extract_json_array: For decoding the provider reply.

Author: @kcaparas1630
"""

import time
from typing import Any, Optional
from openai import AsyncOpenAI, RateLimitError
from loguru import logger
from interview_prep.constants.regex_patterns import REGEX_PATTERNS
from interview_prep.core.settings import DEFAULT_MODEL, DEFAULT_TEMPERATURE
from interview_prep.errors.exceptions import ProviderError, QuotaExceeded
from interview_prep.helper.extract_json_array import extract_json_array
from interview_prep.schemas.question_schemas import GenerationRequest
from interview_prep.services.question_generation.prompt_builder import build_question_prompt


def is_quota_error(error: Exception) -> bool:
    """True when a provider error means quota or rate limits were hit."""
    if isinstance(error, RateLimitError):
        return True
    if getattr(error, "status_code", None) == 429:
        return True
    return bool(REGEX_PATTERNS['quota_error'].search(str(error)))


def classify_provider_error(error: Exception) -> ProviderError:
    message = str(error) or error.__class__.__name__
    if is_quota_error(error):
        return QuotaExceeded(message)
    return ProviderError(message)


class QuestionRequester:
    """
    Requests interview questions from the generation provider.

    Attributes:
        client (AsyncOpenAI): Client for the OpenAI-compatible provider endpoint.
        model (str): Model identifier sent with each call.
        temperature (float): Sampling temperature.
        timeout_seconds (Optional[float]): Per-call timeout, None for the client default.
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        timeout_seconds: Optional[float] = None,
    ):
        self.client = client
        self.model = model
        self.temperature = temperature
        self.timeout_seconds = timeout_seconds

    async def _complete(self, prompt: str) -> str:
        kwargs = {}
        if self.timeout_seconds is not None:
            kwargs["timeout"] = self.timeout_seconds
        response = await self.client.chat.completions.create(
            model=self.model,
            temperature=self.temperature,
            messages=[{"role": "user", "content": prompt}],
            **kwargs,
        )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    async def generate(self, request: GenerationRequest) -> Any:
        """
        Generate questions for a validated request.

        Args:
            request (GenerationRequest): Validated generation parameters.

        Returns:
            The decoded JSON value from the provider. A well-behaved provider
            returns a list of {"question", "category"} objects; the caller
            checks the shape and normalizes each record.

        Raises:
            QuotaExceeded: If the provider reports quota or rate limit exhaustion.
            ProviderError: If the provider call fails for any other reason.
            ParseError: If the reply contains no parseable JSON array.
        """
        prompt = build_question_prompt(request)
        logger.info(f"Generating questions with {self.model} for {request.jobRole}")

        start_time = time.time()
        try:
            text = await self._complete(prompt)
        except Exception as e:
            provider_error = classify_provider_error(e)
            if isinstance(provider_error, QuotaExceeded):
                logger.warning(f"Question provider quota exceeded: {e}")
            else:
                logger.error(f"Question provider call failed: {e}")
            raise provider_error from e

        logger.info(f"Question provider responded in {time.time() - start_time:.2f}s")
        logger.debug(f"AI Response: {text}")
        return extract_json_array(text)
