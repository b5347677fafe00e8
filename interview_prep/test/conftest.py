"""
Shared fixtures for the question service tests.

Provider calls are replaced with fake clients that either return canned text or
raise a given exception, and randomness is seeded through an injected
random.Random.

Author: @kcaparas1630
"""

import os

os.environ.setdefault("ENV", "test")
os.environ.setdefault("GENERATE_QUESTIONS_RATE_LIMIT", "1000/minute")

import random
from typing import Optional
import pytest
from interview_prep.core.route_limiters import limiter
from interview_prep.schemas.question_schemas import Difficulty, GenerationRequest, InterviewType
from interview_prep.test.fakes import FakeAIClient
from interview_prep.services.question_generation import (
    FallbackQuestionSelector,
    QuestionGenerationService,
    QuestionRequester,
)


@pytest.fixture(autouse=True)
def disable_rate_limits():
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def selector(rng):
    return FallbackQuestionSelector(rng=rng)


@pytest.fixture
def generation_request():
    return GenerationRequest(
        jobRole="Frontend Developer",
        company="Test Company",
        interviewType=InterviewType.MIXED,
        difficulty=Difficulty.MEDIUM,
        numberOfQuestions=5,
    )


@pytest.fixture
def make_service(selector):
    """Build a QuestionGenerationService around a fake provider client."""
    def _make(text: Optional[str] = None, error: Optional[Exception] = None):
        client = FakeAIClient(text=text, error=error)
        requester = QuestionRequester(client, model="test-model", temperature=0.7, timeout_seconds=5)
        return QuestionGenerationService(requester, selector), client
    return _make
