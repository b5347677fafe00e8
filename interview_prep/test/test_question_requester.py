"""
Test Question Requester Module

This module tests prompt composition, the provider call and how provider
failures are classified.

Dependencies:
- pytest: For testing framework
- pytest-asyncio: For async test support
- httpx: For building provider error responses
- interview_prep.services.question_generation: The modules being tested

Author: @kcaparas1630
"""

import httpx
import pytest
from openai import APITimeoutError, RateLimitError
from interview_prep.errors.exceptions import ParseError, ProviderError, QuotaExceeded
from interview_prep.schemas.question_schemas import Difficulty, GenerationRequest, InterviewType
from interview_prep.services.question_generation.prompt_builder import build_question_prompt
from interview_prep.services.question_generation.question_requester import (
    QuestionRequester,
    classify_provider_error,
    is_quota_error,
)
from interview_prep.test.fakes import FakeAIClient

def _request(**overrides):
    data = dict(
        jobRole="Backend Engineer",
        company=None,
        interviewType=InterviewType.TECHNICAL,
        difficulty=Difficulty.EASY,
        numberOfQuestions=4,
    )
    data.update(overrides)
    return GenerationRequest(**data)

def _rate_limit_error():
    request = httpx.Request("POST", "https://provider.test/v1/chat/completions")
    response = httpx.Response(429, request=request)
    return RateLimitError("Too many requests", response=response, body=None)

class TestBuildQuestionPrompt:
    """Test the composed prompt."""

    def test_embeds_role_count_and_format_rules(self):
        prompt = build_question_prompt(_request())
        assert "Backend Engineer position." in prompt
        assert "Generate exactly 4 interview questions" in prompt
        assert "STAR method" in prompt
        assert "Avoid special characters like /, *, #" in prompt
        assert "Return ONLY a valid JSON array" in prompt

    def test_company_is_optional(self):
        assert " at Acme Corp." in build_question_prompt(_request(company="Acme Corp"))
        assert " at " not in build_question_prompt(_request()).split("\n")[0]

    @pytest.mark.parametrize("interview_type,phrase", [
        (InterviewType.TECHNICAL, "Focus exclusively on technical questions"),
        (InterviewType.BEHAVIORAL, "Focus exclusively on behavioral questions"),
        (InterviewType.MIXED, "balanced mix of both technical and behavioral"),
    ])
    def test_interview_type_framing(self, interview_type, phrase):
        assert phrase in build_question_prompt(_request(interviewType=interview_type))

    @pytest.mark.parametrize("difficulty,phrase", [
        (Difficulty.EASY, "0-2 years"),
        (Difficulty.MEDIUM, "2-5 years"),
        (Difficulty.HARD, "5+ years"),
    ])
    def test_difficulty_framing(self, difficulty, phrase):
        assert phrase in build_question_prompt(_request(difficulty=difficulty))

    def test_control_characters_are_removed_from_role(self):
        prompt = build_question_prompt(_request(jobRole="Data\x00 Scientist"))
        assert "Data Scientist position" in prompt

class TestProviderErrorClassification:
    """Test quota detection on provider errors."""

    @pytest.mark.parametrize("message", [
        "You exceeded your current quota",
        "Rate limit reached for requests",
        "Error code: 429 - RESOURCE_EXHAUSTED",
        "QUOTA exhausted",
    ])
    def test_quota_messages(self, message):
        error = classify_provider_error(Exception(message))
        assert isinstance(error, QuotaExceeded)
        assert error.message == message

    def test_rate_limit_error_type(self):
        assert is_quota_error(_rate_limit_error())

    def test_other_errors(self):
        error = classify_provider_error(Exception("Internal server error"))
        assert isinstance(error, ProviderError)
        assert not isinstance(error, QuotaExceeded)

    def test_empty_message_uses_class_name(self):
        assert classify_provider_error(ConnectionError()).message == "ConnectionError"

class TestQuestionRequester:
    """Test the provider call."""

    @pytest.mark.asyncio
    async def test_parses_fenced_response(self):
        client = FakeAIClient(text='```json\n[{"question":"Q","category":"C"}]\n```')
        requester = QuestionRequester(client, model="gemini-2.0-flash-exp", timeout_seconds=12)

        result = await requester.generate(_request())

        assert result == [{"question": "Q", "category": "C"}]
        call = client.completions.calls[0]
        assert call["model"] == "gemini-2.0-flash-exp"
        assert call["temperature"] == 0.7
        assert call["timeout"] == 12
        assert call["messages"][0]["role"] == "user"
        assert "Backend Engineer" in call["messages"][0]["content"]

    @pytest.mark.asyncio
    async def test_one_call_per_request(self):
        client = FakeAIClient(text='[{"question":"Q","category":"C"}]')
        requester = QuestionRequester(client)
        await requester.generate(_request())
        assert len(client.completions.calls) == 1
        assert "timeout" not in client.completions.calls[0]

    @pytest.mark.asyncio
    async def test_unparseable_response_raises_parse_error(self):
        requester = QuestionRequester(FakeAIClient(text="Sorry, I cannot do that."))
        with pytest.raises(ParseError):
            await requester.generate(_request())

    @pytest.mark.asyncio
    async def test_empty_content_raises_parse_error(self):
        requester = QuestionRequester(FakeAIClient(text=None))
        with pytest.raises(ParseError):
            await requester.generate(_request())

    @pytest.mark.asyncio
    async def test_quota_error_is_classified(self):
        requester = QuestionRequester(FakeAIClient(error=_rate_limit_error()))
        with pytest.raises(QuotaExceeded):
            await requester.generate(_request())

    @pytest.mark.asyncio
    async def test_timeout_is_a_provider_error(self):
        request = httpx.Request("POST", "https://provider.test/v1/chat/completions")
        requester = QuestionRequester(FakeAIClient(error=APITimeoutError(request=request)))
        with pytest.raises(ProviderError) as exc_info:
            await requester.generate(_request())
        assert not isinstance(exc_info.value, QuotaExceeded)
