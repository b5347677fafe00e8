"""
Question Generation Service Module

This module applies the generation policy on top of the requester and the
fallback selector:

1. Ask the provider for questions.
2. On QuotaExceeded or ParseError, or when the provider returns something other
   than a list holding at least one record with question text, serve curated
   questions instead and flag the response with usedFallback.
3. Let any other ProviderError propagate to the caller.
4. Normalize every returned record so both fields are always present, and
   return no more than the requested number of questions.

Dependencies:
- loguru: For logging operations.
- interview_prep.services.question_generation: Requester and fallback selector.

Author: @kcaparas1630
"""

from typing import Any, List
from loguru import logger
from interview_prep.errors.exceptions import ParseError, QuotaExceeded
from interview_prep.schemas.question_schemas import (
    GenerateQuestionsResponse,
    GenerationRequest,
    QuestionTemplate,
)
from interview_prep.services.question_generation.fallback_selector import FallbackQuestionSelector
from interview_prep.services.question_generation.question_requester import QuestionRequester

QUOTA_FALLBACK_MESSAGE = "AI quota exceeded. Using high-quality curated questions."
INVALID_RESPONSE_FALLBACK_MESSAGE = "AI response could not be used. Using high-quality curated questions."
UNAVAILABLE_FALLBACK_MESSAGE = "Using high-quality curated questions. AI service temporarily unavailable."
DEFAULT_CATEGORY = "General"


def _text_field(record: Any, name: str) -> str:
    if not isinstance(record, dict):
        return ""
    value = record.get(name)
    if value is None:
        return ""
    return str(value).strip()


def has_question_records(value: Any) -> bool:
    """True when value is a list with at least one record carrying question text."""
    if not isinstance(value, list):
        return False
    return any(_text_field(record, "question") for record in value)


def normalize_questions(records: List[Any]) -> List[QuestionTemplate]:
    """
    Fill in missing fields on question records.

    A record without question text becomes "Question {n}" (1-based position)
    and a record without a category is labelled "General".
    """
    normalized = []
    for index, record in enumerate(records):
        normalized.append(QuestionTemplate(
            question=_text_field(record, "question") or f"Question {index + 1}",
            category=_text_field(record, "category") or DEFAULT_CATEGORY,
        ))
    return normalized


class QuestionGenerationService:
    """
    Generates interview questions with a transparent curated fallback.

    Attributes:
        requester (QuestionRequester): Client of the generation provider.
        selector (FallbackQuestionSelector): Curated question bank selector.
    """

    def __init__(self, requester: QuestionRequester, selector: FallbackQuestionSelector):
        self.requester = requester
        self.selector = selector

    def fallback_response(self, request: GenerationRequest, message: str) -> GenerateQuestionsResponse:
        questions = self.selector.select(
            request.jobRole,
            request.interviewType,
            request.difficulty,
            request.numberOfQuestions,
        )
        return GenerateQuestionsResponse(
            success=True,
            questions=normalize_questions([q.model_dump() for q in questions]),
            usedFallback=True,
            message=message,
        )

    async def generate_questions(self, request: GenerationRequest) -> GenerateQuestionsResponse:
        """
        Generate questions for a validated request.

        Raises:
            ProviderError: If the provider fails for a reason other than quota.
        """
        try:
            questions = await self.requester.generate(request)
        except QuotaExceeded:
            logger.warning("AI quota exceeded, using curated fallback questions")
            return self.fallback_response(request, QUOTA_FALLBACK_MESSAGE)
        except ParseError as e:
            logger.warning(f"Could not parse AI response ({e.message}), using curated fallback questions")
            return self.fallback_response(request, INVALID_RESPONSE_FALLBACK_MESSAGE)

        if not has_question_records(questions):
            logger.warning("Invalid AI response, using curated fallback questions")
            return self.fallback_response(request, INVALID_RESPONSE_FALLBACK_MESSAGE)

        validated_questions = normalize_questions(questions)[:request.numberOfQuestions]
        logger.info(f"Successfully generated {len(validated_questions)} questions")
        return GenerateQuestionsResponse(
            success=True,
            questions=validated_questions,
            usedFallback=False,
        )
