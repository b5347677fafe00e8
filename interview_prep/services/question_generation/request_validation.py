from typing import Optional
from pydantic import ValidationError as PydanticValidationError
from interview_prep.core.prompt_templates import sanitize_text
from interview_prep.errors.exceptions import MissingFieldsError, QuestionCountError, ValidationError
from interview_prep.schemas.question_schemas import (
    Difficulty,
    GenerateQuestionsPayload,
    GenerationRequest,
    InterviewType,
)

MIN_QUESTIONS = 3
MAX_QUESTIONS = 10


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _prompt_text(value: Optional[str]) -> Optional[str]:
    """Return value as it will appear in the prompt, or None if nothing printable is left."""
    if value is None:
        return None
    try:
        return sanitize_text(value, max_length=200, escape_html=False)
    except ValueError:
        return None


def validate_generation_request(payload: GenerateQuestionsPayload) -> GenerationRequest:
    """
    Validate the inbound body and return the generation parameters.

    Args:
        payload (GenerateQuestionsPayload): The raw request body.

    Returns:
        GenerationRequest: The validated request.

    Raises:
        MissingFieldsError: If jobRole, interviewType, difficulty or numberOfQuestions is missing.
        QuestionCountError: If numberOfQuestions is outside [3, 10].
        ValidationError: If jobRole has no printable characters, or interviewType or
            difficulty is not a known value.
    """
    required = (payload.jobRole, payload.interviewType, payload.difficulty)
    # A question count of zero is treated as missing
    if any(_is_blank(value) for value in required) or not payload.numberOfQuestions:
        raise MissingFieldsError()

    job_role = _prompt_text(payload.jobRole)
    if job_role is None:
        raise ValidationError("Job role must contain printable characters")

    if payload.numberOfQuestions < MIN_QUESTIONS or payload.numberOfQuestions > MAX_QUESTIONS:
        raise QuestionCountError(MIN_QUESTIONS, MAX_QUESTIONS)

    interview_type = payload.interviewType.strip().lower()
    if interview_type not in {t.value for t in InterviewType}:
        raise ValidationError("Interview type must be one of: technical, behavioral, mixed")

    difficulty = payload.difficulty.strip().lower()
    if difficulty not in {d.value for d in Difficulty}:
        raise ValidationError("Difficulty must be one of: easy, medium, hard")

    company = _prompt_text(payload.company)

    try:
        return GenerationRequest(
            jobRole=job_role,
            company=company,
            interviewType=InterviewType(interview_type),
            difficulty=Difficulty(difficulty),
            numberOfQuestions=payload.numberOfQuestions,
        )
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid generation request: {e.errors()[0].get('msg')}") from e
